"""Tests for custom exception hierarchy."""

import pytest

from prop_catalog.exceptions import (
    AddressError,
    AlreadyOwned,
    CatalogError,
    ChildNotFound,
    ConfigurationError,
    CyclicChild,
    MisplacedChild,
    DuplicateChild,
    EmptyAggregate,
    InvalidAssignment,
    MalformedAddress,
    MalformedRecord,
    MeasurementError,
    MembershipError,
    NoParent,
    NonPositiveArea,
    NonPositiveMeasurement,
    NullChild,
    RecordError,
    SinkError,
    UnitNotFoundError,
    UnsupportedForGroup,
    UnsupportedForLeaf,
    UnsupportedOperation,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_catalog_error_is_exception(self) -> None:
        assert isinstance(CatalogError("test"), Exception)

    @pytest.mark.parametrize("cls", [MalformedAddress, NoParent])
    def test_address_errors(self, cls: type) -> None:
        assert issubclass(cls, AddressError)
        assert issubclass(cls, CatalogError)

    @pytest.mark.parametrize("cls", [NonPositiveArea, NonPositiveMeasurement, EmptyAggregate])
    def test_measurement_errors(self, cls: type) -> None:
        assert issubclass(cls, MeasurementError)

    def test_empty_aggregate_is_not_non_positive_area(self) -> None:
        """Callers can tell "nothing to sum" from "measured zero"."""
        assert not issubclass(EmptyAggregate, NonPositiveArea)
        assert not issubclass(NonPositiveArea, EmptyAggregate)

    @pytest.mark.parametrize("cls", [UnsupportedForLeaf, UnsupportedForGroup])
    def test_unsupported_errors(self, cls: type) -> None:
        assert issubclass(cls, UnsupportedOperation)

    @pytest.mark.parametrize(
        "cls", [NullChild, DuplicateChild, ChildNotFound, AlreadyOwned, CyclicChild, MisplacedChild]
    )
    def test_membership_errors(self, cls: type) -> None:
        assert issubclass(cls, MembershipError)

    @pytest.mark.parametrize(
        "cls", [InvalidAssignment, ConfigurationError, SinkError, UnitNotFoundError, RecordError]
    )
    def test_other_errors_are_catalog_errors(self, cls: type) -> None:
        assert issubclass(cls, CatalogError)

    def test_malformed_record_is_record_error(self) -> None:
        assert isinstance(MalformedRecord("test"), RecordError)

    def test_exception_message(self) -> None:
        err = NoParent("Address (5,6) has no parent address")
        assert str(err) == "Address (5,6) has no parent address"

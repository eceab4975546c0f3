"""Tests for serialization helpers."""

from decimal import Decimal

from prop_catalog.models.base import Address
from prop_catalog.models.catalog import GroupUnit, LeafUnit, Status, UnitRecord
from prop_catalog.sinks.serialization import record_to_dict, serialize_value, to_dict, unit_to_dict


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_decimal_keeps_precision(self) -> None:
        assert serialize_value(Decimal("1234.50")) == "1234.50"

    def test_enum(self) -> None:
        assert serialize_value(Status.SOLD) == "SOLD"

    def test_address(self) -> None:
        assert serialize_value(Address(5, 1, 2)) == "5 1 2"

    def test_nested(self) -> None:
        value = {"a": [Decimal("1"), (Status.FOR_SALE,)], "b": 3}
        assert serialize_value(value) == {"a": ["1", ["FOR_SALE"]], "b": 3}

    def test_passthrough(self) -> None:
        assert serialize_value("x") == "x"
        assert serialize_value(None) is None


class TestUnitToDict:
    """Tests for unit_to_dict and to_dict."""

    def test_leaf(self, parcel: LeafUnit) -> None:
        assert unit_to_dict(parcel) == {
            "unit_id": 6,
            "kind": "leaf",
            "address": "8 1",
            "status": "FOR_SALE",
            "area": "500",
            "total_price": "5000",
            "price_per_area": "10",
        }

    def test_group(self, building: GroupUnit) -> None:
        data = unit_to_dict(building)

        assert data["kind"] == "group"
        assert data["total_price"] == "7500"
        assert [child["address"] for child in data["children"]] == ["3 3 1", "3 3 2"]
        assert "errors" not in data

    def test_unmeasurable_leaf(self) -> None:
        data = unit_to_dict(LeafUnit(1, Address(1, 1), Status.FOR_SALE, 10, 0))

        assert data["area"] == "10"
        assert data["total_price"] is None
        assert data["errors"] == {"total_price": "NonPositiveMeasurement"}

    def test_empty_group(self) -> None:
        data = unit_to_dict(GroupUnit(1, Address(9, 9)))

        assert data["area"] is None
        assert data["children"] == []
        assert data["errors"] == {"area": "EmptyAggregate", "total_price": "EmptyAggregate"}

    def test_to_dict_dispatch(self, parcel: LeafUnit) -> None:
        record = UnitRecord(Decimal("1"), Decimal("2"), "SOLD", "1 1")

        assert to_dict(parcel)["kind"] == "leaf"
        assert to_dict(record)["total_price"] == "2"
        assert to_dict({"k": 1}) == {"k": 1}
        assert to_dict(42) == {"value": "42"}

    def test_record_to_dict(self) -> None:
        record = UnitRecord(Decimal("700"), Decimal("21000.50"), "FOR_SALE", "5 1 1")

        assert record_to_dict(record) == {
            "area": "700",
            "total_price": "21000.50",
            "status": "FOR_SALE",
            "address": "5 1 1",
        }

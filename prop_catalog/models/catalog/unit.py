"""Common contract shared by leaf and group units."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Iterator

from prop_catalog.exceptions import InvalidAssignment, MeasurementError
from prop_catalog.models.base import Address
from prop_catalog.models.catalog.enums import Status

if TYPE_CHECKING:
    from prop_catalog.models.catalog.group import GroupUnit

ZERO = Decimal("0")


def to_decimal(value: Decimal | int | float | str, name: str) -> Decimal:
    """Convert a number to ``Decimal`` through its string form.

    Raises
    ------
    InvalidAssignment
        If the value is missing or not numeric.
    """
    if value is None or isinstance(value, bool):
        raise InvalidAssignment(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAssignment(f"{name} must be a number, got {value!r}") from None
    if not result.is_finite():
        raise InvalidAssignment(f"{name} must be finite, got {value!r}")
    return result


class Unit(ABC):
    """A real-estate unit: either a leaf parcel or a group of sub-units.

    Callers traverse a catalog purely through this contract. ``area()``
    and ``total_price()`` may raise a ``MeasurementError`` subclass at any
    level of nesting; failures are never turned into zeros.

    Parameters
    ----------
    unit_id : int
        Identifier, stable for units built from flat records.
    address : Address
        Location of the unit.
    status : Status
        Sale status.
    area : Decimal | int | float | str
        Measured area in square meters (>= 0).
    price_per_area : Decimal | int | float | str
        Price per square meter (>= 0).
    """

    is_leaf: bool

    def __init__(
        self,
        unit_id: int,
        address: Address,
        status: Status = Status.FOR_SALE,
        area: Decimal | int | float | str = ZERO,
        price_per_area: Decimal | int | float | str = ZERO,
    ) -> None:
        if address is None:
            raise InvalidAssignment("Address cannot be None")
        area = to_decimal(area, "area")
        price_per_area = to_decimal(price_per_area, "price per area")
        if area < 0:
            raise InvalidAssignment(f"Area must not be negative, got {area}")
        if price_per_area < 0:
            raise InvalidAssignment(f"Price per area must not be negative, got {price_per_area}")

        self._unit_id = unit_id
        self._address = address
        self._status = Status(status)
        self._area = area
        self._price_per_area = price_per_area
        self._total_price = area * price_per_area
        self.parent: GroupUnit | None = None

    @property
    def unit_id(self) -> int:
        return self._unit_id

    @property
    def address(self) -> Address:
        return self._address

    @property
    def status(self) -> Status:
        return self._status

    @property
    def price_per_area(self) -> Decimal:
        return self._price_per_area

    @abstractmethod
    def area(self) -> Decimal:
        """Area in square meters."""

    @abstractmethod
    def total_price(self) -> Decimal:
        """Total price of the unit."""

    @abstractmethod
    def children(self) -> list[Unit]:
        """Copy of the direct children (empty for leaves)."""

    @abstractmethod
    def set_status(self, status: Status) -> None:
        """Change the sale status."""

    @abstractmethod
    def set_area(self, area: Decimal | int | float | str) -> None:
        """Change the measured area."""

    @abstractmethod
    def set_price_per_area(self, price_per_area: Decimal | int | float | str) -> None:
        """Change the price per square meter."""

    @abstractmethod
    def add(self, unit: Unit) -> None:
        """Attach a child unit."""

    @abstractmethod
    def remove(self, unit: Unit) -> None:
        """Detach a child unit."""

    @abstractmethod
    def find_by_address(self, target: Address | str) -> Unit | None:
        """Return the unit located at ``target`` in this subtree, if any."""

    def walk(self) -> Iterator[Unit]:
        """Yield this unit and every descendant, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()

    def display_info(self) -> str:
        """One-line summary; unavailable aggregates render as ``n/a``."""
        kind = "Unit" if self.is_leaf else "Group"
        return (
            f"{kind} #{self.unit_id} at {self.address} | "
            f"{_measure(self.area)} sqm | {_measure(self.total_price)} $ | "
            f"Status: {self.status.label}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(unit_id={self.unit_id}, address={self.address})"


def as_address(target: Address | str) -> Address:
    """Accept an ``Address`` or its string form."""
    if isinstance(target, Address):
        return target
    return Address.parse(target)


def _measure(query) -> str:
    try:
        return str(query())
    except MeasurementError:
        return "n/a"

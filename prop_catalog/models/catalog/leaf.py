"""Leaf unit: an indivisible parcel with measured area and price."""

from __future__ import annotations

from decimal import Decimal

from prop_catalog.exceptions import (
    InvalidAssignment,
    NonPositiveArea,
    NonPositiveMeasurement,
    UnsupportedForLeaf,
)
from prop_catalog.models.base import Address
from prop_catalog.models.catalog.enums import Status
from prop_catalog.models.catalog.unit import Unit, as_address, to_decimal


class LeafUnit(Unit):
    """Terminal unit whose area and price per area are authoritative.

    A leaf may be created with area 0 as a placeholder, but it cannot be
    queried until a positive area has been set.
    """

    is_leaf = True

    @classmethod
    def priced(
        cls,
        unit_id: int,
        address: Address,
        status: Status,
        area: Decimal | int | float | str,
        total_price: Decimal | int | float | str,
    ) -> LeafUnit:
        """Leaf built from a measured area and a known total price.

        The total is kept as given and returned by ``total_price()`` until
        the area or the price per area is changed, so a total that does not
        divide evenly by the area survives a load and save unchanged.
        """
        area = _positive(area, "Area")
        total = to_decimal(total_price, "total price")
        leaf = cls(unit_id, address, status, area, total / area)
        leaf._total_price = total
        return leaf

    def area(self) -> Decimal:
        if self._area == 0:
            raise NonPositiveArea(f"Unit {self.address} has no measured area")
        return self._area

    def total_price(self) -> Decimal:
        if self._area == 0 or self._price_per_area == 0:
            raise NonPositiveMeasurement(
                f"Unit {self.address} needs a positive area and price per area"
            )
        return self._total_price

    def children(self) -> list[Unit]:
        return []

    def set_status(self, status: Status) -> None:
        self._status = Status(status)

    def set_area(self, area: Decimal | int | float | str) -> None:
        self._area = _positive(area, "Area")
        self._total_price = self._area * self._price_per_area

    def set_price_per_area(self, price_per_area: Decimal | int | float | str) -> None:
        self._price_per_area = _positive(price_per_area, "Price per area")
        self._total_price = self._area * self._price_per_area

    def add(self, unit: Unit) -> None:
        raise UnsupportedForLeaf("A leaf unit cannot contain sub-units")

    def remove(self, unit: Unit) -> None:
        raise UnsupportedForLeaf("A leaf unit cannot contain sub-units")

    def find_by_address(self, target: Address | str) -> Unit | None:
        if self.address == as_address(target):
            return self
        return None


def _positive(value: Decimal | int | float | str, name: str) -> Decimal:
    result = to_decimal(value, name.lower())
    if result <= 0:
        raise InvalidAssignment(f"{name} must be positive, got {result}")
    return result

"""Group unit: a composite whose area and price roll up from its children."""

from __future__ import annotations

from decimal import Decimal

from prop_catalog.exceptions import (
    AlreadyOwned,
    ChildNotFound,
    CyclicChild,
    DuplicateChild,
    EmptyAggregate,
    InvalidAssignment,
    MisplacedChild,
    NullChild,
    UnsupportedForGroup,
)
from prop_catalog.models.base import Address
from prop_catalog.models.catalog.enums import Status
from prop_catalog.models.catalog.unit import ZERO, Unit, as_address, to_decimal


class GroupUnit(Unit):
    """Composite unit (a building, a subdivided apartment, ...).

    Area and total price are never stored authoritatively: every query
    sums the children again. The last computed values are kept in
    ``cached_area`` and ``cached_total_price`` for display only.

    A group exclusively owns its direct children. Adding a unit sets its
    ``parent``; removing it clears it again.
    """

    is_leaf = False

    def __init__(
        self,
        unit_id: int,
        address: Address,
        status: Status = Status.FOR_SALE,
    ) -> None:
        super().__init__(unit_id, address, status)
        self._children: list[Unit] = []

    @property
    def cached_area(self) -> Decimal:
        return self._area

    @property
    def cached_total_price(self) -> Decimal:
        return self._total_price

    def area(self) -> Decimal:
        self._require_children("area")
        total = sum((child.area() for child in self._children), ZERO)
        self._area = total
        return total

    def total_price(self) -> Decimal:
        self._require_children("total price")
        total = sum((child.total_price() for child in self._children), ZERO)
        self._total_price = total
        return total

    def children(self) -> list[Unit]:
        return list(self._children)

    def set_status(self, status: Status) -> None:
        self._status = Status(status)
        for child in self._children:
            child.set_status(status)

    def set_area(self, area: Decimal | int | float | str) -> None:
        raise UnsupportedForGroup(
            "The area of a group is derived from its sub-units and cannot be set"
        )

    def set_price_per_area(self, price_per_area: Decimal | int | float | str) -> None:
        value = to_decimal(price_per_area, "price per area")
        if value <= 0:
            raise InvalidAssignment(f"Price per area must be positive, got {value}")
        self._price_per_area = value
        for child in self._children:
            child.set_price_per_area(value)
        if self._children:
            self.total_price()

    def add(self, unit: Unit) -> None:
        if unit is None:
            raise NullChild("Cannot add None as a sub-unit")
        if any(child is unit for child in self._children):
            raise DuplicateChild(f"{unit.address} is already a sub-unit of {self.address}")
        if unit.parent is not None:
            raise AlreadyOwned(f"{unit.address} already belongs to {unit.parent.address}")
        node: Unit | None = self
        while node is not None:
            if node is unit:
                raise CyclicChild(f"{unit.address} cannot contain itself")
            node = node.parent
        if not self.address.is_ancestor_of(unit.address):
            raise MisplacedChild(f"{unit.address} is not located under {self.address}")
        self._children.append(unit)
        unit.parent = self

    def remove(self, unit: Unit) -> None:
        for index, child in enumerate(self._children):
            if child is unit:
                del self._children[index]
                unit.parent = None
                return
        address = unit.address if unit is not None else None
        raise ChildNotFound(f"{address} is not a sub-unit of {self.address}")

    def find_by_address(self, target: Address | str) -> Unit | None:
        target = as_address(target)
        if self.address == target:
            return self
        for child in self._children:
            found = child.find_by_address(target)
            if found is not None:
                return found
        return None

    def _require_children(self, what: str) -> None:
        if not self._children:
            raise EmptyAggregate(f"Group {self.address} has no sub-units to sum the {what} of")

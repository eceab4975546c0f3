"""Editor request for changing an existing unit."""

from dataclasses import dataclass
from decimal import Decimal

from prop_catalog.models.catalog.enums import Status
from prop_catalog.models.catalog.unit import Unit


@dataclass
class UnitUpdate:
    """Fields to change on a unit; ``None`` means "leave as is".

    Updates go through the unit's own setters, so the usual validation
    applies: non-positive values raise ``InvalidAssignment`` and an area
    update on a group raises ``UnsupportedForGroup``. Status and price
    changes on a group propagate to its sub-units.
    """

    price_per_area: Decimal | int | float | str | None = None
    area: Decimal | int | float | str | None = None
    status: Status | None = None

    @property
    def is_empty(self) -> bool:
        return self.price_per_area is None and self.area is None and self.status is None

    def apply(self, unit: Unit) -> Unit:
        """Apply the update to ``unit`` and return it."""
        if self.area is not None:
            unit.set_area(self.area)
        if self.price_per_area is not None:
            unit.set_price_per_area(self.price_per_area)
        if self.status is not None:
            unit.set_status(self.status)
        return unit

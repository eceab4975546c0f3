"""In-memory catalog of top-level units."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from prop_catalog.exceptions import ChildNotFound, DuplicateChild, NullChild, UnitNotFoundError
from prop_catalog.hierarchy import HierarchyBuilder, RawRecord, flatten
from prop_catalog.models.base import Address
from prop_catalog.models.catalog import Status, Unit, UnitRecord

logger = logging.getLogger(__name__)


@dataclass
class CatalogStore:
    """Holds the forest of top-level units and answers look-ups over it."""

    units: list[Unit] = field(default_factory=list)

    def add_unit(self, unit: Unit) -> None:
        """Add a top-level unit to the catalog."""
        if unit is None:
            raise NullChild("Cannot add None to the catalog")
        if any(existing is unit for existing in self.units):
            raise DuplicateChild(f"Unit {unit.unit_id} at {unit.address} is already in the catalog")
        self.units.append(unit)
        logger.info("Added unit %d at %s", unit.unit_id, unit.address)

    def remove_unit(self, unit: Unit) -> None:
        """Remove a top-level unit from the catalog."""
        for index, existing in enumerate(self.units):
            if existing is unit:
                del self.units[index]
                logger.info("Removed unit %d at %s", unit.unit_id, unit.address)
                return
        raise ChildNotFound(f"Unit {getattr(unit, 'unit_id', None)} is not in the catalog")

    def clear(self) -> None:
        """Drop every unit."""
        self.units.clear()
        logger.info("All units cleared")

    def load(self, records: Iterable[RawRecord], builder: HierarchyBuilder | None = None) -> int:
        """Build units from flat records and add them.

        Returns
        -------
        int
            Number of top-level units added.
        """
        builder = builder or HierarchyBuilder()
        roots = builder.build(records)
        for root in roots:
            self.add_unit(root)
        return len(roots)

    def records(self) -> list[UnitRecord]:
        """Flatten the catalog into one record per leaf."""
        return flatten(self.units)

    # Query methods
    def all_units(self) -> list[Unit]:
        """Copy of the top-level units."""
        return list(self.units)

    def iter_units(self) -> Iterator[Unit]:
        """Every unit in the catalog, depth first."""
        for unit in self.units:
            yield from unit.walk()

    def find_by_address(self, address: Address | str) -> Unit | None:
        """Unit located at ``address``, or ``None``."""
        for unit in self.units:
            found = unit.find_by_address(address)
            if found is not None:
                return found
        return None

    def find_by_id(self, unit_id: int) -> Unit | None:
        """First unit with ``unit_id``, or ``None``."""
        for unit in self.iter_units():
            if unit.unit_id == unit_id:
                return unit
        return None

    def get(self, unit_id: int) -> Unit:
        """Unit with ``unit_id``; raises ``UnitNotFoundError`` if absent."""
        unit = self.find_by_id(unit_id)
        if unit is None:
            raise UnitNotFoundError(f"Unit {unit_id} not found")
        return unit

    def summary(self) -> dict[str, int]:
        """Return summary counts of the catalog."""
        counts = {
            "top_level": len(self.units),
            "groups": 0,
            "leaves": 0,
            "for_sale": 0,
            "sold": 0,
        }
        for unit in self.iter_units():
            if not unit.is_leaf:
                counts["groups"] += 1
                continue
            counts["leaves"] += 1
            if unit.status == Status.SOLD:
                counts["sold"] += 1
            else:
                counts["for_sale"] += 1
        return counts

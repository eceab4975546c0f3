"""Flatten unit trees back into records, one per leaf."""

from typing import Iterable, Iterator

from prop_catalog.models.catalog import Unit, UnitRecord
from prop_catalog.models.catalog.unit import ZERO


def flatten_unit(unit: Unit) -> Iterator[UnitRecord]:
    """Yield one record per leaf under ``unit``, depth first.

    A group without sub-units has nothing to aggregate; it is written as a
    zero-area, zero-price record, which ``HierarchyBuilder`` reads back as
    an empty group.
    """
    if unit.is_leaf:
        yield UnitRecord(
            area=unit.area(),
            total_price=unit.total_price(),
            status=unit.status.value,
            address=unit.address.to_file_string(),
        )
        return

    children = unit.children()
    if not children:
        yield UnitRecord(
            area=ZERO,
            total_price=ZERO,
            status=unit.status.value,
            address=unit.address.to_file_string(),
        )
        return

    for child in children:
        yield from flatten_unit(child)


def flatten(units: Iterable[Unit]) -> list[UnitRecord]:
    """Flatten a forest into records accepted by ``HierarchyBuilder``."""
    return [record for unit in units for record in flatten_unit(unit)]

"""Catalog domain models."""

from prop_catalog.models.catalog.enums import Status
from prop_catalog.models.catalog.group import GroupUnit
from prop_catalog.models.catalog.leaf import LeafUnit
from prop_catalog.models.catalog.record import UnitRecord
from prop_catalog.models.catalog.unit import Unit
from prop_catalog.models.catalog.update import UnitUpdate

__all__ = [
    "GroupUnit",
    "LeafUnit",
    "Status",
    "Unit",
    "UnitRecord",
    "UnitUpdate",
]

"""Real-estate catalog of parcels and recursively subdivided buildings."""

from prop_catalog.hierarchy import HierarchyBuilder, build_forest, flatten
from prop_catalog.models.base import Address
from prop_catalog.models.catalog import GroupUnit, LeafUnit, Status, Unit, UnitRecord
from prop_catalog.store import CatalogStore

__version__ = "0.1.0"

__all__ = [
    "Address",
    "CatalogStore",
    "GroupUnit",
    "HierarchyBuilder",
    "LeafUnit",
    "Status",
    "Unit",
    "UnitRecord",
    "build_forest",
    "flatten",
]

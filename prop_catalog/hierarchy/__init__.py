"""Conversion between flat records and unit trees."""

from prop_catalog.hierarchy.builder import (
    HierarchyBuilder,
    ParsedRecord,
    RawRecord,
    build_forest,
    parse_record,
)
from prop_catalog.hierarchy.flatten import flatten, flatten_unit
from prop_catalog.hierarchy.ids import stable_id

__all__ = [
    "HierarchyBuilder",
    "ParsedRecord",
    "RawRecord",
    "build_forest",
    "flatten",
    "flatten_unit",
    "parse_record",
    "stable_id",
]

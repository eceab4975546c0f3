"""JSON-ready conversion of units and flat records."""

from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from prop_catalog.exceptions import MeasurementError
from prop_catalog.models.base import Address
from prop_catalog.models.catalog import Unit


def to_dict(obj: Any) -> dict:
    """Dictionary for a unit tree, a dataclass record or a plain dict."""
    if isinstance(obj, Unit):
        return unit_to_dict(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return record_to_dict(obj)
    if isinstance(obj, dict):
        return obj
    return {"value": str(obj)}


def record_to_dict(record: Any) -> dict:
    """Shallow field-by-field conversion of a dataclass such as ``UnitRecord``."""
    return {f.name: serialize_value(getattr(record, f.name)) for f in fields(record)}


def unit_to_dict(unit: Unit) -> dict:
    """Nested dictionary for a unit and its sub-units.

    Aggregates that cannot be computed are written as ``None`` and the
    reason is recorded under ``"errors"``.
    """
    data: dict[str, Any] = {
        "unit_id": unit.unit_id,
        "kind": "leaf" if unit.is_leaf else "group",
        "address": serialize_value(unit.address),
        "status": serialize_value(unit.status),
    }
    errors: dict[str, str] = {}
    for name, query in (("area", unit.area), ("total_price", unit.total_price)):
        try:
            data[name] = serialize_value(query())
        except MeasurementError as exc:
            data[name] = None
            errors[name] = type(exc).__name__
    if unit.is_leaf:
        data["price_per_area"] = serialize_value(unit.price_per_area)
    else:
        data["children"] = [unit_to_dict(child) for child in unit.children()]
    if errors:
        data["errors"] = errors
    return data


def serialize_value(value: Any) -> Any:
    """JSON-safe form of a value.

    ``Decimal`` becomes its exact string, enums their value, addresses their
    storage form. Containers are converted item by item.
    """
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Address):
        return value.to_file_string()
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value

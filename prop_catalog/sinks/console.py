"""Console sink for browsing a catalog."""

import json
from typing import Iterable

from prop_catalog.exceptions import MeasurementError
from prop_catalog.models.catalog import Unit, UnitRecord
from prop_catalog.sinks.serialization import record_to_dict

INDENT = "  "


def describe(unit: Unit) -> str:
    """One-line summary of a unit."""
    return unit.display_info()


def render_tree(unit: Unit, depth: int = 0) -> str:
    """Indented listing of ``unit`` and all of its sub-units.

    Example::

        + Group #123 at (5,1) | Total Area: 1400 sqm | Total Price: 42000 $ | For sale
          - Unit #456 at (5,1,1) | 700 sqm | 21000 $ | For sale
          - Unit #789 at (5,1,2) | 700 sqm | 21000 $ | Sold
    """
    indent = INDENT * depth
    if unit.is_leaf:
        line = (
            f"{indent}- Unit #{unit.unit_id} at {unit.address}"
            f" | {_measure(unit.area)} sqm"
            f" | {_measure(unit.total_price)} $"
            f" | {unit.status.label}"
        )
        return line + "\n"

    lines = [
        f"{indent}+ Group #{unit.unit_id} at {unit.address}"
        f" | Total Area: {_measure(unit.area)} sqm"
        f" | Total Price: {_measure(unit.total_price)} $"
        f" | {unit.status.label}\n"
    ]
    for child in unit.children():
        lines.append(render_tree(child, depth + 1))
    return "".join(lines)


def _measure(query) -> str:
    try:
        return str(query())
    except MeasurementError as exc:
        return f"n/a ({type(exc).__name__})"


class ConsoleSink:
    """Output units and records to console (stdout)."""

    def __init__(self, max_units: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        max_units : int | None
            Maximum top-level units (or records) to print per call
            (None for all).
        """
        self.max_units = max_units
        self._counts: dict[str, int] = {}

    def write_units(self, units: Iterable[Unit]) -> None:
        """Print each top-level unit as an indented tree."""
        units = list(units)
        print(f"\n{'='*60}")
        print(f"Catalog ({len(units)} top-level units)")
        print("=" * 60)

        shown = units[: self.max_units] if self.max_units else units
        for unit in shown:
            print(render_tree(unit), end="")

        if self.max_units and len(units) > self.max_units:
            print(f"... and {len(units) - self.max_units} more units")

        self._counts["units"] = self._counts.get("units", 0) + len(units)

    def write_records(self, records: Iterable[UnitRecord]) -> None:
        """Print flat records, one JSON object per line."""
        records = list(records)
        print(f"\n{'='*60}")
        print(f"Records ({len(records)} records)")
        print("=" * 60)

        shown = records[: self.max_units] if self.max_units else records
        for record in shown:
            print(json.dumps(record_to_dict(record), ensure_ascii=False, default=str))

        if self.max_units and len(records) > self.max_units:
            print(f"... and {len(records) - self.max_units} more records")

        self._counts["records"] = self._counts.get("records", 0) + len(records)

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for kind, count in self._counts.items():
            print(f"  {kind}: {count}")

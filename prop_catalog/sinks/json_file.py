"""JSON file sink for exporting unit trees."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from prop_catalog.exceptions import SinkError
from prop_catalog.models.catalog import Unit
from prop_catalog.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output unit trees (or flat records) to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_units(self, name: str, units: Iterable[Unit]) -> Path:
        """Write nested unit trees to ``<name>.json``."""
        return self.write_batch(name, list(units))

    def write_batch(self, name: str, records: list[Any]) -> Path:
        """Write a batch of units, records or dicts to ``<name>.json``."""
        file_path = self.output_dir / f"{name}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise SinkError(f"Cannot write {file_path}: {exc}") from exc

        self._counts[name] = len(records)
        logger.info("Wrote %d entries to %s", len(records), file_path)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for name, count in self._counts.items():
            print(f"  {name}: {count} entries")

"""CSV file sink: write a catalog back to its flat file."""

import csv
import logging
from pathlib import Path
from typing import Iterable

from prop_catalog.exceptions import SinkError
from prop_catalog.hierarchy import flatten
from prop_catalog.models.catalog import Unit, UnitRecord
from prop_catalog.sinks.serialization import serialize_value

logger = logging.getLogger(__name__)

HEADER = ["Area", "Price", "Status", "Address"]


class CsvFileSink:
    """Output units as ``Area,Price,Status,Address`` rows, one per leaf."""

    def __init__(self, path: str | Path, delimiter: str = ",") -> None:
        """Initialize CSV file sink.

        Parameters
        ----------
        path : str | Path
            File to (over)write. Parent directories are created.
        delimiter : str
            Column delimiter.
        """
        self.path = Path(path)
        self.delimiter = delimiter
        self.count = 0

    def write_units(self, units: Iterable[Unit]) -> int:
        """Flatten ``units`` and write them; returns the number of rows."""
        return self.write_records(flatten(units))

    def write_records(self, records: Iterable[UnitRecord]) -> int:
        """Write flat records; returns the number of rows."""
        rows = [
            [
                serialize_value(record.area),
                serialize_value(record.total_price),
                serialize_value(record.status),
                record.address,
            ]
            for record in records
        ]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, delimiter=self.delimiter)
                writer.writerow(HEADER)
                writer.writerows(rows)
        except OSError as exc:
            raise SinkError(f"Cannot write {self.path}: {exc}") from exc

        self.count = len(rows)
        logger.info("Wrote %d records to %s", self.count, self.path)
        return self.count

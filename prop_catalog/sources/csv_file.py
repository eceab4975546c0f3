"""CSV record source: the flat file a catalog is loaded from."""

import csv
import logging
from pathlib import Path
from typing import Iterator

from prop_catalog.models.catalog import UnitRecord

logger = logging.getLogger(__name__)

NUM_FIELDS = 4


class CsvRecordSource:
    """Read ``Area,Price,Status,Address`` rows as raw ``UnitRecord``s.

    Values are left as strings; ``HierarchyBuilder`` validates them. Rows
    with fewer than four columns are logged and skipped, blank lines are
    ignored.
    """

    def __init__(self, path: str | Path, has_header: bool = True, delimiter: str = ",") -> None:
        """Initialize CSV source.

        Parameters
        ----------
        path : str | Path
            CSV file to read.
        has_header : bool
            Skip the first row.
        delimiter : str
            Column delimiter.
        """
        self.path = Path(path)
        self.has_header = has_header
        self.delimiter = delimiter
        self.skipped = 0

    def __iter__(self) -> Iterator[UnitRecord]:
        self.skipped = 0
        with open(self.path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f, delimiter=self.delimiter)
            if self.has_header:
                next(reader, None)
            for row in reader:
                if not any(cell.strip() for cell in row):
                    continue
                if len(row) < NUM_FIELDS:
                    self.skipped += 1
                    logger.warning("Invalid line format at %s:%d: %r", self.path, reader.line_num, row)
                    continue
                area, price, status, address = (cell.strip() for cell in row[:NUM_FIELDS])
                yield UnitRecord(area=area, total_price=price, status=status, address=address)

"""Flat record exchanged with record sources and sinks."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class UnitRecord:
    """One row of a flat catalog file: ``Area,Price,Status,Address``.

    Records read from a file carry raw strings; records produced by
    flattening a tree carry ``Decimal``/``Status`` values. ``address`` is
    always the space separated storage form (``"5 1 2"``).
    """

    area: Decimal | str
    total_price: Decimal | str
    status: str
    address: str

    def as_row(self) -> list[str]:
        """Row for a CSV writer."""
        return [str(self.area), str(self.total_price), str(self.status), self.address]

"""Record sources feeding the hierarchy builder."""

from prop_catalog.sources.csv_file import CsvRecordSource

__all__ = ["CsvRecordSource"]

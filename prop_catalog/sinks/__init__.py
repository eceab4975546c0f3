"""Output sinks for exporting a catalog."""

from prop_catalog.sinks.console import ConsoleSink, describe, render_tree
from prop_catalog.sinks.csv_file import CsvFileSink
from prop_catalog.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "CsvFileSink", "JsonFileSink", "describe", "render_tree"]

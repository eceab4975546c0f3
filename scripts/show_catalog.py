#!/usr/bin/env python3
"""Load a catalog CSV and print its unit trees."""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from prop_catalog.config import CatalogConfig
from prop_catalog.exceptions import CatalogError
from prop_catalog.hierarchy import HierarchyBuilder
from prop_catalog.logging import get_logger, setup_logging
from prop_catalog.sinks import ConsoleSink, describe
from prop_catalog.sources import CsvRecordSource
from prop_catalog.store import CatalogStore

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    config = CatalogConfig.from_env()
    setup_logging(config.log_level, config.log_format, config.log_file)

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("csv_path", nargs="?", type=Path, default=config.input.csv_path)
    parser.add_argument("--find", help='Address to look up, e.g. "5 1 2"')
    parser.add_argument("--max-units", type=int, default=None)
    args = parser.parse_args(argv)

    source = CsvRecordSource(
        args.csv_path,
        has_header=config.input.has_header,
        delimiter=config.input.delimiter,
    )
    builder = HierarchyBuilder()
    store = CatalogStore()
    store.load(source, builder=builder)

    if source.skipped or builder.skipped:
        logger.warning(
            "%d short rows and %d invalid records were skipped",
            source.skipped,
            builder.skipped,
        )

    if args.find:
        try:
            unit = store.find_by_address(args.find)
        except CatalogError as exc:
            print(f"Invalid address {args.find!r}: {exc}")
            return 1
        if unit is None:
            print(f"No unit at {args.find}")
            return 1
        print(describe(unit))
        return 0

    console = ConsoleSink(max_units=args.max_units)
    console.write_units(store.all_units())
    console.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

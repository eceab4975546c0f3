#!/usr/bin/env python3
"""Generate a sample catalog file.

Writes a shuffled ``Area,Price,Status,Address`` CSV for a synthetic city,
rebuilds it with the hierarchy builder and exports the resulting trees to
JSON next to it.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from prop_catalog.config import CatalogConfig
from prop_catalog.generators import CatalogGenerator
from prop_catalog.logging import get_logger, setup_logging
from prop_catalog.sinks import ConsoleSink, CsvFileSink, JsonFileSink
from prop_catalog.store import CatalogStore

logger = get_logger(__name__)


def parse_args(config: CatalogConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--sites", type=int, default=config.generator.num_sites)
    parser.add_argument("--max-depth", type=int, default=config.generator.max_depth)
    parser.add_argument("--seed", type=int, default=config.generator.seed)
    parser.add_argument("--output-dir", type=Path, default=config.output.output_dir)
    parser.add_argument("--no-shuffle", action="store_true")
    parser.add_argument("--quiet", action="store_true", help="Do not print the trees")
    return parser.parse_args()


def main() -> None:
    """Generate, write, rebuild and export a sample catalog."""
    config = CatalogConfig.from_env()
    setup_logging(config.log_level, config.log_format, config.log_file)
    args = parse_args(config)

    generator = CatalogGenerator(
        seed=args.seed,
        num_sites=args.sites,
        max_depth=args.max_depth,
        shuffle=not args.no_shuffle,
    )
    records = generator.generate()

    csv_path = args.output_dir / config.output.csv_filename
    CsvFileSink(csv_path).write_records(records)

    store = CatalogStore()
    loaded = store.load(records)
    logger.info("Rebuilt %d top-level units from %d records", loaded, len(records))

    json_sink = JsonFileSink(args.output_dir, pretty=config.output.pretty_json)
    json_sink.write_units("catalog", store.all_units())

    if not args.quiet:
        console = ConsoleSink()
        console.write_units(store.all_units())

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for name, count in store.summary().items():
        print(f"{name + ':':12}{count}")
    print(f"\nFiles saved to: {args.output_dir}")


if __name__ == "__main__":
    main()

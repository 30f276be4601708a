#!/usr/bin/env python3
"""Bulk-import customers from a CSV file into the configured store.

Accepts either headerless seven-field rows or a file written by
export_customers.py (use --exported).
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ro_track.config import RoTrackConfig
from ro_track.exceptions import RoTrackError
from ro_track.io import import_customers, import_exported_csv
from ro_track.logging import setup_logging
from ro_track.store import open_store

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import customers from CSV")
    parser.add_argument("path", type=Path, help="CSV file to import")
    parser.add_argument("--exported", action="store_true", help="File has an export header row")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    config = RoTrackConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    text = args.path.read_text(encoding="utf-8")
    reader = import_exported_csv if args.exported else import_customers
    outcome = {}

    def merge(customers):
        result = reader(
            text,
            {c.serial_number for c in customers},
            years_ahead=config.schedule.years_ahead,
        )
        outcome["result"] = result
        return customers + result.customers

    try:
        store = open_store(config)
        try:
            store.update_customers(merge)
        finally:
            store.close()
    except RoTrackError as e:
        logger.error("Import failed: %s", e)
        return 1

    result = outcome["result"]
    for error in result.errors:
        print(f"Line {error.line_number}: {error.message} -> {error.data}")
    print(f"Imported {result.success_count} customers, {len(result.errors)} rows rejected")
    return 0


if __name__ == "__main__":
    sys.exit(main())

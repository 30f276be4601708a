#!/usr/bin/env python3
"""Export all customers (without payment history) to CSV."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ro_track.config import RoTrackConfig
from ro_track.io import export_customers_csv
from ro_track.logging import setup_logging
from ro_track.store import open_store

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Export customers to CSV")
    parser.add_argument("--output", type=Path, default=Path("ro-track-customers.csv"))
    args = parser.parse_args()

    config = RoTrackConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    store = open_store(config)
    try:
        customers = store.load_customers()
    finally:
        store.close()

    if not customers:
        logger.warning("No customer data to export.")
        return 1

    args.output.write_text(export_customers_csv(customers) + "\n", encoding="utf-8")
    logger.info("Exported %d customers to %s", len(customers), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Populate a local store with sample customers.

Generates customers with Faker, simulates payment behavior against today,
and writes them to the configured local JSON document.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ro_track.config import RoTrackConfig
from ro_track.generators import CustomerGenerator, PaymentBehavior
from ro_track.logging import setup_logging
from ro_track.models import AppSettings
from ro_track.store import LocalJsonStore

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate sample RO rental customers")
    parser.add_argument("--customers", type=int, default=25, help="Number of customers")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", type=Path, default=None, help="Local JSON document path")
    parser.add_argument("--payment-link", default=None, help="Payment link stored in settings")
    return parser.parse_args()


def main() -> None:
    """Generate and store sample customers."""
    args = parse_args()
    config = RoTrackConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    seed = args.seed if args.seed is not None else config.seed
    output = args.output or config.storage.data_file
    today = date.today()

    customer_gen = CustomerGenerator(seed=seed, years_ahead=config.schedule.years_ahead, today=today)
    behavior = PaymentBehavior(seed=seed)

    customers = []
    for customer in customer_gen.generate_batch(args.customers):
        customers.append(behavior.apply(customer, reference_date=today))

    store = LocalJsonStore(output)
    store.save_customers(customers)
    if args.payment_link:
        store.save_settings(AppSettings(payment_link=args.payment_link))

    logger.info("Wrote %d sample customers to %s", len(customers), output)


if __name__ == "__main__":
    main()

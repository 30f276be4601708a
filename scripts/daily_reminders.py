#!/usr/bin/env python3
"""Generate today's consolidated reminders and deliver them to a sink.

Sinks:
- console: print reminders to stdout
- json: write reminders.json to the output directory
- kafka: publish each reminder to the reminder topic, keyed by customer
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ro_track.billing.schedule import extend_schedule
from ro_track.config import RoTrackConfig
from ro_track.exceptions import RoTrackError
from ro_track.logging import setup_logging
from ro_track.reminders import generate_daily_reminders
from ro_track.sinks import ConsoleSink, JsonFileSink, KafkaSink
from ro_track.store import open_store

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate daily payment reminders")
    parser.add_argument(
        "--sink",
        choices=["console", "json", "kafka"],
        default="console",
        help="Where to deliver reminders",
    )
    parser.add_argument(
        "--extend-schedules",
        action="store_true",
        help="Append newly due months to every schedule before generating",
    )
    return parser.parse_args()


def build_sink(name: str, config: RoTrackConfig):
    if name == "json":
        return JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    if name == "kafka":
        return KafkaSink(config.kafka)
    return ConsoleSink(show_links=True)


def main() -> int:
    """Run one reminder generation pass."""
    args = parse_args()
    config = RoTrackConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    now = datetime.now()
    try:
        store = open_store(config)
        try:
            if args.extend_schedules:

                def extend(customers):
                    for customer in customers:
                        extend_schedule(customer, config.schedule.years_ahead, now)
                    return customers

                customers = store.update_customers(extend)
            else:
                customers = store.load_customers()
            settings = store.load_settings()
        finally:
            store.close()

        reminders = generate_daily_reminders(customers, settings, now=now)

        sink = build_sink(args.sink, config)
        entity = config.kafka.reminder_topic if args.sink == "kafka" else "reminders"
        sink.write_batch(entity, reminders)
        sink.close()
    except RoTrackError as e:
        logger.error("Reminder generation failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

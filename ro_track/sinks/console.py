"""Console sink for reviewing reminders before they are sent."""

import json
from typing import Any

from ro_track.models import Reminder
from ro_track.reminders.messages import sms_url, whatsapp_url
from ro_track.sinks.serialization import to_dict

RULE = "-" * 60


class ConsoleSink:
    """Print reminders as readable text blocks on stdout.

    Each reminder shows the customer, the reminder type, both message
    texts and, with ``show_links``, the WhatsApp and SMS share links.
    Records that are not reminders are printed as JSON.
    """

    def __init__(self, show_links: bool = False, max_records: int | None = None) -> None:
        self.show_links = show_links
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def _print_reminder(self, reminder: Reminder) -> None:
        print(RULE)
        print(f"[{reminder.type.value}] {reminder.customer_name} ({reminder.customer_mobile})")
        print(reminder.message)
        print(reminder.message_hi)
        if self.show_links:
            print(f"WhatsApp: {whatsapp_url(reminder.customer_mobile, reminder.message)}")
            print(f"SMS: {sms_url(reminder.customer_mobile, reminder.message)}")

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Print a batch, truncated to ``max_records`` when set."""
        shown = records[: self.max_records] if self.max_records else records

        print(f"{entity_type}: {len(records)} to send")
        for record in shown:
            if isinstance(record, Reminder):
                self._print_reminder(record)
            else:
                print(json.dumps(to_dict(record), ensure_ascii=False, default=str))
        if len(shown) < len(records):
            print(f"({len(records) - len(shown)} not shown)")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print per-entity totals."""
        print(RULE)
        for entity_type, count in self._counts.items():
            print(f"{entity_type} total: {count}")

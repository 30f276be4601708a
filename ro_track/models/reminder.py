"""Reminder model."""

from dataclasses import dataclass

from ro_track.models.enums import ReminderType


@dataclass
class Reminder:
    """Consolidated payment reminder for one customer.

    Regenerated on demand; ``id`` is only unique within one generation batch.
    """

    id: str
    customer_id: str
    customer_name: str
    customer_mobile: str
    type: ReminderType
    message: str
    message_hi: str

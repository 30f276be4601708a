"""Domain models for RO rental tracking."""

from ro_track.models.customer import Customer, Payment
from ro_track.models.enums import PaymentStatus, ReminderType
from ro_track.models.reminder import Reminder
from ro_track.models.settings import PAYMENT_LINK_PLACEHOLDER, AppSettings

__all__ = [
    "AppSettings",
    "Customer",
    "PAYMENT_LINK_PLACEHOLDER",
    "Payment",
    "PaymentStatus",
    "Reminder",
    "ReminderType",
]

"""Payment schedule, status and payment bookkeeping."""

from ro_track.billing.payments import (
    as_utc,
    bulk_set_payment_status,
    payment_history,
    set_payment_status,
)
from ro_track.billing.schedule import end_of_month, extend_schedule, generate_schedule
from ro_track.billing.status import classify, is_overdue, start_of_day

__all__ = [
    "as_utc",
    "bulk_set_payment_status",
    "classify",
    "end_of_month",
    "extend_schedule",
    "generate_schedule",
    "is_overdue",
    "payment_history",
    "set_payment_status",
    "start_of_day",
]

"""Display status of a monthly payment record.

Overdue is never stored. It is derived from the stored status and the
current date every time it is needed, so it cannot go stale as days pass.
"""

from datetime import date, datetime

from ro_track.billing.schedule import end_of_month
from ro_track.models import Payment, PaymentStatus


def start_of_day(value: date | datetime) -> date:
    """Normalize a date or timestamp to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_overdue(payment: Payment, today: date | datetime) -> bool:
    """Return True when the month has fully ended and is not paid.

    The month end is taken at end-of-day and ``today`` at start-of-day,
    so the comparison reduces to calendar days.
    """
    if payment.status == PaymentStatus.PAID:
        return False
    return end_of_month(payment.year, payment.month) < start_of_day(today)


def classify(payment: Payment, today: date | datetime) -> PaymentStatus:
    """Classify a record as Paid, Overdue or Pending as of ``today``."""
    if payment.status == PaymentStatus.PAID:
        return PaymentStatus.PAID
    if is_overdue(payment, today):
        return PaymentStatus.OVERDUE
    return PaymentStatus.PENDING

"""Per-customer consolidated reminder composition."""

import logging
from datetime import date, datetime

from ro_track.billing.status import is_overdue, start_of_day
from ro_track.models import (
    PAYMENT_LINK_PLACEHOLDER,
    Customer,
    PaymentStatus,
    Reminder,
    ReminderType,
)
from ro_track.reminders.messages import render_messages

logger = logging.getLogger(__name__)


def _current_month_due(customer: Customer, today: date) -> tuple[int, int] | None:
    """Current month, if today is the customer's reminder day and it is unpaid.

    The reminder day is an exact day-of-month match with installation, so
    customers installed on the 29th-31st get no monthly reminder in months
    that are too short.
    """
    if not customer.enable_monthly_reminder:
        return None
    if today.day != customer.installation_date.day:
        return None

    month = today.month - 1
    payment = customer.payment_for(today.year, month)
    if payment is None or payment.status == PaymentStatus.PAID:
        return None
    return (today.year, month)


def reminder_id(customer_id: str, generated_at: datetime) -> str:
    """Batch-scoped reminder identifier."""
    return f"{customer_id}-consolidated-{int(generated_at.timestamp() * 1000)}"


def compose_reminder(
    customer: Customer,
    today: date | datetime,
    payment_link: str = PAYMENT_LINK_PLACEHOLDER,
    generated_at: datetime | None = None,
) -> Reminder | None:
    """Build one reminder covering every month the customer should pay now.

    Parameters
    ----------
    customer : Customer
        Customer with their payment records.
    today : date | datetime
        Reference day; normalized to start-of-day.
    payment_link : str
        Link rendered into both messages.
    generated_at : datetime | None
        Generation instant used for the reminder id. Defaults to now.

    Returns
    -------
    Reminder | None
        None when nothing is due or the customer has no records.
    """
    if not customer.payments:
        logger.debug("Skipping customer %s: no payment records", customer.id)
        return None

    today = start_of_day(today)

    overdue = [p.key for p in customer.payments if is_overdue(p, today)]
    months = list(overdue)

    current = _current_month_due(customer, today)
    if current is not None and current not in months:
        months.append(current)

    if not months:
        return None

    months.sort()
    # Uses today's rent for every month, even if rent changed since
    total_amount_due = len(months) * customer.monthly_rent
    reminder_type = ReminderType.OVERDUE if overdue else ReminderType.MONTHLY

    message, message_hi = render_messages(
        customer.name, months, total_amount_due, payment_link, reminder_type
    )

    if generated_at is None:
        generated_at = datetime.now()

    logger.debug(
        "Composed %s reminder for %s: %d months, total %d",
        reminder_type.value,
        customer.id,
        len(months),
        total_amount_due,
    )
    return Reminder(
        id=reminder_id(customer.id, generated_at),
        customer_id=customer.id,
        customer_name=customer.name,
        customer_mobile=customer.mobile,
        type=reminder_type,
        message=message,
        message_hi=message_hi,
    )

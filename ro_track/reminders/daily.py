"""Daily reminder generation across all customers."""

import logging
from datetime import datetime
from typing import Iterable

from ro_track.billing.status import start_of_day
from ro_track.models import AppSettings, Customer, Reminder
from ro_track.reminders.composer import compose_reminder

logger = logging.getLogger(__name__)


def generate_daily_reminders(
    customers: Iterable[Customer],
    app_settings: AppSettings,
    now: datetime | None = None,
) -> list[Reminder]:
    """Compose today's reminders, one per customer with something due.

    Output follows the input customer order.

    Parameters
    ----------
    customers : Iterable[Customer]
        Consistent snapshot of the customer list.
    app_settings : AppSettings
        Supplies the payment link.
    now : datetime | None
        Generation instant. Defaults to the wall clock, read once.

    Returns
    -------
    list[Reminder]
        Reminders for this generation batch.
    """
    if now is None:
        now = datetime.now()
    today = start_of_day(now)
    payment_link = app_settings.resolved_payment_link

    reminders = []
    for customer in customers:
        reminder = compose_reminder(customer, today, payment_link, generated_at=now)
        if reminder is not None:
            reminders.append(reminder)

    logger.info("Generated %d reminders for %s", len(reminders), today.isoformat())
    return reminders

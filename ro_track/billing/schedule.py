"""Monthly payment schedule generation."""

import calendar
import logging
from datetime import date, datetime

from ro_track.models import Customer, Payment, PaymentStatus

logger = logging.getLogger(__name__)

DEFAULT_YEARS_AHEAD = 5


def end_of_month(year: int, month: int) -> date:
    """Last calendar day of a month.

    Parameters
    ----------
    year : int
        Calendar year.
    month : int
        Month index 0-11 (January = 0).

    Returns
    -------
    date
        Last day of the month, honouring month lengths and leap years.
    """
    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, last_day)


def generate_schedule(
    installation_date: date | datetime,
    years_ahead: int = DEFAULT_YEARS_AHEAD,
    today: date | datetime | None = None,
) -> list[Payment]:
    """Generate one Pending record per month from installation onward.

    Parameters
    ----------
    installation_date : date | datetime
        Installation day; its month is the first billable month.
    years_ahead : int
        Years beyond the current year to pre-generate (default 5).
    today : date | datetime | None
        Reference date for "current year". Defaults to the wall clock.

    Returns
    -------
    list[Payment]
        Records in chronological order, ending December of
        ``today.year + years_ahead``. Empty when installation falls after
        that cutoff.
    """
    if today is None:
        today = date.today()
    end_year = today.year + years_ahead

    payments: list[Payment] = []
    for year in range(installation_date.year, end_year + 1):
        # First year bills from the installation month
        start_month = installation_date.month - 1 if year == installation_date.year else 0
        for month in range(start_month, 12):
            payments.append(Payment(year=year, month=month, status=PaymentStatus.PENDING))
    return payments


def extend_schedule(
    customer: Customer,
    years_ahead: int = DEFAULT_YEARS_AHEAD,
    today: date | datetime | None = None,
) -> int:
    """Merge newly due months into a customer's existing schedule.

    Existing records are never replaced, so paid months keep their date,
    amount and notes.

    Returns
    -------
    int
        Number of records added.
    """
    existing = {payment.key for payment in customer.payments}
    added = [
        payment
        for payment in generate_schedule(customer.installation_date, years_ahead, today)
        if payment.key not in existing
    ]
    if added:
        customer.payments.extend(added)
        customer.payments.sort(key=lambda p: p.key)
        logger.debug("Extended schedule for %s by %d months", customer.id, len(added))
    return len(added)

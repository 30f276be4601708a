"""Recording payments against a customer's schedule."""

import logging
from datetime import datetime, timezone
from typing import Iterable

from ro_track.exceptions import InvalidPaymentStatusError
from ro_track.models import Customer, Payment, PaymentStatus

logger = logging.getLogger(__name__)

STORABLE_STATUSES = (PaymentStatus.PENDING, PaymentStatus.PAID)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC timestamp; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _clock(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now().astimezone()


def _check_storable(status: PaymentStatus) -> None:
    if status not in STORABLE_STATUSES:
        raise InvalidPaymentStatusError(f"Status {status.value} cannot be stored")


def _apply_status(customer: Customer, payment: Payment, status: PaymentStatus, now: datetime) -> None:
    payment.status = status
    if status == PaymentStatus.PAID:
        payment.payment_date = as_utc(now)
        payment.amount = customer.monthly_rent
    else:
        payment.payment_date = None
        payment.amount = None


def _find_or_append(customer: Customer, year: int, month: int) -> Payment:
    payment = customer.payment_for(year, month)
    if payment is None:
        # Schedules are pre-generated; this only covers gaps
        payment = Payment(year=year, month=month)
        customer.payments.append(payment)
        customer.payments.sort(key=lambda p: p.key)
    return payment


def set_payment_status(
    customer: Customer,
    year: int,
    month: int,
    status: PaymentStatus,
    notes: str | None = None,
    now: datetime | None = None,
) -> Payment:
    """Mark one month Paid or Pending.

    Paying stamps the payment date and the customer's current rent;
    reverting to Pending clears both. ``notes`` replaces the existing
    note when given.

    Raises
    ------
    InvalidPaymentStatusError
        If ``status`` is Overdue.
    """
    _check_storable(status)
    now = _clock(now)

    payment = _find_or_append(customer, year, month)
    _apply_status(customer, payment, status, now)
    if notes is not None:
        payment.notes = notes

    logger.debug("Customer %s %d-%02d -> %s", customer.id, year, month + 1, status.value)
    return payment


def bulk_set_payment_status(
    customer: Customer,
    months: Iterable[tuple[int, int]],
    status: PaymentStatus,
    now: datetime | None = None,
) -> list[Payment]:
    """Mark several ``(year, month)`` pairs at once.

    Existing notes are kept. A month paid without a note gets
    ``"Bulk updated on DD/MM/YYYY"``.
    """
    _check_storable(status)
    now = _clock(now)

    default_note = f"Bulk updated on {now:%d/%m/%Y}" if status == PaymentStatus.PAID else ""

    updated = []
    for year, month in months:
        payment = _find_or_append(customer, year, month)
        _apply_status(customer, payment, status, now)
        payment.notes = payment.notes or default_note
        updated.append(payment)

    logger.info("Bulk marked %d months %s for customer %s", len(updated), status.value, customer.id)
    return updated


def payment_history(customer: Customer) -> list[Payment]:
    """Paid records with a payment date, most recent first."""
    paid = [
        p for p in customer.payments if p.status == PaymentStatus.PAID and p.payment_date is not None
    ]
    return sorted(paid, key=lambda p: as_utc(p.payment_date), reverse=True)

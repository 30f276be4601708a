"""Dashboard statistics over the customer list."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable

from ro_track.billing.payments import as_utc
from ro_track.billing.status import is_overdue, start_of_day
from ro_track.models import Customer, PaymentStatus


@dataclass
class OverdueCustomer:
    """Customer with at least one overdue month."""

    id: str
    name: str
    mobile: str
    serial_number: int


@dataclass
class DashboardStats:
    """Monthly business summary."""

    total_customers: int = 0
    rent_collected_this_month: int = 0
    rent_due_this_month: int = 0
    overdue_customers: list[OverdueCustomer] = field(default_factory=list)


def compute_dashboard(
    customers: Iterable[Customer],
    today: date | datetime | None = None,
) -> DashboardStats:
    """Summarize collections, current dues and overdue accounts.

    Collected rent counts payments whose payment date, in local time, falls
    in the current month, whichever month they were for. Rent due counts customers whose
    current-month record is still stored as Pending.
    """
    today = start_of_day(today or datetime.now())
    current_month = today.month - 1

    stats = DashboardStats()
    for customer in customers:
        stats.total_customers += 1

        for payment in customer.payments:
            if payment.status != PaymentStatus.PAID or payment.payment_date is None:
                continue
            paid_on = as_utc(payment.payment_date).astimezone()
            if paid_on.year == today.year and paid_on.month == today.month:
                amount = payment.amount if payment.amount is not None else customer.monthly_rent
                stats.rent_collected_this_month += amount

        this_month = customer.payment_for(today.year, current_month)
        if this_month is not None and this_month.status == PaymentStatus.PENDING:
            stats.rent_due_this_month += customer.monthly_rent

        if any(is_overdue(p, today) for p in customer.payments):
            stats.overdue_customers.append(
                OverdueCustomer(
                    id=customer.id,
                    name=customer.name,
                    mobile=customer.mobile,
                    serial_number=customer.serial_number,
                )
            )
    return stats

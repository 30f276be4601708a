"""Customer and payment models."""

from dataclasses import dataclass, field
from datetime import date, datetime

from ro_track.models.enums import PaymentStatus


@dataclass
class Payment:
    """Billing record for one calendar month."""

    year: int
    month: int  # 0-11, January = 0
    status: PaymentStatus = PaymentStatus.PENDING
    payment_date: datetime | None = None  # set only when Paid
    amount: int | None = None  # set only when Paid
    notes: str | None = None

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)


@dataclass
class Customer:
    """RO rental account."""

    id: str
    serial_number: int
    name: str
    address: str
    mobile: str
    ro_model: str
    installation_date: date
    monthly_rent: int
    payments: list[Payment] = field(default_factory=list)
    enable_monthly_reminder: bool = False

    def payment_for(self, year: int, month: int) -> Payment | None:
        """Return the record for ``(year, month)`` if the schedule has one."""
        for payment in self.payments:
            if payment.year == year and payment.month == month:
                return payment
        return None

"""Payment behavior simulation for sample data."""

import random
from datetime import date, datetime, time

from ro_track.billing.payments import set_payment_status
from ro_track.billing.schedule import end_of_month
from ro_track.models import Customer, PaymentStatus


class PaymentBehavior:
    """Simulate how customers keep up with their rent."""

    def __init__(self, seed: int | None = None) -> None:
        self.random = random.Random(seed)

    def apply(
        self,
        customer: Customer,
        reference_date: date | None = None,
        on_time_rate: float = 0.7,
        late_rate: float = 0.2,
        default_rate: float = 0.1,
    ) -> Customer:
        """Mark elapsed months Paid according to a sampled behavior.

        Parameters
        ----------
        customer : Customer
            Customer whose schedule is updated in place.
        reference_date : date | None
            Current date; months starting after it are left Pending.
        on_time_rate : float
            Probability of paying every elapsed month.
        late_rate : float
            Probability of leaving the last one to three months unpaid.
        default_rate : float
            Probability of having stopped paying some months ago.

        Returns
        -------
        Customer
            The same customer.
        """
        if reference_date is None:
            reference_date = date.today()

        behavior = self.random.choices(
            ["on_time", "late", "defaulter"],
            weights=[on_time_rate, late_rate, default_rate],
            k=1,
        )[0]

        elapsed = [
            p for p in customer.payments
            if (p.year, p.month) <= (reference_date.year, reference_date.month - 1)
        ]

        if behavior == "on_time":
            unpaid_tail = 0
        elif behavior == "late":
            unpaid_tail = self.random.randint(1, 3)
        else:
            unpaid_tail = self.random.randint(4, 12)

        to_pay = elapsed[: max(0, len(elapsed) - unpaid_tail)]
        for payment in to_pay:
            # Paid some time within the month it was for
            paid_on = end_of_month(payment.year, payment.month).replace(
                day=self.random.randint(1, 28)
            )
            set_payment_status(
                customer,
                payment.year,
                payment.month,
                PaymentStatus.PAID,
                now=datetime.combine(min(paid_on, reference_date), time(10, 0)),
            )
        return customer

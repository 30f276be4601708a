"""Sample RO rental customer generator."""

from __future__ import annotations

import uuid
from datetime import date, timedelta
from typing import Iterator

from ro_track.billing.schedule import DEFAULT_YEARS_AHEAD, generate_schedule
from ro_track.generators.base import BaseGenerator
from ro_track.models import Customer


class CustomerGenerator(BaseGenerator):
    """Generate synthetic rental customers with fresh schedules."""

    RO_MODELS = [
        "AquaPure Classic",
        "AquaPure Plus",
        "Kent Grand",
        "Livpure Glo",
        "PureIt Vital",
        "Aquaguard Aura",
    ]
    RENT_OPTIONS = [250, 300, 350, 400, 450, 500]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_IN",
        years_ahead: int = DEFAULT_YEARS_AHEAD,
        today: date | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self.years_ahead = years_ahead
        self.today = today or date.today()

    def generate(self, serial_number: int) -> Customer:
        """Generate a single customer.

        Parameters
        ----------
        serial_number : int
            Serial number to assign; callers keep these unique.

        Returns
        -------
        Customer
            Generated customer, all months Pending.
        """
        # Installed within the last three years
        installation_date = self.today - timedelta(days=self.random.randint(0, 3 * 365))

        return Customer(
            id=str(uuid.UUID(int=self.random.getrandbits(128), version=4)),
            serial_number=serial_number,
            name=self.fake.name(),
            address=self.fake.address().replace("\n", ", "),
            mobile=self._mobile(),
            ro_model=self.random.choice(self.RO_MODELS),
            installation_date=installation_date,
            monthly_rent=self.random.choice(self.RENT_OPTIONS),
            payments=generate_schedule(installation_date, self.years_ahead, self.today),
            enable_monthly_reminder=self.random.random() < 0.6,
        )

    def generate_batch(self, count: int, start_serial: int = 1) -> Iterator[Customer]:
        """Generate customers with consecutive serial numbers.

        Parameters
        ----------
        count : int
            Number of customers to generate.
        start_serial : int
            Serial number of the first customer.

        Yields
        ------
        Customer
            Generated customers.
        """
        for offset in range(count):
            yield self.generate(start_serial + offset)

    def _mobile(self) -> str:
        """Ten-digit Indian mobile number."""
        return f"{self.random.choice('6789')}{self.random.randint(0, 999_999_999):09d}"

"""Pytest configuration and fixtures."""

from datetime import date
from typing import Callable

import pytest

from ro_track.billing.schedule import generate_schedule
from ro_track.models import Customer, PaymentStatus


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Reference day used across tests."""
    return date(2024, 6, 1)


@pytest.fixture
def make_customer() -> Callable[..., Customer]:
    """Factory for customers with a schedule generated as of ``today``."""

    def _make(
        installation_date: date = date(2023, 1, 15),
        today: date = date(2024, 6, 1),
        monthly_rent: int = 300,
        enable_monthly_reminder: bool = False,
        paid_through: tuple[int, int] | None = None,
        customer_id: str = "cust-001",
        serial_number: int = 1,
        name: str = "Ramesh Kumar",
        mobile: str = "9876543210",
    ) -> Customer:
        payments = generate_schedule(installation_date, 1, today)
        if paid_through is not None:
            for payment in payments:
                if payment.key <= paid_through:
                    payment.status = PaymentStatus.PAID
        return Customer(
            id=customer_id,
            serial_number=serial_number,
            name=name,
            address="12 MG Road, Pune",
            mobile=mobile,
            ro_model="AquaPure Classic",
            installation_date=installation_date,
            monthly_rent=monthly_rent,
            payments=payments,
            enable_monthly_reminder=enable_monthly_reminder,
        )

    return _make

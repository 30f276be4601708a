"""Customer creation and the in-memory customer book."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from ro_track.billing.schedule import DEFAULT_YEARS_AHEAD, generate_schedule
from ro_track.exceptions import (
    CustomerNotFoundError,
    DuplicateSerialNumberError,
    ValidationError,
)
from ro_track.models import Customer

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {
        "serial_number",
        "name",
        "address",
        "mobile",
        "ro_model",
        "installation_date",
        "monthly_rent",
        "enable_monthly_reminder",
    }
)


def validate_serial_number(serial_number: int) -> None:
    if serial_number <= 0:
        raise ValidationError("Serial Number must be a positive number.")


def validate_monthly_rent(monthly_rent: int) -> None:
    if monthly_rent < 0:
        raise ValidationError("Monthly rent must be a valid number.")


def new_customer(
    serial_number: int,
    name: str,
    address: str,
    mobile: str,
    ro_model: str,
    installation_date: date,
    monthly_rent: int,
    enable_monthly_reminder: bool = False,
    years_ahead: int = DEFAULT_YEARS_AHEAD,
    today: date | datetime | None = None,
) -> Customer:
    """Create a customer with a fresh id and payment schedule.

    Raises
    ------
    ValidationError
        If the serial number is not positive or rent is negative.
    """
    validate_serial_number(serial_number)
    validate_monthly_rent(monthly_rent)

    return Customer(
        id=str(uuid.uuid4()),
        serial_number=serial_number,
        name=name,
        address=address,
        mobile=mobile,
        ro_model=ro_model,
        installation_date=installation_date,
        monthly_rent=monthly_rent,
        payments=generate_schedule(installation_date, years_ahead, today),
        enable_monthly_reminder=enable_monthly_reminder,
    )


@dataclass
class CustomerBook:
    """In-memory customer collection with serial-number uniqueness."""

    customers: dict[str, Customer] = field(default_factory=dict)

    # Relationship index
    _serial_index: dict[int, str] = field(default_factory=dict)

    @classmethod
    def from_list(cls, customers: list[Customer]) -> "CustomerBook":
        book = cls()
        for customer in customers:
            book.add(customer)
        return book

    def add(self, customer: Customer) -> None:
        """Add a customer to the book."""
        if customer.serial_number in self._serial_index:
            raise DuplicateSerialNumberError(
                f"Serial Number {customer.serial_number} is already in use."
            )
        self.customers[customer.id] = customer
        self._serial_index[customer.serial_number] = customer.id

    def get(self, customer_id: str) -> Customer:
        """Get a customer by id."""
        try:
            return self.customers[customer_id]
        except KeyError:
            raise CustomerNotFoundError(f"Customer {customer_id} not found") from None

    def get_by_serial(self, serial_number: int) -> Customer:
        """Get a customer by serial number."""
        customer_id = self._serial_index.get(serial_number)
        if customer_id is None:
            raise CustomerNotFoundError(f"Serial Number {serial_number} not found")
        return self.customers[customer_id]

    def serial_numbers(self) -> set[int]:
        return set(self._serial_index)

    def update_details(self, customer_id: str, **changes) -> Customer:
        """Edit descriptive fields; payments are left untouched.

        Raises
        ------
        ValidationError
            For unknown fields, a non-positive serial, negative rent,
            or a serial number owned by another customer.
        """
        customer = self.get(customer_id)

        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot edit fields: {', '.join(sorted(unknown))}")

        if "serial_number" in changes:
            serial_number = changes["serial_number"]
            validate_serial_number(serial_number)
            owner = self._serial_index.get(serial_number)
            if owner is not None and owner != customer_id:
                raise DuplicateSerialNumberError(
                    "This Serial Number is already in use. Please choose a unique one."
                )
        if "monthly_rent" in changes:
            validate_monthly_rent(changes["monthly_rent"])

        if "serial_number" in changes:
            del self._serial_index[customer.serial_number]
            self._serial_index[changes["serial_number"]] = customer_id

        for name, value in changes.items():
            setattr(customer, name, value)
        return customer

    def set_monthly_reminder(self, customer_id: str, enabled: bool) -> Customer:
        customer = self.get(customer_id)
        customer.enable_monthly_reminder = enabled
        return customer

    def remove(self, customer_id: str) -> Customer:
        """Remove a customer together with all of its payments."""
        customer = self.get(customer_id)
        del self.customers[customer_id]
        del self._serial_index[customer.serial_number]
        logger.info("Removed customer %s (serial %d)", customer_id, customer.serial_number)
        return customer

    def to_list(self) -> list[Customer]:
        """Customers ordered by serial number."""
        return sorted(self.customers.values(), key=lambda c: c.serial_number)

    def __len__(self) -> int:
        return len(self.customers)

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {
            "customers": len(self.customers),
            "payments": sum(len(c.payments) for c in self.customers.values()),
        }

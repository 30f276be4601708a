"""Bulk customer import from comma-separated text.

Each line holds ``serialNumber, name, address, mobile, roModel,
installationDate (YYYY-MM-DD), monthlyRent``. Fields may be double-quoted
to carry commas, with ``""`` for a literal quote. Bad rows are reported
individually and never stop the rest of the batch.
"""

import csv
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable

from ro_track.billing.schedule import DEFAULT_YEARS_AHEAD
from ro_track.customers import new_customer
from ro_track.models import Customer

logger = logging.getLogger(__name__)

FIELD_COUNT = 7
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
INT_PATTERN = re.compile(r"^[0-9]+$")

NO_DATA = "No data to import."
BAD_SERIAL = "Serial Number must be a valid positive number."
DUPLICATE_SERIAL = "Serial Number already exists or is duplicated in the import file."
BAD_DATE = "Invalid date format. Please use YYYY-MM-DD."
BAD_RENT = "Monthly Rent must be a valid positive number."


@dataclass
class ImportRowError:
    """A rejected input line."""

    line_number: int
    data: str
    message: str


@dataclass
class ImportResult:
    """Customers built from valid rows plus per-row rejections."""

    customers: list[Customer] = field(default_factory=list)
    errors: list[ImportRowError] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.customers)


def parse_csv_line(line: str) -> list[str]:
    """Split one line into trimmed fields, honouring double quotes."""
    fields = next(csv.reader([line], skipinitialspace=True), [])
    return [value.strip() for value in fields] or [""]


def _parse_int(value: str) -> int | None:
    """Plain ASCII digits only; signs, separators and decimals are rejected."""
    value = value.strip()
    if not INT_PATTERN.match(value):
        return None
    return int(value)


def _parse_date(value: str) -> date | None:
    if not DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


class RowValidator:
    """Validates rows against existing and already-accepted serial numbers."""

    def __init__(
        self,
        existing_serial_numbers: Iterable[int],
        years_ahead: int = DEFAULT_YEARS_AHEAD,
        today: date | datetime | None = None,
    ) -> None:
        self.existing = set(existing_serial_numbers)
        self.batch: set[int] = set()
        self.years_ahead = years_ahead
        self.today = today

    def build(
        self,
        fields: list[str],
        line_number: int,
        raw: str,
        enable_monthly_reminder: bool = False,
    ) -> Customer | ImportRowError:
        """Turn seven fields into a Customer, or explain why not."""
        if len(fields) != FIELD_COUNT:
            return ImportRowError(
                line_number,
                raw,
                f"Expected {FIELD_COUNT} fields, but found {len(fields)}. "
                "Check for unclosed quotes or formatting issues.",
            )

        serial_str, name, address, mobile, ro_model, date_str, rent_str = fields

        serial_number = _parse_int(serial_str)
        if serial_number is None or serial_number <= 0:
            return ImportRowError(line_number, raw, BAD_SERIAL)
        if serial_number in self.existing or serial_number in self.batch:
            return ImportRowError(line_number, raw, DUPLICATE_SERIAL)

        installation_date = _parse_date(date_str)
        if installation_date is None:
            return ImportRowError(line_number, raw, BAD_DATE)

        monthly_rent = _parse_int(rent_str)
        if monthly_rent is None or monthly_rent < 0:
            return ImportRowError(line_number, raw, BAD_RENT)

        self.batch.add(serial_number)
        return new_customer(
            serial_number=serial_number,
            name=name,
            address=address,
            mobile=mobile,
            ro_model=ro_model,
            installation_date=installation_date,
            monthly_rent=monthly_rent,
            enable_monthly_reminder=enable_monthly_reminder,
            years_ahead=self.years_ahead,
            today=self.today,
        )


def collect(result: ImportResult, outcome: Customer | ImportRowError) -> None:
    if isinstance(outcome, ImportRowError):
        logger.warning("Rejected line %d: %s", outcome.line_number, outcome.message)
        result.errors.append(outcome)
    else:
        result.customers.append(outcome)


def import_customers(
    text: str,
    existing_serial_numbers: Iterable[int] = (),
    years_ahead: int = DEFAULT_YEARS_AHEAD,
    today: date | datetime | None = None,
) -> ImportResult:
    """Import pasted or uploaded customer rows.

    Parameters
    ----------
    text : str
        One customer per line; blank lines are ignored and do not count
        toward line numbers.
    existing_serial_numbers : Iterable[int]
        Serial numbers already in use.
    years_ahead : int
        Schedule horizon for the new customers.
    today : date | datetime | None
        Reference day for schedule generation.

    Returns
    -------
    ImportResult
        New customers and rejected rows.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    result = ImportResult()
    if not lines:
        result.errors.append(ImportRowError(0, "", NO_DATA))
        return result

    validator = RowValidator(existing_serial_numbers, years_ahead, today)
    for index, line in enumerate(lines, start=1):
        collect(result, validator.build(parse_csv_line(line), index, line))

    logger.info("Imported %d customers, rejected %d rows", result.success_count, len(result.errors))
    return result

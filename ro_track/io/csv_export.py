"""Customer export to comma-separated text and restore from it."""

import csv
import io
import logging
from datetime import date, datetime
from typing import Iterable

from ro_track.billing.schedule import DEFAULT_YEARS_AHEAD
from ro_track.io.csv_import import (
    NO_DATA,
    ImportResult,
    ImportRowError,
    RowValidator,
    collect,
)
from ro_track.models import Customer

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    "serialNumber",
    "name",
    "address",
    "mobile",
    "roModel",
    "installationDate",
    "monthlyRent",
    "enableMonthlyReminder",
]


def _row(customer: Customer) -> list[str]:
    return [
        str(customer.serial_number),
        customer.name,
        customer.address,
        customer.mobile,
        customer.ro_model,
        customer.installation_date.isoformat()[:10],
        str(customer.monthly_rent),
        "true" if customer.enable_monthly_reminder else "false",
    ]


def export_customers_csv(customers: Iterable[Customer]) -> str:
    """Serialize customers without payment history.

    Fields containing a comma or quote are quoted, with embedded quotes
    doubled.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(EXPORT_HEADERS)
    count = 0
    for customer in customers:
        writer.writerow(_row(customer))
        count += 1
    logger.info("Exported %d customers", count)
    return buffer.getvalue().rstrip("\n")


def import_exported_csv(
    text: str,
    existing_serial_numbers: Iterable[int] = (),
    years_ahead: int = DEFAULT_YEARS_AHEAD,
    today: date | datetime | None = None,
) -> ImportResult:
    """Restore customers from ``export_customers_csv`` output.

    Columns are matched by header name. Payment history is not part of the
    export, so restored customers get a fresh schedule. Line numbers count
    data rows from 1.
    """
    result = ImportResult()
    rows = [row for row in csv.reader(io.StringIO(text)) if any(v.strip() for v in row)]
    if not rows:
        result.errors.append(ImportRowError(0, "", NO_DATA))
        return result

    header = [name.strip() for name in rows[0]]
    missing = [name for name in EXPORT_HEADERS[:-1] if name not in header]
    if missing:
        result.errors.append(
            ImportRowError(0, ",".join(rows[0]), f"Missing columns: {', '.join(missing)}")
        )
        return result

    validator = RowValidator(existing_serial_numbers, years_ahead, today)
    for index, row in enumerate(rows[1:], start=1):
        raw = ",".join(row)
        if len(row) != len(header):
            collect(
                result,
                ImportRowError(
                    index, raw, f"Expected {len(header)} fields, but found {len(row)}."
                ),
            )
            continue
        values = {name: value.strip() for name, value in zip(header, row)}
        fields = [values[name] for name in EXPORT_HEADERS[:-1]]
        enabled = values.get("enableMonthlyReminder", "").lower() == "true"
        collect(result, validator.build(fields, index, raw, enable_monthly_reminder=enabled))

    logger.info("Restored %d customers, rejected %d rows", result.success_count, len(result.errors))
    return result

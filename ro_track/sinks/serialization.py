"""JSON mapping shared by stores and sinks."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from ro_track.billing.payments import as_utc
from ro_track.models import AppSettings, Customer, Payment, PaymentStatus


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def parse_date(value: str) -> date:
    """Parse ``YYYY-MM-DD``, ignoring any time part."""
    return date.fromisoformat(value[:10])


def parse_datetime(value: str) -> datetime:
    """Parse an ISO timestamp, including a trailing ``Z``."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def payment_from_dict(data: dict[str, Any]) -> Payment:
    payment_date = data.get("payment_date")
    return Payment(
        year=int(data["year"]),
        month=int(data["month"]),
        status=PaymentStatus(data.get("status", PaymentStatus.PENDING.value)),
        payment_date=as_utc(parse_datetime(payment_date)) if payment_date else None,
        amount=data.get("amount"),
        notes=data.get("notes"),
    )


def customer_from_dict(data: dict[str, Any]) -> Customer:
    """Rebuild a Customer from its ``to_dict`` form."""
    return Customer(
        id=data["id"],
        serial_number=int(data["serial_number"]),
        name=data["name"],
        address=data["address"],
        mobile=data["mobile"],
        ro_model=data["ro_model"],
        installation_date=parse_date(data["installation_date"]),
        monthly_rent=int(data["monthly_rent"]),
        payments=[payment_from_dict(p) for p in data.get("payments", [])],
        enable_monthly_reminder=bool(data.get("enable_monthly_reminder", False)),
    )


def settings_from_dict(data: dict[str, Any] | None) -> AppSettings:
    if not data:
        return AppSettings()
    return AppSettings(payment_link=data.get("payment_link") or None)

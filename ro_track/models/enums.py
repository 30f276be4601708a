"""Enumeration types for rental records."""

from enum import Enum


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"  # derived on read, never stored


class ReminderType(str, Enum):
    OVERDUE = "Overdue"
    MONTHLY = "Monthly"

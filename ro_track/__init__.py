"""Rental records, payment schedules and reminders for RO purifier customers."""

__version__ = "0.1.0"

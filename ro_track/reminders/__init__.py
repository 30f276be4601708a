"""Reminder composition and rendering."""

from ro_track.reminders.composer import compose_reminder
from ro_track.reminders.daily import generate_daily_reminders
from ro_track.reminders.messages import render_messages, sms_url, whatsapp_url

__all__ = [
    "compose_reminder",
    "generate_daily_reminders",
    "render_messages",
    "sms_url",
    "whatsapp_url",
]

"""Output sinks for delivering reminders."""

from ro_track.sinks.console import ConsoleSink
from ro_track.sinks.json_file import JsonFileSink
from ro_track.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]

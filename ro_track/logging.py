"""Log setup shared by the ro-track scripts.

Reminder output is written to stdout by the console sink, so every log
handler installed here writes to stderr unless a stream is passed in.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Chatty at INFO/DEBUG
QUIET_LOGGERS = ("confluent_kafka", "psycopg", "faker")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install a single root handler for a script run.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        ``"json"`` for one JSON object per line, anything else for the
        pipe-separated text format.
    stream : TextIO | None
        Destination; defaults to stderr.

    Returns
    -------
    logging.Handler
        The installed handler.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    if format_type == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("ro_track").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


class JsonFormatter(logging.Formatter):
    """One JSON object per record; Hindi message text is kept unescaped."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed as extra={"extra": {...}}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_data.update(extra)

        return json.dumps(log_data, ensure_ascii=False, default=str)

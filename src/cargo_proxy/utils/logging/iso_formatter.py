"""JSONL log formatting with ISO 8601 timestamps."""

from __future__ import annotations

__all__ = ["ISO8601Formatter"]

import json
import logging
from datetime import datetime, timezone


class ISO8601Formatter(logging.Formatter):
    """Formatter that renders each record as one JSON object per line.

    Format of the time field: YYYY-MM-DDTHH:MM:SS.sssZ (UTC)
    Example: 2025-12-04T10:48:37.123Z
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSONL with ISO 8601 timestamp.

        Dict messages are logged as-is (structured logging), anything else
        is wrapped in {"message": ...}.
        """
        timestamp = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )

        if isinstance(record.msg, dict):
            log_data = record.msg
        else:
            log_data = {"message": record.getMessage()}

        # Level goes after time; explicit fields in the message win
        log_entry = {"time": timestamp, "level": record.levelname, **log_data}
        return json.dumps(log_entry)

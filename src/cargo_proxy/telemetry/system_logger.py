"""System logger for operational events.

The logger has no output until configure_system_logger_file() attaches a
JSONL file handler; the CLI does that at startup. User-facing messages are
printed by the CLI itself, the system log keeps a persistent record of
WARNING and above.
"""

from __future__ import annotations

__all__ = [
    "configure_system_logger_file",
    "get_system_logger",
    "log_system_event",
]

import logging
from pathlib import Path

from cargo_proxy.constants import APP_NAME
from cargo_proxy.telemetry.models import SystemEvent
from cargo_proxy.utils.logging.logger_setup import setup_jsonl_logger

SYSTEM_LOGGER_NAME = f"{APP_NAME}.system"


def get_system_logger() -> logging.Logger:
    """Get the system logger.

    Before a file is configured the logger only holds a NullHandler, so
    library use of cargo-proxy never prints log records.
    """
    logger = logging.getLogger(SYSTEM_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.propagate = False
    return logger


def configure_system_logger_file(log_path: Path) -> logging.Logger:
    """Attach a JSONL file handler (WARNING and above) to the system logger.

    Raises:
        OSError: If the log directory or file cannot be created.
    """
    return setup_jsonl_logger(SYSTEM_LOGGER_NAME, log_path, logging.WARNING)


def log_system_event(level: int, event: SystemEvent) -> None:
    """Log a SystemEvent at the given level."""
    get_system_logger().log(level, event.model_dump(exclude={"time"}, exclude_none=True))

"""Proxy change history.

Each successful set or clear appends one ProxyHistoryEvent to
proxy_history.jsonl.
"""

from __future__ import annotations

__all__ = [
    "configure_history_logger",
    "get_history_logger",
    "log_proxy_change",
]

import logging
from pathlib import Path

from cargo_proxy.constants import APP_NAME
from cargo_proxy.telemetry.models import ProxyHistoryEvent
from cargo_proxy.utils.logging.logger_setup import setup_jsonl_logger

HISTORY_LOGGER_NAME = f"{APP_NAME}.history"


def get_history_logger() -> logging.Logger:
    """Get the history logger (NullHandler until configured)."""
    logger = logging.getLogger(HISTORY_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.propagate = False
    return logger


def configure_history_logger(history_path: Path) -> logging.Logger:
    """Point the history logger at history_path.

    Raises:
        OSError: If the log directory or file cannot be created.
    """
    return setup_jsonl_logger(HISTORY_LOGGER_NAME, history_path, logging.INFO)


def log_proxy_change(event: ProxyHistoryEvent) -> None:
    """Append a history entry."""
    get_history_logger().info(event.model_dump(exclude={"time"}, exclude_none=True))

"""Logger setup for JSONL log files."""

from __future__ import annotations

__all__ = ["setup_jsonl_logger"]

import logging
from pathlib import Path

from cargo_proxy.utils.logging.iso_formatter import ISO8601Formatter


def setup_jsonl_logger(
    logger_name: str,
    log_file: Path,
    log_level: int = logging.INFO,
) -> logging.Logger:
    """Set up a logger that writes JSONL with ISO 8601 timestamps.

    Creates the log directory if it doesn't exist. Existing handlers on the
    logger are closed and replaced, so calling this again with a new path
    redirects the logger.

    Args:
        logger_name: Name for the logger (e.g., "cargo-proxy.history")
        log_file: Path to the log file
        log_level: Logging level (default: INFO)

    Returns:
        logging.Logger: Configured logger instance

    Raises:
        OSError: If the log directory or file cannot be created
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.propagate = False  # Don't propagate to root logger

    # Close and remove any existing handlers to avoid duplicates and resource leaks
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(ISO8601Formatter())
    logger.addHandler(file_handler)

    return logger

"""Operational and history logging for cargo-proxy.

- system_logger: warnings and failures (system.jsonl)
- history_logger: one entry per config change (proxy_history.jsonl)
- models: Pydantic models for logged events
"""

from .history_logger import configure_history_logger, log_proxy_change
from .system_logger import configure_system_logger_file, get_system_logger

__all__ = [
    "configure_history_logger",
    "configure_system_logger_file",
    "get_system_logger",
    "log_proxy_change",
]

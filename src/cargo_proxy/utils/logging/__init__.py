"""Logging utilities and helpers.

This package provides logging infrastructure for cargo-proxy:
- iso_formatter: ISO 8601 timestamp formatting for JSONL logs
- logger_setup: Factory function for creating JSONL file loggers

Import directly from submodules:
    from cargo_proxy.utils.logging.logger_setup import setup_jsonl_logger
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)

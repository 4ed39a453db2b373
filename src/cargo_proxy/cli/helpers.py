"""Shared helpers for cargo-proxy commands."""

from __future__ import annotations

__all__ = [
    "configure_logging",
    "exit_with_error",
    "get_context_config_path",
    "warn_parse_fallback",
]

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from cargo_proxy.config import LoadedConfig, get_config_path
from cargo_proxy.constants import HISTORY_LOG_FILENAME, SYSTEM_LOG_FILENAME
from cargo_proxy.telemetry.history_logger import configure_history_logger
from cargo_proxy.telemetry.models import SystemEvent
from cargo_proxy.telemetry.system_logger import configure_system_logger_file, log_system_event
from cargo_proxy.utils.file_helpers import get_log_dir

from .styling import style_error, style_warning


def configure_logging() -> None:
    """Attach file handlers for the system and history logs.

    Logging must never stop the tool from editing the config, so a log
    directory that cannot be created only produces a warning.
    """
    log_dir = get_log_dir()
    try:
        configure_system_logger_file(log_dir / SYSTEM_LOG_FILENAME)
        configure_history_logger(log_dir / HISTORY_LOG_FILENAME)
    except OSError as e:
        click.echo(style_warning(f"File logging disabled: {e}"), err=True)


def get_context_config_path(ctx: click.Context) -> Path:
    """Return the config path chosen by --config, or the default one."""
    obj = ctx.find_root().obj or {}
    return get_config_path(obj.get("config_path"))


def warn_parse_fallback(
    loaded: LoadedConfig,
    config_path: Path,
    command: str,
    *,
    will_write: bool,
) -> None:
    """Warn when an unparseable config was replaced by an empty document."""
    if loaded.parse_error is None:
        return

    message = f"Could not parse {config_path}; treating it as empty."
    if will_write:
        message += " Only proxy settings will be written; the original is kept in the backup."
    click.echo(style_warning(message), err=True)
    click.echo(f"  {loaded.parse_error}", err=True)

    log_system_event(
        logging.WARNING,
        SystemEvent(
            event="config_parse_failed",
            message="Config file is not valid TOML, using an empty document",
            command=command,
            config_path=str(config_path),
            error_message=loaded.parse_error,
        ),
    )


def exit_with_error(error: Exception, config_path: Path, command: str) -> NoReturn:
    """Report a failed command on stderr, log it and exit with status 1."""
    log_system_event(
        logging.ERROR,
        SystemEvent(
            event="command_failed",
            command=command,
            config_path=str(config_path),
            error_type=type(error).__name__,
            error_message=str(error),
        ),
    )
    click.echo(style_error(f"Error: {error}"), err=True)
    sys.exit(1)

"""Clear command: remove all proxy settings from Cargo's config."""

from __future__ import annotations

__all__ = ["clear"]

import click

from cargo_proxy.config import load_config, save_config
from cargo_proxy.patcher import clear_proxy_config
from cargo_proxy.reader import current_proxy
from cargo_proxy.telemetry.history_logger import log_proxy_change
from cargo_proxy.telemetry.models import ProxyHistoryEvent
from cargo_proxy.utils.file_helpers import compute_file_checksum

from ..helpers import exit_with_error, get_context_config_path, warn_parse_fallback
from ..styling import style_dim, style_success


@click.command()
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Clear any existing proxy configuration.

    Removes source replacements, registries entries and
    net.git-fetch-with-cli. Everything else in the file is kept.
    """
    config_path = get_context_config_path(ctx)

    if not config_path.exists():
        click.echo(style_dim("No configuration file found. Nothing to clear."))
        return

    try:
        loaded = load_config(config_path)
        warn_parse_fallback(loaded, config_path, "clear", will_write=True)
        previous = current_proxy(loaded.document)
        checksum_before = compute_file_checksum(config_path)

        clear_proxy_config(loaded.document)
        backup_path = save_config(config_path, loaded.document)
        checksum_after = compute_file_checksum(config_path)
    except OSError as e:
        exit_with_error(e, config_path, "clear")

    click.echo(f"Existing configuration backed up to {backup_path}")

    log_proxy_change(
        ProxyHistoryEvent(
            event="proxy_cleared",
            message="Proxy configuration cleared",
            config_path=str(config_path),
            backup_path=str(backup_path) if backup_path else None,
            previous_proxy=previous,
            checksum_before=checksum_before,
            checksum_after=checksum_after,
        )
    )

    click.echo(style_success("Proxy configuration has been successfully cleared."))

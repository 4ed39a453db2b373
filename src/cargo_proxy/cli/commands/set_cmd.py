"""Set command: install a registry mirror in Cargo's config."""

from __future__ import annotations

__all__ = ["set_proxy"]

import sys

import click

from cargo_proxy.config import load_config, save_config
from cargo_proxy.exceptions import ConfigStructureError, UnknownProxyError
from cargo_proxy.patcher import apply_proxy
from cargo_proxy.reader import current_proxy
from cargo_proxy.registry import resolve
from cargo_proxy.telemetry.history_logger import log_proxy_change
from cargo_proxy.telemetry.models import ProxyHistoryEvent
from cargo_proxy.utils.file_helpers import compute_file_checksum

from ..helpers import exit_with_error, get_context_config_path, warn_parse_fallback
from ..styling import style_error, style_success


@click.command("set")
@click.argument("proxy")
@click.pass_context
def set_proxy(ctx: click.Context, proxy: str) -> None:
    """Set a proxy configuration, by name or custom URL.

    PROXY is a predefined proxy name (see 'cargo-proxy list') or a custom
    URL starting with http:// or https://.

    Any existing config file is backed up to config.backup first.
    """
    try:
        resolved = resolve(proxy)
    except UnknownProxyError as e:
        click.echo(style_error(f"Error: {e}"), err=True)
        sys.exit(1)

    config_path = get_context_config_path(ctx)

    try:
        loaded = load_config(config_path)
        warn_parse_fallback(loaded, config_path, "set", will_write=True)
        previous = current_proxy(loaded.document)
        checksum_before = compute_file_checksum(config_path)

        apply_proxy(loaded.document, resolved)
        backup_path = save_config(config_path, loaded.document)
        checksum_after = compute_file_checksum(config_path)
    except (ConfigStructureError, OSError) as e:
        exit_with_error(e, config_path, "set")

    if backup_path is not None:
        click.echo(f"Existing configuration backed up to {backup_path}")

    log_proxy_change(
        ProxyHistoryEvent(
            event="proxy_set",
            message=f"Proxy set to {resolved.name}",
            config_path=str(config_path),
            backup_path=str(backup_path) if backup_path else None,
            previous_proxy=previous,
            new_proxy=resolved.name,
            new_url=resolved.url,
            checksum_before=checksum_before,
            checksum_after=checksum_after,
        )
    )

    click.echo(
        style_success(f"Proxy configuration set to {resolved.url}, config file: {config_path}")
    )

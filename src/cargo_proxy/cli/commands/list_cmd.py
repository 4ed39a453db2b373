"""List command: show the predefined proxies."""

from __future__ import annotations

__all__ = ["list_proxies"]

import click

from cargo_proxy.config import load_config
from cargo_proxy.reader import read_active_proxy
from cargo_proxy.registry import PREDEFINED_PROXIES

from ..helpers import exit_with_error, get_context_config_path
from ..styling import style_dim, style_header


@click.command("list")
@click.pass_context
def list_proxies(ctx: click.Context) -> None:
    """List predefined proxies.

    The active proxy, if it is one of them, is marked with '*'.
    """
    config_path = get_context_config_path(ctx)

    active_name = None
    if config_path.exists():
        try:
            active = read_active_proxy(load_config(config_path).document)
        except OSError as e:
            exit_with_error(e, config_path, "list")
        active_name = active.name if active else None

    width = max(len(entry.name) for entry in PREDEFINED_PROXIES)

    click.echo(style_header("Predefined Proxies"))
    for entry in PREDEFINED_PROXIES:
        marker = "*" if entry.name == active_name else " "
        click.echo(f"{marker} {entry.name:<{width}}  {entry.url}")
    click.echo()
    click.echo(style_dim("Or pass any URL starting with http:// or https:// to 'set'."))

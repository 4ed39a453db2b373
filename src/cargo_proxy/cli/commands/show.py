"""Show command: report the proxy currently configured."""

from __future__ import annotations

__all__ = ["show"]

import json

import click

from cargo_proxy.config import load_config
from cargo_proxy.reader import read_active_proxy

from ..helpers import exit_with_error, get_context_config_path, warn_parse_fallback

NO_PROXY_MESSAGE = "No proxy is currently set."


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Show current proxy configuration."""
    config_path = get_context_config_path(ctx)

    active = None
    if config_path.exists():
        try:
            loaded = load_config(config_path)
        except OSError as e:
            exit_with_error(e, config_path, "show")
        warn_parse_fallback(loaded, config_path, "show", will_write=False)
        active = read_active_proxy(loaded.document)

    if as_json:
        data = {
            "proxy": active.display if active else None,
            "replace_with": active.replace_with if active else None,
            "registry": active.registry if active else None,
            "config_file": str(config_path),
        }
        click.echo(json.dumps(data, indent=2))
        return

    if active is None:
        click.echo(NO_PROXY_MESSAGE)
    else:
        click.echo(f"Current proxy: {active.display}")

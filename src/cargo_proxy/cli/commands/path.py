"""Path command: print the Cargo config file location."""

from __future__ import annotations

__all__ = ["path"]

import click

from ..helpers import get_context_config_path


@click.command()
@click.pass_context
def path(ctx: click.Context) -> None:
    """Show config file path.

    Resolved from --config, $CARGO_PROXY_CONFIG, or $CARGO_HOME/config.toml
    (default: ~/.cargo/config.toml).
    """
    config_path = get_context_config_path(ctx)
    click.echo(str(config_path))

    if not config_path.exists():
        click.echo("(file does not exist - run 'cargo-proxy set' to create)", err=True)

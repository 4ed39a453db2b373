"""Main CLI entry point for cargo-proxy.

Defines the CLI group and registers all subcommands.

Commands:
    set    - Set a proxy by name or custom URL
    clear  - Remove any proxy configuration
    show   - Show the current proxy
    list   - List predefined proxies
    path   - Show the Cargo config file path

Subcommand help:
    cargo-proxy COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli", "main"]

import sys
from pathlib import Path

import click

from cargo_proxy import __version__
from cargo_proxy.constants import CONFIG_PATH_ENV

from .commands.clear import clear
from .commands.list_cmd import list_proxies
from .commands.path import path
from .commands.set_cmd import set_proxy
from .commands.show import show
from .helpers import configure_logging


class ReorderedGroup(click.Group):
    """Custom group that shows commands before custom help text."""

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Add extra help after commands section."""
        formatter.write(
            """
Examples:
  cargo-proxy set rsproxy                          Use a predefined mirror
  cargo-proxy set https://example.com/my-index/    Use a custom sparse index
  cargo-proxy show                                 Print the active mirror
  cargo-proxy clear                                Go back to crates.io

Config file:
  $CARGO_HOME/config.toml (default: ~/.cargo/config.toml)
  The previous file is saved as config.backup before every change.
"""
        )


@click.group(
    cls=ReorderedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_PATH_ENV,
    help="Cargo config file to edit (default: $CARGO_HOME/config.toml)",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, config_path: Path | None) -> None:
    """🛠️ Quickly set, view, and clear Cargo proxies to speed up dependency downloads."""
    if version:
        click.echo(f"cargo-proxy {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    configure_logging()


# Register commands
cli.add_command(clear)
cli.add_command(list_proxies)
cli.add_command(path)
cli.add_command(set_proxy)
cli.add_command(show)


def main() -> None:
    """CLI entry point."""
    cli()

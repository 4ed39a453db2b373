"""CLI output styling utilities.

Provides consistent styling helpers for CLI output:
- Cyan bold for section headers
- Green for success messages (with checkmark)
- Red for error messages (with cross)
- Yellow for warnings
- Dim for neutral/empty state messages
"""

from __future__ import annotations

__all__ = [
    "style_dim",
    "style_error",
    "style_header",
    "style_success",
    "style_warning",
]

import click


def style_header(title: str) -> str:
    """Style a section header with dashes.

    Example:
        >>> click.echo(style_header("Predefined Proxies"))
        --- Predefined Proxies ---
    """
    return click.style(f"--- {title} ---", fg="cyan", bold=True)


def style_success(message: str) -> str:
    """Style a success message with checkmark.

    Example:
        >>> click.echo(style_success("Proxy configuration has been successfully cleared."))
        ✓ Proxy configuration has been successfully cleared.
    """
    return click.style(f"✓ {message}", fg="green")


def style_error(message: str) -> str:
    """Style an error message with cross mark.

    Example:
        >>> click.echo(style_error("Error: permission denied"), err=True)
        ✗ Error: permission denied
    """
    return click.style(f"✗ {message}", fg="red")


def style_dim(message: str) -> str:
    """Style a neutral/empty state message as dim."""
    return click.style(message, dim=True)


def style_warning(message: str) -> str:
    """Style a warning message with yellow color.

    Example:
        >>> click.echo(style_warning("config.toml could not be parsed"), err=True)
        Warning: config.toml could not be parsed
    """
    return click.style(f"Warning: {message}", fg="yellow", bold=True)

"""Command-line interface for cargo-proxy.

Provides commands for setting, showing and clearing Cargo registry mirrors.
"""

from .main import cli, main

__all__ = ["cli", "main"]

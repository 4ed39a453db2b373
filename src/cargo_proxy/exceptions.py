"""Custom exceptions for cargo-proxy.

All errors raised by the core modules derive from CargoProxyError so the CLI
can report them at the command boundary. File system failures are left as
OSError and reported the same way.

Recoverable Errors (reported, command exits non-zero, no file touched):
    - UnknownProxyError: Input is neither a known proxy name nor a URL

Internal Errors:
    - ConfigStructureError: A non-table value sits where a table is required

Usage:
    from cargo_proxy.exceptions import UnknownProxyError
"""

from __future__ import annotations

__all__ = [
    "CargoProxyError",
    "ConfigStructureError",
    "UnknownProxyError",
]

from typing import Sequence

from cargo_proxy.constants import URL_SCHEMES


class CargoProxyError(Exception):
    """Base class for cargo-proxy errors."""


class UnknownProxyError(CargoProxyError, ValueError):
    """Raised when proxy input matches no known name and is not a URL.

    Attributes:
        proxy: The rejected user input.
        known_names: Names of the predefined proxies, for display.
    """

    def __init__(self, proxy: str, known_names: Sequence[str]) -> None:
        self.proxy = proxy
        self.known_names = list(known_names)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [
            f"Unknown proxy name or invalid URL: {self.proxy!r}",
            "Available predefined proxy names:",
        ]
        lines.extend(f"  - {name}" for name in self.known_names)
        schemes = " or ".join(URL_SCHEMES)
        lines.append(f"Or provide a custom URL starting with {schemes}.")
        return "\n".join(lines)


class ConfigStructureError(CargoProxyError):
    """Raised when a config key expected to be a table holds another value.

    Attributes:
        key_path: Dotted path of the offending key (e.g., "source.crates-io").
        found: Type name of the value found at key_path (e.g., "String").
    """

    def __init__(self, key_path: str, found: str) -> None:
        self.key_path = key_path
        self.found = found
        super().__init__(f"Cannot update config: '{key_path}' is a {found}, not a table")

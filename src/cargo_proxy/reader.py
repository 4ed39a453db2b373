"""Report the proxy currently configured in a Cargo config document.

The active proxy is not stored as such; it is reconstructed from
source.crates-io.replace-with and the registry URL of the source it names.
"""

from __future__ import annotations

__all__ = [
    "ActiveProxy",
    "current_proxy",
    "read_active_proxy",
]

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from cargo_proxy.constants import (
    CRATES_IO_KEY,
    REGISTRY_KEY,
    REPLACE_WITH_KEY,
    RSPROXY_NAME,
    RSPROXY_SPARSE_NAME,
    SOURCE_KEY,
    SPARSE_PREFIX,
)
from cargo_proxy.document import get_table
from cargo_proxy.registry import get_proxy, match_url


class ActiveProxy(BaseModel):
    """Proxy state derived from a config document.

    Attributes:
        replace_with: Value of source.crates-io.replace-with.
        registry: Registry URL stored for that source, as written.
        name: Matching predefined proxy name, or None for custom URLs.
        display: Short name when known, otherwise the URL without sparse+.
    """

    replace_with: str
    registry: str
    name: str | None = None
    display: str


def _get_string(table: Mapping[str, Any] | None, key: str) -> str | None:
    if table is None:
        return None
    value = table.get(key)
    return str(value) if isinstance(value, str) else None


def _source_registry(source: Mapping[str, Any], alias: str) -> str | None:
    return _get_string(get_table(source, alias), REGISTRY_KEY)


def _strip_sparse(url: str) -> str:
    return url[len(SPARSE_PREFIX) :] if url.startswith(SPARSE_PREFIX) else url


def read_active_proxy(doc: Mapping[str, Any]) -> ActiveProxy | None:
    """Reconstruct the active proxy from a document.

    Returns:
        ActiveProxy, or None when any lookup on the way is missing.
    """
    source = get_table(doc, SOURCE_KEY)
    if source is None:
        return None

    replace_with = _get_string(get_table(source, CRATES_IO_KEY), REPLACE_WITH_KEY)
    if replace_with is None:
        return None

    if replace_with == RSPROXY_SPARSE_NAME:
        registry = _source_registry(source, RSPROXY_NAME)
        if registry is None:
            return None
        entry = match_url(registry)
    else:
        registry = _source_registry(source, replace_with)
        if registry is None:
            return None
        entry = get_proxy(replace_with) or match_url(registry)

    if entry is not None:
        return ActiveProxy(
            replace_with=replace_with,
            registry=registry,
            name=entry.name,
            display=entry.name,
        )
    return ActiveProxy(
        replace_with=replace_with,
        registry=registry,
        display=_strip_sparse(registry),
    )


def current_proxy(doc: Mapping[str, Any]) -> str | None:
    """Return the display name of the active proxy, or None if none is set."""
    active = read_active_proxy(doc)
    return active.display if active is not None else None

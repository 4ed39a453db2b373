"""Apply or remove proxy settings on a Cargo config document.

Every change first runs the clear phase, which strips all keys this tool
owns, and then installs the new proxy:

    [source.crates-io]
    replace-with = "ustc"

    [source.ustc]
    registry = "sparse+https://mirrors.ustc.edu.cn/crates.io-index/"

rsproxy is special-cased: it needs a git index alias, a sparse alias, a
registries entry and net.git-fetch-with-cli = true.

Keys outside source.*, registries.* and net.git-fetch-with-cli are never
touched.
"""

from __future__ import annotations

__all__ = [
    "apply_proxy",
    "clear_proxy_config",
    "sparse_registry_url",
]

from collections.abc import MutableMapping
from typing import Any

from tomlkit import TOMLDocument

from cargo_proxy.constants import (
    CRATES_IO_KEY,
    GIT_FETCH_WITH_CLI_KEY,
    INDEX_KEY,
    NET_KEY,
    REGISTRIES_KEY,
    REGISTRY_KEY,
    REPLACE_WITH_KEY,
    RSPROXY_GIT_INDEX,
    RSPROXY_NAME,
    RSPROXY_SPARSE_INDEX,
    RSPROXY_SPARSE_NAME,
    SOURCE_KEY,
    SPARSE_PREFIX,
)
from cargo_proxy.document import ensure_table, get_table
from cargo_proxy.registry import ResolvedProxy


def sparse_registry_url(url: str) -> str:
    """Build a sparse registry URL with exactly one trailing slash."""
    return f"{SPARSE_PREFIX}{url.rstrip('/')}/"


def clear_proxy_config(doc: TOMLDocument) -> TOMLDocument:
    """Remove every proxy-related key from the document.

    Idempotent. Tables left empty are kept as empty shells. Keys holding a
    non-table value where a table is expected are left alone.

    Args:
        doc: Document to modify in place.

    Returns:
        The same document, for chaining.
    """
    source = get_table(doc, SOURCE_KEY)
    if source is not None:
        for key in list(source.keys()):
            if key != CRATES_IO_KEY:
                del source[key]
                continue
            crates_io = get_table(source, CRATES_IO_KEY)
            if crates_io is not None and REPLACE_WITH_KEY in crates_io:
                del crates_io[REPLACE_WITH_KEY]

    registries = get_table(doc, REGISTRIES_KEY)
    if registries is not None:
        for key in list(registries.keys()):
            del registries[key]

    net = get_table(doc, NET_KEY)
    if net is not None and GIT_FETCH_WITH_CLI_KEY in net:
        del net[GIT_FETCH_WITH_CLI_KEY]

    return doc


def apply_proxy(doc: TOMLDocument, resolved: ResolvedProxy) -> TOMLDocument:
    """Replace any existing proxy settings with the resolved proxy.

    Args:
        doc: Document to modify in place.
        resolved: Proxy to install.

    Returns:
        The same document, for chaining.

    Raises:
        ConfigStructureError: If a key on the install path holds a non-table
            value (e.g. `source = "x"`).
    """
    clear_proxy_config(doc)

    source = ensure_table(doc, SOURCE_KEY, super_table=True)
    crates_io = ensure_table(source, CRATES_IO_KEY, path=SOURCE_KEY)

    if resolved.name == RSPROXY_NAME:
        _install_rsproxy(doc, source, crates_io)
        return doc

    crates_io[REPLACE_WITH_KEY] = resolved.name
    alias = ensure_table(source, resolved.name, path=SOURCE_KEY)
    alias[REGISTRY_KEY] = sparse_registry_url(resolved.url)
    return doc


def _install_rsproxy(
    doc: TOMLDocument,
    source: MutableMapping[str, Any],
    crates_io: MutableMapping[str, Any],
) -> None:
    crates_io[REPLACE_WITH_KEY] = RSPROXY_SPARSE_NAME

    git_alias = ensure_table(source, RSPROXY_NAME, path=SOURCE_KEY)
    git_alias[REGISTRY_KEY] = RSPROXY_GIT_INDEX

    sparse_alias = ensure_table(source, RSPROXY_SPARSE_NAME, path=SOURCE_KEY)
    sparse_alias[REGISTRY_KEY] = RSPROXY_SPARSE_INDEX

    registries = ensure_table(doc, REGISTRIES_KEY, super_table=True)
    registry = ensure_table(registries, RSPROXY_NAME, path=REGISTRIES_KEY)
    registry[INDEX_KEY] = RSPROXY_GIT_INDEX

    net = ensure_table(doc, NET_KEY)
    net[GIT_FETCH_WITH_CLI_KEY] = True

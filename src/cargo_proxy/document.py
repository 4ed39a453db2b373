"""Format-preserving TOML document helpers.

Cargo's config.toml is parsed with tomlkit so that comments, ordering and
whitespace outside the keys this tool edits survive a load/dump cycle
unchanged.
"""

from __future__ import annotations

__all__ = [
    "dump_document",
    "ensure_table",
    "get_table",
    "new_document",
    "parse_document",
]

from collections.abc import Mapping, MutableMapping
from typing import Any, cast

import tomlkit
from tomlkit import TOMLDocument
from tomlkit.items import InlineTable, Table

from cargo_proxy.exceptions import ConfigStructureError


def new_document() -> TOMLDocument:
    """Return an empty document."""
    return tomlkit.document()


def parse_document(text: str) -> TOMLDocument:
    """Parse TOML text.

    Raises:
        tomlkit.exceptions.ParseError: If the text is not valid TOML.
    """
    return tomlkit.parse(text)


def dump_document(doc: TOMLDocument) -> str:
    """Serialize a document back to TOML text."""
    return tomlkit.dumps(doc)


def get_table(container: Mapping[str, Any], key: str) -> MutableMapping[str, Any] | None:
    """Return the table stored at key, or None if absent or not a table.

    Inline tables count as tables; tomlkit's Table and InlineTable are both
    dict subclasses at runtime.
    """
    value = container.get(key)
    if isinstance(value, dict):
        return cast(MutableMapping[str, Any], value)
    return None


def ensure_table(
    container: MutableMapping[str, Any],
    key: str,
    *,
    path: str = "",
    super_table: bool = False,
) -> MutableMapping[str, Any]:
    """Return the table at key, creating it when missing.

    Args:
        container: Document or table to look in.
        key: Key of the table.
        path: Dotted path of container, used in error messages.
        super_table: Create the table as a super table so it renders only
            through its children (e.g. "[source.ustc]" without "[source]").
            Ignored when container is an inline table; children of an
            inline table are created inline.

    Returns:
        The existing or newly created table.

    Raises:
        ConfigStructureError: If a non-table value already occupies key.
    """
    if key not in container:
        # Inline tables can only hold inline tables
        if isinstance(container, InlineTable):
            container[key] = tomlkit.inline_table()
        else:
            table: Table = tomlkit.table(is_super_table=super_table or None)
            container[key] = table
        # Re-read: tomlkit may wrap the inserted item
        return cast(MutableMapping[str, Any], container[key])

    existing = container[key]
    if not isinstance(existing, dict):
        key_path = f"{path}.{key}" if path else key
        raise ConfigStructureError(key_path, type(existing).__name__)
    return cast(MutableMapping[str, Any], existing)

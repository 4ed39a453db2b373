"""Cargo config file location, loading and saving.

Cargo reads its configuration from $CARGO_HOME/config.toml, which defaults
to ~/.cargo/config.toml. This module resolves that path, loads the file as a
format-preserving document and writes it back after taking a backup.

Example usage:
    loaded = load_config(config_path)
    apply_proxy(loaded.document, resolve("ustc"))
    backup = save_config(config_path, loaded.document)

Known limitation: there is no locking. Two invocations editing the same
file at once race, and the last writer wins.
"""

from __future__ import annotations

__all__ = [
    "LoadedConfig",
    "backup_config",
    "get_cargo_home",
    "get_config_path",
    "load_config",
    "save_config",
]

import os
import shutil
from pathlib import Path
from typing import NamedTuple

from tomlkit import TOMLDocument
from tomlkit.exceptions import ParseError

from cargo_proxy.constants import (
    CARGO_DIR_NAME,
    CARGO_HOME_ENV,
    CONFIG_FILENAME,
    CONFIG_PATH_ENV,
)
from cargo_proxy.document import dump_document, new_document, parse_document
from cargo_proxy.utils.file_helpers import backup_path_for


class LoadedConfig(NamedTuple):
    """Result of loading the Cargo config file.

    Attributes:
        document: Parsed document, or an empty one when the file is missing
            or unparseable.
        exists: Whether the file existed on disk.
        parse_error: Parser message when the file could not be parsed and
            an empty document was substituted.
    """

    document: TOMLDocument
    exists: bool
    parse_error: str | None = None


def get_cargo_home() -> Path:
    """Get Cargo's home directory ($CARGO_HOME or ~/.cargo)."""
    cargo_home = os.environ.get(CARGO_HOME_ENV)
    if cargo_home:
        return Path(cargo_home).expanduser()
    return Path.home() / CARGO_DIR_NAME


def get_config_path(override: Path | str | None = None) -> Path:
    """Resolve the config file path.

    Resolution order:
        1. override argument (the CLI's --config option)
        2. $CARGO_PROXY_CONFIG
        3. $CARGO_HOME/config.toml, falling back to ~/.cargo/config.toml
    """
    if override:
        return Path(override).expanduser()
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return get_cargo_home() / CONFIG_FILENAME


def load_config(config_path: Path) -> LoadedConfig:
    """Load the config file as a document.

    A missing file yields an empty document. A file that is not valid TOML
    (or not UTF-8) also yields an empty document, with parse_error set so
    the caller can warn that unrelated content will not survive a write.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    if not config_path.exists():
        return LoadedConfig(new_document(), exists=False)

    raw = config_path.read_bytes()
    try:
        return LoadedConfig(parse_document(raw.decode("utf-8")), exists=True)
    except (ParseError, UnicodeDecodeError) as e:
        return LoadedConfig(new_document(), exists=True, parse_error=str(e))


def backup_config(config_path: Path) -> Path | None:
    """Copy the config file to its .backup sibling, replacing older backups.

    Returns:
        The backup path, or None if there was no file to back up.

    Raises:
        OSError: If the copy fails.
    """
    if not config_path.exists():
        return None
    backup_path = backup_path_for(config_path)
    shutil.copy(config_path, backup_path)
    return backup_path


def save_config(config_path: Path, document: TOMLDocument) -> Path | None:
    """Back up the existing file, then write the document.

    Parent directories are created when missing.

    Returns:
        The backup path, or None if no file existed before.

    Raises:
        OSError: If the directory cannot be created or the backup or write
            fails.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    backup_path = backup_config(config_path)
    config_path.write_bytes(dump_document(document).encode("utf-8"))
    return backup_path

"""Shared file utilities for cargo-proxy.

Provides:
- get_log_dir: Directory for system and history logs
- compute_file_checksum: SHA256 checksum for change tracking
- backup_path_for: Sibling .backup path for a config file
"""

from __future__ import annotations

__all__ = [
    "backup_path_for",
    "compute_file_checksum",
    "get_log_dir",
]

import hashlib
import os
from pathlib import Path

from platformdirs import user_log_dir

from cargo_proxy.constants import APP_NAME, BACKUP_SUFFIX, LOG_DIR_ENV


def get_log_dir() -> Path:
    """Get the log directory.

    Uses $CARGO_PROXY_LOG_DIR when set, otherwise the platform log directory:
    - macOS: ~/Library/Logs/cargo-proxy
    - Linux: ~/.local/state/cargo-proxy/log
    - Windows: %LOCALAPPDATA%\\cargo-proxy\\Logs
    """
    override = os.environ.get(LOG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(user_log_dir(APP_NAME))


def compute_file_checksum(file_path: Path) -> str | None:
    """Compute SHA256 checksum of file content.

    Returns:
        Checksum in format "sha256:<hex_digest>", or None if the file
        does not exist.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    if not file_path.exists():
        return None
    digest = hashlib.sha256(file_path.read_bytes()).hexdigest()
    return f"sha256:{digest}"


def backup_path_for(config_path: Path) -> Path:
    """Return the backup path: same name, extension replaced by .backup.

    Example:
        >>> backup_path_for(Path("~/.cargo/config.toml"))
        PosixPath('~/.cargo/config.backup')
    """
    return config_path.with_suffix(BACKUP_SUFFIX)

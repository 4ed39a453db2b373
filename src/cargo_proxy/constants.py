"""Application-wide constants for cargo-proxy.

Constants that define application behavior and the keys this tool owns
inside Cargo's config.toml.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    # Config file location
    "CARGO_DIR_NAME",
    "CONFIG_FILENAME",
    "BACKUP_SUFFIX",
    "CARGO_HOME_ENV",
    "CONFIG_PATH_ENV",
    "LOG_DIR_ENV",
    # Owned keys
    "SOURCE_KEY",
    "CRATES_IO_KEY",
    "REPLACE_WITH_KEY",
    "REGISTRY_KEY",
    "REGISTRIES_KEY",
    "INDEX_KEY",
    "NET_KEY",
    "GIT_FETCH_WITH_CLI_KEY",
    # Proxy naming
    "CUSTOM_PROXY_NAME",
    "URL_SCHEMES",
    "SPARSE_PREFIX",
    # rsproxy layout
    "RSPROXY_NAME",
    "RSPROXY_SPARSE_NAME",
    "RSPROXY_GIT_INDEX",
    "RSPROXY_SPARSE_INDEX",
    # Log files
    "SYSTEM_LOG_FILENAME",
    "HISTORY_LOG_FILENAME",
]

# ============================================================================
# Application Identity
# ============================================================================

APP_NAME: str = "cargo-proxy"

# ============================================================================
# Config File Location
# ============================================================================

# Default location is ~/.cargo/config.toml unless CARGO_HOME points elsewhere.
CARGO_DIR_NAME: str = ".cargo"
CONFIG_FILENAME: str = "config.toml"

# config.toml -> config.backup
BACKUP_SUFFIX: str = ".backup"

CARGO_HOME_ENV: str = "CARGO_HOME"
CONFIG_PATH_ENV: str = "CARGO_PROXY_CONFIG"
LOG_DIR_ENV: str = "CARGO_PROXY_LOG_DIR"

# ============================================================================
# Keys owned by this tool
# ============================================================================

SOURCE_KEY: str = "source"
CRATES_IO_KEY: str = "crates-io"
REPLACE_WITH_KEY: str = "replace-with"
REGISTRY_KEY: str = "registry"
REGISTRIES_KEY: str = "registries"
INDEX_KEY: str = "index"
NET_KEY: str = "net"
GIT_FETCH_WITH_CLI_KEY: str = "git-fetch-with-cli"

# ============================================================================
# Proxy Naming
# ============================================================================

# Alias used for URLs that match no predefined proxy
CUSTOM_PROXY_NAME: str = "custom"

URL_SCHEMES: tuple[str, ...] = ("http://", "https://")

SPARSE_PREFIX: str = "sparse+"

# ============================================================================
# rsproxy layout
# ============================================================================

# rsproxy needs a git index alias, a sparse alias and git-fetch-with-cli
RSPROXY_NAME: str = "rsproxy"
RSPROXY_SPARSE_NAME: str = "rsproxy-sparse"
RSPROXY_GIT_INDEX: str = "https://rsproxy.cn/crates.io-index"
RSPROXY_SPARSE_INDEX: str = "sparse+https://rsproxy.cn/index/"

# ============================================================================
# Log Files
# ============================================================================

SYSTEM_LOG_FILENAME: str = "system.jsonl"
HISTORY_LOG_FILENAME: str = "proxy_history.jsonl"

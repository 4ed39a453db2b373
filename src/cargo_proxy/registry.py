"""Predefined registry mirrors and proxy input resolution.

The registry is a fixed list of well-known crates.io mirrors. User input is
resolved either to one of these entries (by case-insensitive name) or to a
"custom" proxy when it is a plain http(s) URL.

Example usage:
    resolved = resolve("USTC")
    resolved.name  # "ustc"

    resolved = resolve("https://example.com/my-index/")
    resolved.is_custom  # True
"""

from __future__ import annotations

__all__ = [
    "PREDEFINED_PROXIES",
    "ProxyEntry",
    "ResolvedProxy",
    "get_proxy",
    "known_names",
    "match_url",
    "normalize_url",
    "resolve",
]

from pydantic import BaseModel, ConfigDict, Field

from cargo_proxy.constants import CUSTOM_PROXY_NAME, SPARSE_PREFIX, URL_SCHEMES
from cargo_proxy.exceptions import UnknownProxyError


class ProxyEntry(BaseModel):
    """A predefined registry mirror.

    Attributes:
        name: Short name used on the command line (lowercase).
        url: Base URL of the mirror's crates.io index.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)


class ResolvedProxy(BaseModel):
    """Proxy selected by the user, ready to be written to the config."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str

    @property
    def is_custom(self) -> bool:
        """True when the proxy came from a raw URL rather than a known name."""
        return self.name == CUSTOM_PROXY_NAME


PREDEFINED_PROXIES: tuple[ProxyEntry, ...] = (
    ProxyEntry(name="rsproxy", url="https://rsproxy.cn/crates.io-index/"),
    ProxyEntry(name="ustc", url="https://mirrors.ustc.edu.cn/crates.io-index/"),
    ProxyEntry(name="tuna", url="https://mirrors.tuna.tsinghua.edu.cn/crates.io-index/"),
    ProxyEntry(name="aliyun", url="https://mirrors.aliyun.com/crates.io-index/"),
)


def known_names() -> list[str]:
    """Return predefined proxy names in display order."""
    return [entry.name for entry in PREDEFINED_PROXIES]


def get_proxy(name: str) -> ProxyEntry | None:
    """Look up a predefined proxy by exact name."""
    for entry in PREDEFINED_PROXIES:
        if entry.name == name:
            return entry
    return None


def resolve(proxy: str) -> ResolvedProxy:
    """Resolve user input to a proxy name and URL.

    Args:
        proxy: Predefined proxy name (any case) or a URL starting with
            http:// or https://.

    Returns:
        ResolvedProxy for the matching entry, or a "custom" proxy for URLs.

    Raises:
        UnknownProxyError: If the input is neither a known name nor a URL.
    """
    entry = get_proxy(proxy.lower())
    if entry is not None:
        return ResolvedProxy(name=entry.name, url=entry.url)

    if proxy.startswith(URL_SCHEMES):
        return ResolvedProxy(name=CUSTOM_PROXY_NAME, url=proxy)

    raise UnknownProxyError(proxy, known_names())


def normalize_url(url: str) -> str:
    """Strip the sparse+ prefix and trailing slashes for comparison."""
    if url.startswith(SPARSE_PREFIX):
        url = url[len(SPARSE_PREFIX) :]
    return url.rstrip("/")


def match_url(url: str) -> ProxyEntry | None:
    """Find the predefined proxy whose index URL matches a stored URL.

    The stored value may carry a sparse+ prefix and may or may not end with
    a slash; both are ignored.
    """
    target = normalize_url(url)
    for entry in PREDEFINED_PROXIES:
        if normalize_url(entry.url) == target:
            return entry
    return None

"""Tests for predefined proxies and input resolution."""

import pytest
from pydantic import ValidationError

from cargo_proxy.exceptions import UnknownProxyError
from cargo_proxy.registry import (
    PREDEFINED_PROXIES,
    ProxyEntry,
    get_proxy,
    known_names,
    match_url,
    normalize_url,
    resolve,
)


class TestPredefinedProxies:
    """Static registry contents."""

    def test_has_four_entries_in_order(self):
        assert known_names() == ["rsproxy", "ustc", "tuna", "aliyun"]

    def test_entries_are_frozen(self):
        entry = PREDEFINED_PROXIES[0]

        with pytest.raises(ValidationError):
            entry.name = "other"  # type: ignore[misc]

    def test_get_proxy_exact_name(self):
        assert get_proxy("tuna") == ProxyEntry(
            name="tuna", url="https://mirrors.tuna.tsinghua.edu.cn/crates.io-index/"
        )

    def test_get_proxy_unknown_returns_none(self):
        assert get_proxy("crates") is None


class TestResolve:
    """resolve() input handling."""

    @pytest.mark.parametrize("name", ["ustc", "USTC", "UsTc"])
    def test_known_name_is_case_insensitive(self, name):
        # Act
        resolved = resolve(name)

        # Assert
        assert resolved.name == "ustc"
        assert resolved.url == "https://mirrors.ustc.edu.cn/crates.io-index/"
        assert not resolved.is_custom

    @pytest.mark.parametrize(
        "url",
        ["https://example.com/my-index/", "http://mirror.local/index"],
    )
    def test_url_resolves_to_custom(self, url):
        # Act
        resolved = resolve(url)

        # Assert
        assert resolved.name == "custom"
        assert resolved.url == url
        assert resolved.is_custom

    def test_unknown_input_raises_with_all_names(self):
        # Act
        with pytest.raises(UnknownProxyError) as exc_info:
            resolve("notaproxy")

        # Assert
        error = exc_info.value
        assert error.proxy == "notaproxy"
        assert error.known_names == ["rsproxy", "ustc", "tuna", "aliyun"]
        message = str(error)
        for name in ("rsproxy", "ustc", "tuna", "aliyun"):
            assert f"  - {name}" in message
        assert "http://" in message and "https://" in message

    def test_unknown_proxy_error_is_value_error(self):
        with pytest.raises(ValueError):
            resolve("ftp://example.com/index")


class TestMatchUrl:
    """Reverse lookup of stored registry URLs."""

    def test_normalize_strips_sparse_prefix_and_slash(self):
        assert normalize_url("sparse+https://a.example/index/") == "https://a.example/index"

    def test_matches_exact_url(self):
        assert match_url("https://mirrors.aliyun.com/crates.io-index/").name == "aliyun"

    def test_matches_sparse_url(self):
        entry = match_url("sparse+https://mirrors.ustc.edu.cn/crates.io-index/")

        assert entry is not None
        assert entry.name == "ustc"

    def test_matches_rsproxy_git_index_without_slash(self):
        entry = match_url("https://rsproxy.cn/crates.io-index")

        assert entry is not None
        assert entry.name == "rsproxy"

    def test_unknown_url_returns_none(self):
        assert match_url("sparse+https://example.com/my-index/") is None

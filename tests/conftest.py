"""Shared fixtures for cargo-proxy tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point CARGO_HOME and the log directory at a temp dir for every test."""
    cargo_home = tmp_path / "cargo-home"
    monkeypatch.setenv("CARGO_HOME", str(cargo_home))
    monkeypatch.setenv("CARGO_PROXY_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CARGO_PROXY_CONFIG", raising=False)
    return cargo_home


@pytest.fixture
def config_path(isolated_env: Path) -> Path:
    """Default config path inside the isolated CARGO_HOME (not created)."""
    return isolated_env / "config.toml"


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Log directory used by the CLI during tests."""
    return tmp_path / "logs"


@pytest.fixture
def unrelated_config() -> str:
    """Config text with settings this tool must not touch."""
    return (
        "# Build settings\n"
        "[build]\n"
        "jobs = 4  # parallel jobs\n"
        'target-dir = "/tmp/target"\n'
        "\n"
        "[alias]\n"
        'b = "build"\n'
        "\n"
        "[net]\n"
        "retry = 3\n"
    )

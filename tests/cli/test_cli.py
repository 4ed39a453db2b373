"""Unit tests for the CLI group.

Tests CLI behavior using Click's CliRunner for isolated, fast testing.
Tests use the AAA pattern (Arrange-Act-Assert) for clarity.
"""

import importlib
from pathlib import Path

import pytest
from click.testing import CliRunner

from cargo_proxy import __version__
from cargo_proxy.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestVersion:
    """Tests for --version flag."""

    def test_version_flag_shows_version(self, runner: CliRunner) -> None:
        """Given --version flag, returns version string."""
        # Act
        result = runner.invoke(cli, ["--version"])

        # Assert
        assert result.exit_code == 0
        assert f"cargo-proxy {__version__}" in result.output

    def test_short_version_flag(self, runner: CliRunner) -> None:
        """Given -v flag, returns version string."""
        result = runner.invoke(cli, ["-v"])

        assert result.exit_code == 0
        assert "cargo-proxy" in result.output


class TestHelp:
    """Tests for help output."""

    def test_root_help_shows_commands(self, runner: CliRunner) -> None:
        """Given --help, shows available commands."""
        # Act
        result = runner.invoke(cli, ["--help"])

        # Assert
        assert result.exit_code == 0
        for command in ("set", "clear", "show", "list", "path"):
            assert command in result.output
        assert "Examples:" in result.output

    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        """Given no subcommand, prints help and exits 0."""
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_set_help(self, runner: CliRunner) -> None:
        """Given set -h, describes the PROXY argument."""
        result = runner.invoke(cli, ["set", "-h"])

        assert result.exit_code == 0
        assert "PROXY" in result.output


class TestPath:
    """Tests for path command."""

    def test_path_uses_cargo_home(self, runner: CliRunner, config_path: Path) -> None:
        """Given CARGO_HOME, prints its config.toml and notes it is missing."""
        # Act
        result = runner.invoke(cli, ["path"])

        # Assert
        assert result.exit_code == 0
        assert str(config_path) in result.output
        assert "does not exist" in result.output

    def test_config_option_overrides(self, runner: CliRunner, tmp_path: Path) -> None:
        """Given --config, prints that path."""
        target = tmp_path / "custom.toml"
        target.write_text("")

        result = runner.invoke(cli, ["--config", str(target), "path"])

        assert result.exit_code == 0
        assert result.output.strip() == str(target)


class TestExports:
    """Tests for the cli.main module exports."""

    def test_main_is_exported(self) -> None:
        # Arrange
        main_module = importlib.import_module("cargo_proxy.cli.main")

        # Assert
        assert set(main_module.__all__) == {"cli", "main"}
        assert all(callable(getattr(main_module, name)) for name in main_module.__all__)

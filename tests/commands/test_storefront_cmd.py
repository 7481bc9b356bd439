"""Tests for storefront CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from shopkit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestStorefrontCommands:
    def test_convert(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "10", "aud"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["converted"] == 15.0

    def test_convert_unknown_currency(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "10", "XYZ"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "UNKNOWN_CURRENCY"

    def test_shipping(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shipping", "US"])
        assert result.exit_code == 0
        assert "$18" in result.output

    def test_shipping_unavailable(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shipping", "Atlantis"])
        assert "Unavailable" in result.output

    def test_home(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["home"])
        assert result.exit_code == 0
        assert "content" in result.output

    def test_checkout(self, cli_runner: CliRunner) -> None:
        ok = cli_runner.invoke(cli, ["checkout", "200", "4111111111111111"])
        assert ok.exit_code == 0
        declined = cli_runner.invoke(cli, ["--json", "checkout", "20000", "4111111111111111"])
        assert declined.exit_code == 1
        assert json.loads(declined.stderr)["error"]["detail"] == {"error": "payment_error"}

    def test_signup(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["signup", "sam@example.com"]).exit_code == 0
        assert cli_runner.invoke(cli, ["signup", "sam"]).exit_code == 1

    def test_login(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "login", "sam@example.com"])
        assert json.loads(result.output)["data"]["code_sent"] is True


@pytest.mark.usefixtures("_isolated_cwd")
class TestRootCommand:
    def test_help_without_subcommand(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "discount" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert "shopkit" in result.output

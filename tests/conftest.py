"""Shared pytest fixtures and fakes for shopkit tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from click.testing import CliRunner

from shopkit.config.settings import ShopSettings
from shopkit.domain.orders import ChargeResult
from shopkit.services.collaborators import Collaborators


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp dir with no shopkit env overrides.

    Keeps a ``shopkit.toml`` further up the real filesystem from leaking
    into tests that rely on code defaults.
    """
    for name in ("SHOPKIT_JSON_OUTPUT", "SHOPKIT_QUIET", "SHOPKIT_VERBOSE", "SHOPKIT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SHOPKIT_CONFIG", str(tmp_path / "shopkit.toml"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(_isolated_cwd: Path) -> ShopSettings:
    """Settings built purely from code defaults."""
    return ShopSettings.from_cli()


@pytest.fixture
def collaborators() -> Collaborators:
    """Collaborator fakes with harmless default behaviour."""
    rates = MagicMock()
    rates.get_exchange_rate.return_value = 1.0
    quotes = MagicMock()
    quotes.get_shipping_quote.return_value = None
    payments = MagicMock()
    payments.charge = AsyncMock(return_value=ChargeResult(status="success"))
    mailer = MagicMock()
    mailer.send_email = AsyncMock(return_value=None)
    codes = MagicMock()
    codes.generate_code.return_value = 123456
    return Collaborators(
        rates=rates,
        quotes=quotes,
        analytics=MagicMock(),
        payments=payments,
        mailer=mailer,
        codes=codes,
    )

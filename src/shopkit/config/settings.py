"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``SHOPKIT_*`` prefix
  3. TOML file: ``shopkit.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
loads the file chosen by :func:`resolve_config_path`.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from shopkit.config.models import (
    CouponsConfig,
    CurrencyConfig,
    DrivingConfig,
    HoursConfig,
    PaymentsConfig,
    SeasonalConfig,
    ShippingConfig,
    UserInputConfig,
    UsernamesConfig,
)


CONFIG_FILENAME = "shopkit.toml"
CONFIG_ENV_VAR = "SHOPKIT_CONFIG"


def resolve_config_path(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the TOML file to load, or None to run on defaults.

    A pinned path (*explicit*, else ``$SHOPKIT_CONFIG``) is used as-is and
    never falls back to discovery: pinning a missing file means no file.
    Otherwise the nearest ``shopkit.toml`` in *start* (default: cwd) or one
    of its ancestors wins.
    """
    pinned = explicit or os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``shopkit.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ShopSettings(BaseSettings):
    """Unified settings for the shopkit CLI and rule services.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SHOPKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    usernames: UsernamesConfig = Field(default_factory=UsernamesConfig)
    user_input: UserInputConfig = Field(default_factory=UserInputConfig)
    coupons: CouponsConfig = Field(default_factory=CouponsConfig)
    driving: DrivingConfig = Field(default_factory=DrivingConfig)
    hours: HoursConfig = Field(default_factory=HoursConfig)
    seasonal: SeasonalConfig = Field(default_factory=SeasonalConfig)
    currency: CurrencyConfig = Field(default_factory=CurrencyConfig)
    shipping: ShippingConfig = Field(default_factory=ShippingConfig)
    payments: PaymentsConfig = Field(default_factory=PaymentsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> ShopSettings:
        """Construct settings from a CLI invocation.

        The TOML file is chosen by :func:`resolve_config_path` from
        *config_path* and *search_from*.
        CLI flags are merged as highest-priority overrides.
        """
        toml_path = resolve_config_path(config_path, search_from)
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

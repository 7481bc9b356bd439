"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shopkit.toml only contains overrides.
An empty file (or no file at all) reproduces the built-in rules.
"""

from __future__ import annotations

from datetime import time

from pydantic import BaseModel, Field, model_validator

from shopkit.domain.eligibility import (
    CLOSES_AT,
    LEGAL_DRIVING_AGES,
    OPENS_AT,
    SEASONAL_DAY,
    SEASONAL_MONTH,
    SEASONAL_RATE,
)
from shopkit.domain.orders import ShippingQuote
from shopkit.domain.pricing import DEFAULT_COUPONS, Coupon
from shopkit.domain.validation import (
    INPUT_MAX_AGE,
    INPUT_MAX_USERNAME,
    INPUT_MIN_AGE,
    INPUT_MIN_USERNAME,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)


def _require_order(low_name: str, low: float, high_name: str, high: float) -> None:
    if low > high:
        msg = f"{low_name} ({low}) is greater than {high_name} ({high})"
        raise ValueError(msg)


class UsernamesConfig(BaseModel):
    """[usernames] section."""

    model_config = {"frozen": True}

    min_length: int = Field(default=USERNAME_MIN_LENGTH, ge=0)
    max_length: int = Field(default=USERNAME_MAX_LENGTH, ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> UsernamesConfig:
        _require_order("min_length", self.min_length, "max_length", self.max_length)
        return self


class UserInputConfig(BaseModel):
    """[user_input] section."""

    model_config = {"frozen": True}

    min_username: int = Field(default=INPUT_MIN_USERNAME, ge=0)
    max_username: int = Field(default=INPUT_MAX_USERNAME, ge=0)
    min_age: int = Field(default=INPUT_MIN_AGE, ge=0)
    max_age: int = Field(default=INPUT_MAX_AGE, ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> UserInputConfig:
        _require_order("min_username", self.min_username, "max_username", self.max_username)
        _require_order("min_age", self.min_age, "max_age", self.max_age)
        return self


class CouponsConfig(BaseModel):
    """[coupons] section."""

    model_config = {"frozen": True}

    catalog: list[Coupon] = Field(default_factory=lambda: list(DEFAULT_COUPONS), min_length=1)


class DrivingConfig(BaseModel):
    """[driving] section."""

    model_config = {"frozen": True}

    legal_ages: dict[str, int] = Field(default_factory=lambda: dict(LEGAL_DRIVING_AGES))


class HoursConfig(BaseModel):
    """[hours] section."""

    model_config = {"frozen": True}

    opens_at: time = OPENS_AT
    closes_at: time = CLOSES_AT

    @model_validator(mode="after")
    def check_order(self) -> HoursConfig:
        if self.opens_at > self.closes_at:
            msg = f"opens_at ({self.opens_at}) is after closes_at ({self.closes_at})"
            raise ValueError(msg)
        return self


class SeasonalConfig(BaseModel):
    """[seasonal] section."""

    model_config = {"frozen": True}

    month: int = Field(default=SEASONAL_MONTH, ge=1, le=12)
    day: int = Field(default=SEASONAL_DAY, ge=1, le=31)
    rate: float = Field(default=SEASONAL_RATE, ge=0, lt=1)


class CurrencyConfig(BaseModel):
    """[currency] section."""

    model_config = {"frozen": True}

    base: str = "USD"
    rates: dict[str, float] = Field(
        default_factory=lambda: {"AUD": 1.5, "EUR": 0.92, "GBP": 0.79},
    )


class ShippingConfig(BaseModel):
    """[shipping] section."""

    model_config = {"frozen": True}

    quotes: dict[str, ShippingQuote] = Field(
        default_factory=lambda: {
            "US": ShippingQuote(cost=18, estimated_days=4),
            "UK": ShippingQuote(cost=25, estimated_days=6),
        },
    )


class PaymentsConfig(BaseModel):
    """[payments] section."""

    model_config = {"frozen": True}

    approval_limit: float = Field(default=10_000.0, ge=0)

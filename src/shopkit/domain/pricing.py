"""Coupon catalog and discount application."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from shopkit.domain.outcome import RuleError
from shopkit.domain.validation import is_finite_number


class Coupon(BaseModel):
    """A discount code and the fraction it takes off the price."""

    model_config = {"frozen": True}

    code: str = Field(min_length=1, pattern=r"\S")
    discount: float = Field(gt=0, lt=1)


DEFAULT_COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)


def get_coupons() -> list[Coupon]:
    """Return the built-in coupon catalog. Never empty."""
    return list(DEFAULT_COUPONS)


def find_coupon(code: str, coupons: Iterable[Coupon] | None = None) -> Coupon | None:
    """Look up *code* in *coupons* (default: the built-in catalog)."""
    for coupon in DEFAULT_COUPONS if coupons is None else coupons:
        if coupon.code == code:
            return coupon
    return None


def calculate_discount(
    price: Any,
    code: Any,
    *,
    coupons: Iterable[Coupon] | None = None,
) -> float | RuleError:
    """Apply the coupon named *code* to *price*.

    Returns the discounted price for a known code and the unchanged price for
    an unknown one. Bad input yields a RuleError instead of a price.

    Examples:
        >>> calculate_discount(100, "SAVE20")
        80.0
        >>> calculate_discount(50, "NOPE")
        50
        >>> str(calculate_discount(-1, "SAVE10"))
        'Invalid price'
    """
    if not is_finite_number(price) or price < 0:
        return RuleError(code="INVALID_PRICE", message="Invalid price", field="price")
    if not isinstance(code, str):
        return RuleError(code="INVALID_CODE", message="Invalid discount code", field="code")

    coupon = find_coupon(code, coupons)
    if coupon is None:
        return price
    return price * (1 - coupon.discount)

"""Value objects exchanged with external collaborators.

None of these carry identity beyond the call in which they appear.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class Order(BaseModel):
    model_config = {"frozen": True}

    total_amount: float = Field(ge=0)


class CreditCard(BaseModel):
    model_config = {"frozen": True}

    credit_card_number: str


class ShippingQuote(BaseModel):
    """Cost and delivery estimate for one destination."""

    model_config = {"frozen": True}

    cost: float = Field(ge=0)
    estimated_days: int = Field(ge=0)


class ChargeResult(BaseModel):
    """What the payment processor reports for a charge attempt."""

    model_config = {"frozen": True}

    status: Literal["success", "failed"]


class OrderResult(BaseModel):
    """Outcome of ``submit_order``; ``error`` is set only on failure."""

    model_config = {"frozen": True}

    success: bool
    error: Literal["payment_error"] | None = None

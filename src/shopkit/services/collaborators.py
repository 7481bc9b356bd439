"""Protocols for the external services the storefront calls out to.

Each collaborator exposes exactly one operation. Implementations live in
:mod:`shopkit.infrastructure.adapters`; tests substitute fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from shopkit.domain.orders import ChargeResult, CreditCard, ShippingQuote


class CurrencyRates(Protocol):
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float: ...


class ShippingQuotes(Protocol):
    def get_shipping_quote(self, destination: str) -> ShippingQuote | None: ...


class Analytics(Protocol):
    def track_page_view(self, path: str) -> None: ...


class PaymentProcessor(Protocol):
    async def charge(self, card: CreditCard, amount: float) -> ChargeResult: ...


class EmailSender(Protocol):
    async def send_email(self, address: str, subject: str) -> None: ...


class SecurityCodes(Protocol):
    def generate_code(self) -> int: ...


@dataclass(frozen=True)
class Collaborators:
    """Bundle of collaborator implementations handed to the CLI layer."""

    rates: CurrencyRates
    quotes: ShippingQuotes
    analytics: Analytics
    payments: PaymentProcessor
    mailer: EmailSender
    codes: SecurityCodes

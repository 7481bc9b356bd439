"""In-process collaborator adapters.

These back the CLI with configured tables instead of real rate feeds,
carriers, payment gateways, or mail servers. Every adapter logs what it
would have sent over the wire.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from shopkit.domain.orders import ChargeResult, CreditCard, ShippingQuote
from shopkit.services.collaborators import Collaborators

if TYPE_CHECKING:
    from shopkit.config.settings import ShopSettings

log = structlog.get_logger(__name__)


class UnknownCurrencyError(LookupError):
    """Raised when no rate is configured for a currency pair."""


@dataclass
class StaticRateTable:
    """Exchange rates quoted against a single base currency."""

    base: str
    rates: dict[str, float]

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        if from_currency == to_currency:
            return 1.0
        if from_currency != self.base:
            msg = f"Rates are only quoted from {self.base}, not {from_currency}"
            raise UnknownCurrencyError(msg)
        try:
            rate = self.rates[to_currency]
        except KeyError:
            msg = f"No exchange rate configured for {to_currency}"
            raise UnknownCurrencyError(msg) from None
        log.debug("exchange_rate", source=from_currency, target=to_currency, rate=rate)
        return rate


@dataclass
class FlatShippingTable:
    quotes: dict[str, ShippingQuote]

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        quote = self.quotes.get(destination)
        log.debug("shipping_quote", destination=destination, found=quote is not None)
        return quote


@dataclass
class LoggingAnalytics:
    """Records page views in memory and in the log."""

    views: list[str] = field(default_factory=list)

    def track_page_view(self, path: str) -> None:
        self.views.append(path)
        log.info("page_view", path=path)


@dataclass
class ApprovingPaymentProcessor:
    """Approves any charge up to *approval_limit*; declines the rest."""

    approval_limit: float

    async def charge(self, card: CreditCard, amount: float) -> ChargeResult:
        status = "success" if amount <= self.approval_limit else "failed"
        log.info(
            "charge",
            card_suffix=card.credit_card_number[-4:],
            amount=amount,
            status=status,
        )
        return ChargeResult(status=status)


@dataclass
class LoggingEmailSender:
    """Keeps sent messages as ``(address, subject)`` pairs."""

    outbox: list[tuple[str, str]] = field(default_factory=list)

    async def send_email(self, address: str, subject: str) -> None:
        self.outbox.append((address, subject))
        log.info("email_sent", address=address, subject=subject)


class RandomSecurityCodes:
    """Six-digit one-time codes from the ``secrets`` CSPRNG."""

    def generate_code(self) -> int:
        return 100_000 + secrets.randbelow(900_000)


def build_collaborators(settings: ShopSettings) -> Collaborators:
    """Wire the in-process adapters from configured tables."""
    return Collaborators(
        rates=StaticRateTable(base=settings.currency.base, rates=dict(settings.currency.rates)),
        quotes=FlatShippingTable(quotes=dict(settings.shipping.quotes)),
        analytics=LoggingAnalytics(),
        payments=ApprovingPaymentProcessor(approval_limit=settings.payments.approval_limit),
        mailer=LoggingEmailSender(),
        codes=RandomSecurityCodes(),
    )

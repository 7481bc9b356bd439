"""Storefront operations that delegate to external collaborators.

Each operation makes exactly one collaborator call per step and lets any
exception raised by the collaborator propagate unchanged.
"""

from __future__ import annotations

import logging
import re

from shopkit.domain.orders import CreditCard, Order, OrderResult
from shopkit.services.collaborators import (
    Analytics,
    CurrencyRates,
    EmailSender,
    PaymentProcessor,
    SecurityCodes,
    ShippingQuotes,
)

logger = logging.getLogger(__name__)

BASE_CURRENCY = "USD"
HOME_PATH = "/home"
HOME_CONTENT = "<div>content</div>"
WELCOME_SUBJECT = "Welcome aboard!"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def get_price_in_currency(
    price: float,
    currency: str,
    *,
    rates: CurrencyRates,
    base_currency: str = BASE_CURRENCY,
) -> float:
    """Convert *price* from *base_currency* into *currency*."""
    rate = rates.get_exchange_rate(base_currency, currency)
    return price * rate


def get_shipping_info(destination: str, *, quotes: ShippingQuotes) -> str:
    """Describe the shipping cost and delivery time for *destination*."""
    quote = quotes.get_shipping_quote(destination)
    if quote is None:
        return "Shipping Unavailable"
    return f"Shipping Cost: ${_money(quote.cost)} ({quote.estimated_days} Days)"


def _money(amount: float) -> str:
    """Render *amount* with cents, dropping them when they are zero."""
    return f"{amount:.2f}".removesuffix(".00")


async def render_page(*, analytics: Analytics) -> str:
    """Return the home page body and record the page view."""
    analytics.track_page_view(HOME_PATH)
    return HOME_CONTENT


async def submit_order(
    order: Order,
    card: CreditCard,
    *,
    payments: PaymentProcessor,
) -> OrderResult:
    """Charge *card* for the order total.

    Any processor status other than ``"success"`` is a payment error.
    """
    result = await payments.charge(card, order.total_amount)
    if result.status != "success":
        logger.info("Payment declined for amount %s", order.total_amount)
        return OrderResult(success=False, error="payment_error")
    return OrderResult(success=True)


def is_valid_email(email: object) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


async def sign_up(email: str, *, mailer: EmailSender) -> bool:
    """Register *email* and send a welcome message.

    Returns False, without sending anything, when the address is malformed.
    """
    if not is_valid_email(email):
        return False
    await mailer.send_email(email, WELCOME_SUBJECT)
    return True


async def login(email: str, *, codes: SecurityCodes, mailer: EmailSender) -> None:
    """Email a freshly generated one-time code to *email*."""
    code = codes.generate_code()
    await mailer.send_email(email, str(code))

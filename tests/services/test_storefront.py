"""Tests for collaborator-backed storefront operations."""

from __future__ import annotations

import re
from unittest.mock import AsyncMock, MagicMock

import pytest

from shopkit.domain.orders import ChargeResult, CreditCard, Order, OrderResult, ShippingQuote
from shopkit.services.storefront import (
    get_price_in_currency,
    get_shipping_info,
    is_valid_email,
    login,
    render_page,
    sign_up,
    submit_order,
)


class TestGetPriceInCurrency:
    def test_multiplies_by_rate(self) -> None:
        rates = MagicMock()
        rates.get_exchange_rate.return_value = 1.5
        assert get_price_in_currency(10, "AUD", rates=rates) == 15
        rates.get_exchange_rate.assert_called_once_with("USD", "AUD")

    def test_custom_base(self) -> None:
        rates = MagicMock()
        rates.get_exchange_rate.return_value = 2.0
        get_price_in_currency(3, "JPY", rates=rates, base_currency="EUR")
        rates.get_exchange_rate.assert_called_once_with("EUR", "JPY")

    def test_rate_errors_propagate(self) -> None:
        rates = MagicMock()
        rates.get_exchange_rate.side_effect = LookupError("no rate")
        with pytest.raises(LookupError, match="no rate"):
            get_price_in_currency(10, "XXX", rates=rates)


class TestGetShippingInfo:
    def test_unavailable_without_quote(self) -> None:
        quotes = MagicMock()
        quotes.get_shipping_quote.return_value = None
        assert re.search("unavailable", get_shipping_info("germany", quotes=quotes), re.I)

    def test_formats_quote(self) -> None:
        quotes = MagicMock()
        quotes.get_shipping_quote.return_value = ShippingQuote(cost=18, estimated_days=4)
        info = get_shipping_info("US", quotes=quotes)
        assert "$18" in info
        assert re.search("4 days", info, re.I)
        quotes.get_shipping_quote.assert_called_once_with("US")

    @pytest.mark.parametrize(
        ("cost", "rendered"),
        [
            (1_234_567, "$1234567 "),
            (12345.67, "$12345.67 "),
            (18.5, "$18.50 "),
            (0, "$0 "),
        ],
    )
    def test_cost_rendered_as_money(self, cost: float, rendered: str) -> None:
        quotes = MagicMock()
        quotes.get_shipping_quote.return_value = ShippingQuote(cost=cost, estimated_days=4)
        info = get_shipping_info("US", quotes=quotes)
        assert rendered in info
        assert "e+" not in info


@pytest.mark.anyio
class TestRenderPage:
    async def test_returns_content(self) -> None:
        assert re.search("content", await render_page(analytics=MagicMock()), re.I)

    async def test_tracks_home_view(self) -> None:
        analytics = MagicMock()
        await render_page(analytics=analytics)
        analytics.track_page_view.assert_called_once_with("/home")


@pytest.mark.anyio
class TestSubmitOrder:
    order = Order(total_amount=200)
    card = CreditCard(credit_card_number="844")

    async def test_charges_card_for_total(self) -> None:
        payments = MagicMock()
        payments.charge = AsyncMock(return_value=ChargeResult(status="success"))
        await submit_order(self.order, self.card, payments=payments)
        payments.charge.assert_awaited_once_with(self.card, 200)

    async def test_failed_payment(self) -> None:
        payments = MagicMock()
        payments.charge = AsyncMock(return_value=ChargeResult(status="failed"))
        result = await submit_order(self.order, self.card, payments=payments)
        assert result == OrderResult(success=False, error="payment_error")

    async def test_successful_payment(self) -> None:
        payments = MagicMock()
        payments.charge = AsyncMock(return_value=ChargeResult(status="success"))
        result = await submit_order(self.order, self.card, payments=payments)
        assert result == OrderResult(success=True)
        assert result.error is None

    async def test_processor_errors_propagate(self) -> None:
        payments = MagicMock()
        payments.charge = AsyncMock(side_effect=ConnectionError("gateway down"))
        with pytest.raises(ConnectionError, match="gateway down"):
            await submit_order(self.order, self.card, payments=payments)


@pytest.mark.anyio
class TestSignUp:
    async def test_valid_email_sends_welcome(self) -> None:
        mailer = MagicMock()
        mailer.send_email = AsyncMock()
        assert await sign_up("sam@example.com", mailer=mailer) is True
        mailer.send_email.assert_awaited_once()
        address, subject = mailer.send_email.await_args.args
        assert address == "sam@example.com"
        assert re.search("welcome", subject, re.I)

    @pytest.mark.parametrize("email", ["", "sam", "sam@", "sam@example", "a b@example.com"])
    async def test_invalid_email_has_no_side_effects(self, email: str) -> None:
        mailer = MagicMock()
        mailer.send_email = AsyncMock()
        assert await sign_up(email, mailer=mailer) is False
        mailer.send_email.assert_not_awaited()


@pytest.mark.anyio
class TestLogin:
    async def test_sends_generated_code(self) -> None:
        codes = MagicMock()
        codes.generate_code.return_value = 424242
        mailer = MagicMock()
        mailer.send_email = AsyncMock()
        await login("sam@example.com", codes=codes, mailer=mailer)
        codes.generate_code.assert_called_once_with()
        mailer.send_email.assert_awaited_once_with("sam@example.com", "424242")

    async def test_mailer_errors_propagate(self) -> None:
        codes = MagicMock()
        codes.generate_code.return_value = 1
        mailer = MagicMock()
        mailer.send_email = AsyncMock(side_effect=OSError("smtp"))
        with pytest.raises(OSError, match="smtp"):
            await login("sam@example.com", codes=codes, mailer=mailer)


class TestIsValidEmail:
    def test_non_string(self) -> None:
        assert is_valid_email(None) is False

    def test_valid(self) -> None:
        assert is_valid_email("first.last+tag@sub.example.org") is True

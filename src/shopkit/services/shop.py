"""ShopService: storefront operations for the CLI.

Drives the coroutines in :mod:`shopkit.services.storefront` to completion
with ``anyio.run`` and wraps their outcomes in ServiceResult. Collaborator
exceptions are not caught here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import anyio

from shopkit.domain.orders import CreditCard, Order, OrderResult
from shopkit.services import storefront
from shopkit.services.base import BaseService
from shopkit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from shopkit.config.settings import ShopSettings
    from shopkit.services.collaborators import Collaborators


class ShopService(BaseService):
    def __init__(self, settings: ShopSettings, collaborators: Collaborators) -> None:
        super().__init__(settings)
        self._collab = collaborators

    def convert(self, price: float, currency: str) -> ServiceResult:
        converted = storefront.get_price_in_currency(
            price,
            currency,
            rates=self._collab.rates,
            base_currency=self._settings.currency.base,
        )
        return ServiceResult.success(
            "get_price_in_currency",
            price=price,
            currency=currency,
            converted=round(converted, 2),
        )

    def shipping(self, destination: str) -> ServiceResult:
        info = storefront.get_shipping_info(destination, quotes=self._collab.quotes)
        return ServiceResult.success("get_shipping_info", destination=destination, info=info)

    def home(self) -> ServiceResult:
        content = anyio.run(_render_home, self._collab)
        return ServiceResult.success("render_page", content=content)

    def checkout(self, amount: float, card_number: str) -> ServiceResult:
        order = Order(total_amount=amount)
        card = CreditCard(credit_card_number=card_number)
        result = anyio.run(_submit, order, card, self._collab)
        if not result.success:
            error = ServiceError(
                code="PAYMENT_ERROR",
                message=f"Payment of {amount} was declined",
                detail={"error": result.error},
            )
            return ServiceResult.failure("submit_order", error)
        return ServiceResult.success("submit_order", amount=amount, success=True)

    def sign_up(self, email: str) -> ServiceResult:
        registered = anyio.run(_sign_up, email, self._collab)
        if not registered:
            error = ServiceError(code="INVALID_EMAIL", message=f"Invalid email address: {email}")
            return ServiceResult.failure("sign_up", error)
        return ServiceResult.success("sign_up", email=email)

    def login(self, email: str) -> ServiceResult:
        anyio.run(_login, email, self._collab)
        return ServiceResult.success("login", email=email, code_sent=True)


async def _render_home(collab: Collaborators) -> str:
    return await storefront.render_page(analytics=collab.analytics)


async def _submit(order: Order, card: CreditCard, collab: Collaborators) -> OrderResult:
    return await storefront.submit_order(order, card, payments=collab.payments)


async def _sign_up(email: str, collab: Collaborators) -> bool:
    return await storefront.sign_up(email, mailer=collab.mailer)


async def _login(email: str, collab: Collaborators) -> None:
    await storefront.login(email, codes=collab.codes, mailer=collab.mailer)

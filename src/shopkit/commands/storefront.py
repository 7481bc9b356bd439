"""Commands: storefront operations backed by in-process collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shopkit.commands._base import ShopCommand

if TYPE_CHECKING:
    from shopkit.commands._context import AppContext
    from shopkit.services.shop import ShopService


def _service(app: AppContext) -> ShopService:
    from shopkit.services.shop import ShopService

    return ShopService(app.settings, app.collaborators)


@click.command(cls=ShopCommand, examples="  shopkit convert 10 AUD")
@click.argument("price", type=float)
@click.argument("currency")
@click.pass_obj
def convert(app: AppContext, price: float, currency: str) -> None:
    """Convert PRICE from the base currency into CURRENCY."""
    from shopkit.infrastructure.adapters import UnknownCurrencyError
    from shopkit.services.result import ServiceError, ServiceResult

    try:
        result = _service(app).convert(price, currency.upper())
    except UnknownCurrencyError as exc:
        result = ServiceResult.failure(
            "get_price_in_currency",
            ServiceError(code="UNKNOWN_CURRENCY", message=str(exc)),
        )
    app.emit(result)


@click.command(cls=ShopCommand, examples="  shopkit shipping US")
@click.argument("destination")
@click.pass_obj
def shipping(app: AppContext, destination: str) -> None:
    """Show the shipping quote for DESTINATION."""
    app.emit(_service(app).shipping(destination))


@click.command(cls=ShopCommand, examples="  shopkit home")
@click.pass_obj
def home(app: AppContext) -> None:
    """Render the home page and record the page view."""
    app.emit(_service(app).home())


@click.command(cls=ShopCommand, examples="  shopkit checkout 200 4111111111111111")
@click.argument("amount", type=click.FloatRange(min=0))
@click.argument("card")
@click.pass_obj
def checkout(app: AppContext, amount: float, card: str) -> None:
    """Charge CARD for an order totalling AMOUNT."""
    app.emit(_service(app).checkout(amount, card))


@click.command(cls=ShopCommand, examples="  shopkit signup sam@example.com")
@click.argument("email")
@click.pass_obj
def signup(app: AppContext, email: str) -> None:
    """Register EMAIL and send a welcome message."""
    app.emit(_service(app).sign_up(email))


@click.command(cls=ShopCommand, examples="  shopkit login sam@example.com")
@click.argument("email")
@click.pass_obj
def login(app: AppContext, email: str) -> None:
    """Email a one-time login code to EMAIL."""
    app.emit(_service(app).login(email))


STOREFRONT_COMMANDS = (convert, shipping, home, checkout, signup, login)

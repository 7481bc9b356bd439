"""Commands: pricing, validation, and eligibility rules."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from shopkit.commands._base import TIMESTAMP_FORMATS, ShopCommand

if TYPE_CHECKING:
    from shopkit.commands._context import AppContext


@click.command(cls=ShopCommand, examples="  shopkit coupons\n  shopkit --json coupons")
@click.pass_obj
def coupons(app: AppContext) -> None:
    """List the configured coupon codes."""
    from shopkit.services.rules import RuleService

    app.emit(RuleService(app.settings).list_coupons())


@click.command(
    cls=ShopCommand,
    examples="""\
  shopkit discount 100 SAVE10
  shopkit --json discount 49.99 SAVE20""",
)
@click.argument("price", type=float)
@click.argument("code")
@click.pass_obj
def discount(app: AppContext, price: float, code: str) -> None:
    """Apply coupon CODE to PRICE."""
    from shopkit.services.rules import RuleService

    app.emit(RuleService(app.settings).discount(price, code))


@click.command("check-username", cls=ShopCommand, examples="  shopkit check-username alice99")
@click.argument("username")
@click.pass_obj
def check_username(app: AppContext, username: str) -> None:
    """Check USERNAME against the configured length bounds."""
    from shopkit.services.rules import RuleService

    app.emit(RuleService(app.settings).check_username(username))


@click.command("validate-user", cls=ShopCommand, examples="  shopkit validate-user sam 20")
@click.argument("username")
@click.argument("age", type=int)
@click.pass_obj
def validate_user(app: AppContext, username: str, age: int) -> None:
    """Validate a USERNAME and AGE pair."""
    from shopkit.services.rules import RuleService

    app.emit(RuleService(app.settings).validate_user(username, age))


@click.command(
    "can-drive",
    cls=ShopCommand,
    examples="""\
  shopkit can-drive 16 US
  shopkit can-drive 17 UK""",
)
@click.argument("age", type=int)
@click.argument("country")
@click.pass_obj
def can_drive(app: AppContext, age: int, country: str) -> None:
    """Check whether AGE meets the legal driving age in COUNTRY."""
    from shopkit.services.rules import RuleService

    app.emit(RuleService(app.settings).driving(age, country.upper()))


_at_option = click.option(
    "--at",
    "at",
    type=click.DateTime(formats=TIMESTAMP_FORMATS),
    default=None,
    help="Moment to evaluate (default: now).",
)


@click.command(cls=ShopCommand, examples="  shopkit online\n  shopkit online --at 2024-05-01T20:01")
@_at_option
@click.pass_obj
def online(app: AppContext, at: datetime | None) -> None:
    """Report whether the store is open."""
    from shopkit.services.rules import RuleService

    app.emit(RuleService(app.settings).online(at or datetime.now()))


@click.command(cls=ShopCommand, examples="  shopkit seasonal --at 2024-12-25")
@_at_option
@click.pass_obj
def seasonal(app: AppContext, at: datetime | None) -> None:
    """Report the seasonal discount in effect."""
    from shopkit.services.rules import RuleService

    app.emit(RuleService(app.settings).seasonal(at or datetime.now()))


RULE_COMMANDS = (coupons, discount, check_username, validate_user, can_drive, online, seasonal)

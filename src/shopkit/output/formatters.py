"""Human, quiet, and JSON rendering of ServiceResult.

``format_result`` picks the mode from :class:`OutputSettings`. Human output
dispatches on ``result.op``; ops without a dedicated renderer get a plain
key-value listing.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from shopkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from shopkit.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)
    return _format_human(result, verbose=settings.verbose)


def _format_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    return f"OK: {result.op}"


def _format_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="shop.ok"), Text(f"  {result.op}", style="shop.op"))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, bool):
        v = Text("yes" if value else "no", style="shop.yes" if value else "shop.no")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(Text(f"  {key}: ", style="shop.key"), v, sep="", soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="shop.error"),
        Text(f"  {result.op}", style="shop.op"),
        Text(f" — {msg}"),
        sep="",
        soft_wrap=True,
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"), soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_coupons(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_edge=False)
    table.add_column("Code")
    table.add_column("Discount", justify="right", style="shop.money")
    for item in result.data.get("items", []):
        table.add_row(item["code"], f"{item['discount']:.0%}")
    console.print(table)


def _render_discount(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "price", data["price"])
    _field(console, "code", data["code"])
    console.print(
        Text("  discounted_price: ", style="shop.key"),
        Text(f"{data['discounted_price']:.2f}", style="shop.money"),
        sep="",
    )
    _field(console, "applied", data["applied"])


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "list_coupons": _render_coupons,
    "calculate_discount": _render_discount,
}

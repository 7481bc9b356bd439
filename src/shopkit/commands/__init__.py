"""Subcommand modules for shopkit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register rule and storefront commands on the root CLI group."""
    from shopkit.commands.rules import RULE_COMMANDS
    from shopkit.commands.storefront import STOREFRONT_COMMANDS

    for command in (*RULE_COMMANDS, *STOREFRONT_COMMANDS):
        cli.add_command(command)

"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Collaborators are built lazily so rule-only commands
never construct adapters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shopkit.config.logging import configure_logging
from shopkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shopkit.config.settings import ShopSettings
    from shopkit.services.collaborators import Collaborators
    from shopkit.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: ShopSettings) -> None:
        self.settings = settings
        self._collaborators: Collaborators | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def collaborators(self) -> Collaborators:
        """In-process collaborator adapters (created on first access)."""
        if self._collaborators is None:
            from shopkit.infrastructure.adapters import build_collaborators

            self._collaborators = build_collaborators(self.settings)
        return self._collaborators

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult and apply exit-code semantics.

        * Success: stdout, returns normally; warnings go to stderr.
        * Failure: stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

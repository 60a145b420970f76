"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the issuance service, and
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docissue.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from docissue.config.settings import DocSettings
    from docissue.services.issuance import IssuanceService
    from docissue.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DocSettings) -> None:
        self.settings = settings
        self._service: IssuanceService | None = None

        from docissue.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from docissue.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> IssuanceService:
        """The issuance service (created lazily on first access)."""
        if self._service is None:
            from docissue.services.issuance import IssuanceService

            self._service = IssuanceService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

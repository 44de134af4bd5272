"""AppContext: the object every subcommand receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from domblock.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from domblock.config.settings import DomSettings
    from domblock.services.result import ServiceResult


class AppContext:
    """Holds settings and turns service results into output and exit codes."""

    def __init__(self, settings: DomSettings) -> None:
        self.settings = settings

        from domblock.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from domblock.services.telemetry import enable_telemetry

            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful output goes to stdout and is skipped when empty, so a
        batch with no queries prints nothing. Warnings and failures go to
        stderr.
        """
        output = format_result(
            result,
            settings=OutputSettings(
                json_output=self.settings.json_output,
                quiet=self.settings.quiet,
                verbose=self.settings.verbose,
            ),
        )
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        if output:
            click.echo(output)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

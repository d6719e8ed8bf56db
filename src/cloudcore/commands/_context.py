"""AppContext — shared state for every cloudcore subcommand."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cloudcore.config.logging import configure_logging
from cloudcore.output.formatters import format_result

if TYPE_CHECKING:
    from cloudcore.config.settings import CloudCoreSettings
    from cloudcore.services.result import OperationResult


class AppContext:
    """Created by the root group; subcommands receive it via ``@click.pass_obj``."""

    def __init__(self, settings: CloudCoreSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: OperationResult) -> None:
        """Print *result*; failures go to stderr and exit with status 1.

        Warnings go to stderr in human mode so piped stdout stays clean.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Resolves the effective dial configuration and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from dialctl.config.models import DialConfig
from dialctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dialctl.config.settings import DialctlSettings
    from dialctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DialctlSettings) -> None:
        self.settings = settings

        from dialctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def dial_config(self, *, perimeter: int | None = None, start: int | None = None) -> DialConfig:
        """Merge per-command ``--perimeter``/``--start`` flags over settings.

        Raises:
            click.UsageError: the combination does not describe a valid dial.
        """
        base = self.settings.dial
        try:
            return DialConfig(
                perimeter=base.perimeter if perimeter is None else perimeter,
                start=base.start if start is None else start,
            )
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            msg = f"Invalid dial configuration: {messages}"
            raise click.UsageError(msg) from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

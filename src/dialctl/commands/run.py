"""Command: simulate a command list from a file or stdin."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from dialctl.commands._base import DialCommand

if TYPE_CHECKING:
    from dialctl.commands._context import AppContext


@click.command(
    cls=DialCommand,
    examples="""\
  dialctl run input.txt
  dialctl run input.txt --trace
  dialctl run input.txt --perimeter 12 --start 0
  cat input.txt | dialctl -q run -
  dialctl --json run input.txt""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--perimeter", type=int, default=None, help="Number of dial positions.")
@click.option("--start", type=int, default=None, help="Starting pointer position.")
@click.option("--trace", is_flag=True, help="Report the position after every command.")
@click.pass_obj
def run(
    app: AppContext,
    source: TextIO,
    perimeter: int | None,
    start: int | None,
    trace: bool,
) -> None:
    """Rotate the dial through every command in SOURCE ('-' for stdin).

    Reports how many commands leave the pointer on 0 and how many times
    the pointer visits 0 in total.
    """
    from dialctl.services.simulate import SimulationService

    dial = app.dial_config(perimeter=perimeter, start=start)
    svc = SimulationService(dial=dial, parser=app.settings.parser)
    app.emit(svc.run_source(source, trace=trace))

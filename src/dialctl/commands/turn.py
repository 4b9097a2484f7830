"""Command: apply rotation tokens given on the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dialctl.commands._base import DialCommand

if TYPE_CHECKING:
    from dialctl.commands._context import AppContext


@click.command(
    cls=DialCommand,
    examples="""\
  dialctl turn L68 L30 R48
  dialctl turn --start 0 L305
  dialctl --json turn R1000""",
)
@click.argument("tokens", nargs=-1, required=True)
@click.option("--perimeter", type=int, default=None, help="Number of dial positions.")
@click.option("--start", type=int, default=None, help="Starting pointer position.")
@click.pass_obj
def turn(
    app: AppContext,
    tokens: tuple[str, ...],
    perimeter: int | None,
    start: int | None,
) -> None:
    """Apply TOKENS (e.g. L68 R48) in order and show every step."""
    from dialctl.services.simulate import SimulationService

    dial = app.dial_config(perimeter=perimeter, start=start)
    svc = SimulationService(dial=dial, parser=app.settings.parser)
    app.emit(svc.turn(tokens))

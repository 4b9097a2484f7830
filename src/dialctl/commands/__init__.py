"""Subcommand modules for dialctl.

Provides register_commands(), which imports command modules lazily so
``dialctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dialctl.commands.run import run
    from dialctl.commands.turn import turn

    cli.add_command(run)
    cli.add_command(turn)

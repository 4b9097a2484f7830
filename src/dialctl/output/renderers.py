"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dialctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dialctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Simulation results collapse to the two counts, one per line:
    zero landings then zero crossings.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "zero_landings" in result.data and "zero_crossings" in result.data:
        return f"{result.data['zero_landings']}\n{result.data['zero_crossings']}"

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="dial.ok")
    op = Text(f"  {result.op}", style="dial.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "dial.key"), (str(value), style)))


def _steps_table(steps: list[dict[str, Any]]) -> Table:
    """Build a per-command table; rows that end on 0 are highlighted."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Line", style="dim", justify="right")
    table.add_column("Command", style="dial.command", no_wrap=True)
    table.add_column("Position", style="dial.position", justify="right")
    table.add_column("Crossings", justify="right")

    for step in steps:
        position = step.get("position")
        table.add_row(
            str(step.get("line", "")),
            str(step.get("command", "")),
            str(position),
            str(step.get("crossings", "")),
            style="dial.zero" if position == 0 else None,
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dial.error")
    op = Text(f"  {result.op}", style="dial.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Simulation renderer ───────────────────────────────────────────────


def _render_simulation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render run/turn results: the dial summary, then the step table if present."""
    d = result.data
    _status_line(console, result)
    for key in ("perimeter", "start", "commands", "final_position"):
        if key in d:
            _field(console, key, d[key])
    _field(console, "zero_landings", d.get("zero_landings", 0), style="dial.zero")
    _field(console, "zero_crossings", d.get("zero_crossings", 0), style="dial.zero")

    steps = d.get("steps")
    if steps:
        console.print()
        console.print(_steps_table(steps))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "run": _render_simulation,
    "turn": _render_simulation,
}

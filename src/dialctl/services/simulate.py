"""SimulationService — drive a dial through a command list.

The service owns everything around the domain core: tokenizing lines,
mapping parse failures to structured errors, and aggregating per-command
results into the two password counts:

- ``zero_landings``: commands that leave the pointer exactly on 0.
- ``zero_crossings``: total visits to 0, including mid-rotation passes.

All commands are parsed before the first one is applied, so a malformed
line never yields a partial simulation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TextIO

from dialctl.config.logging import dial_context
from dialctl.config.models import DialConfig, ParserConfig
from dialctl.domain.commands import Command, CommandParseError, parse_command
from dialctl.domain.dial import Dial
from dialctl.infrastructure.source import UnreadableSource, iter_tokens, read_lines
from dialctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class SimulationService:
    """Run command sequences against a freshly constructed :class:`Dial`.

    Each call builds its own dial, so one service can serve many
    independent runs.
    """

    def __init__(
        self,
        dial: DialConfig | None = None,
        parser: ParserConfig | None = None,
    ) -> None:
        self._dial_config = dial or DialConfig()
        self._parser_config = parser or ParserConfig()

    def run(self, lines: Iterable[str], *, trace: bool = False) -> ServiceResult:
        """Simulate a newline-separated command list.

        Blank lines are skipped. With *trace*, ``data["steps"]`` carries
        one entry per command.
        """
        return self._simulate("run", iter_tokens(lines), trace=trace)

    def run_source(self, source: TextIO, *, trace: bool = False) -> ServiceResult:
        """Read *source* (a file or stdin) and simulate its command list.

        Undecodable input yields an ``UNREADABLE_INPUT`` error result.
        """
        try:
            lines = read_lines(source)
        except UnreadableSource as exc:
            logger.debug("Unreadable input %s: %s", exc.name, exc)
            return ServiceResult(
                ok=False,
                op="run",
                error=ServiceError(
                    code=exc.code,
                    message=str(exc),
                    detail={"source": exc.name},
                ),
            )
        return self.run(lines, trace=trace)

    def turn(self, tokens: Iterable[str]) -> ServiceResult:
        """Apply command tokens given directly, always reporting each step."""
        numbered = ((index, token.strip()) for index, token in enumerate(tokens, start=1))
        return self._simulate("turn", numbered, trace=True)

    # ── internals ────────────────────────────────────────────────────

    def _simulate(
        self,
        op: str,
        numbered_tokens: Iterable[tuple[int, str]],
        *,
        trace: bool,
    ) -> ServiceResult:
        parsed: list[tuple[int, Command]] = []
        for line, token in numbered_tokens:
            try:
                command = parse_command(token, max_magnitude=self._parser_config.max_magnitude)
            except CommandParseError as exc:
                logger.debug("Rejected line %d (%s): %s", line, exc.code, exc)
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code=exc.code,
                        message=f"line {line}: {exc}",
                        detail={"line": line, "token": exc.token},
                    ),
                )
            parsed.append((line, command))

        perimeter = self._dial_config.perimeter
        start_position = self._dial_config.start
        dial = Dial(perimeter=perimeter, position=start_position)

        zero_landings = 0
        zero_crossings = 0
        steps: list[dict[str, Any]] = []
        with dial_context(op=op, perimeter=perimeter, start=start_position):
            for line, command in parsed:
                position, crossings = dial.apply(command)
                logger.debug(
                    "Applied %s from line %d: position=%d crossings=%d",
                    command.token,
                    line,
                    position,
                    crossings,
                )
                if position == 0:
                    zero_landings += 1
                zero_crossings += crossings
                if trace:
                    steps.append(
                        {
                            "line": line,
                            "command": command.token,
                            "position": position,
                            "crossings": crossings,
                        }
                    )

        warnings: list[str] = []
        if not parsed:
            warnings.append("No commands found in input")

        data: dict[str, Any] = {
            "commands": len(parsed),
            "perimeter": perimeter,
            "start": start_position,
            "final_position": dial.position,
            "zero_landings": zero_landings,
            "zero_crossings": zero_crossings,
        }
        if trace:
            data["steps"] = steps
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

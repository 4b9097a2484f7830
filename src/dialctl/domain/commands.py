"""Rotation commands and the token parser.

A command token is ``<D><N>``: one direction letter (``L`` or ``R``)
followed by a non-negative decimal step count, e.g. ``L68`` or ``R1000``.

INVARIANT: Parsing is pure. A malformed token raises a typed
:class:`CommandParseError` subclass and never produces a partial command.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from dialctl.domain.types import Direction

# Largest accepted step count: the signed 32-bit range.
MAX_MAGNITUDE = 2**31 - 1

_MAGNITUDE_PATTERN = re.compile(r"[0-9]+")


class CommandParseError(ValueError):
    """A command token could not be parsed."""

    code = "INVALID_COMMAND"

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class InvalidDirection(CommandParseError):
    """The first character of the token is not a direction letter."""

    code = "INVALID_DIRECTION"


class InvalidMagnitude(CommandParseError):
    """The step count is not a non-negative integer within range."""

    code = "INVALID_MAGNITUDE"


@dataclass(frozen=True)
class Command:
    """A single rotation: a direction and a step count."""

    direction: Direction
    magnitude: int

    @property
    def delta(self) -> int:
        """Signed displacement (negative for BACKWARD)."""
        return self.direction.sign * self.magnitude

    @property
    def token(self) -> str:
        """Canonical text form, e.g. ``L68``."""
        return f"{self.direction.value}{self.magnitude}"


def parse_command(token: str, *, max_magnitude: int = MAX_MAGNITUDE) -> Command:
    """Parse a ``<D><N>`` token into a :class:`Command`.

    Raises:
        InvalidDirection: the first character is not ``L`` or ``R``
            (or the token is empty).
        InvalidMagnitude: the remainder is not a plain decimal literal,
            or exceeds *max_magnitude*.
    """
    head, rest = token[:1], token[1:]
    try:
        direction = Direction(head)
    except ValueError:
        msg = f"Cannot parse direction in {token!r}: expected 'L' or 'R'"
        raise InvalidDirection(token, msg) from None

    if not _MAGNITUDE_PATTERN.fullmatch(rest):
        msg = f"Cannot parse step count in {token!r}: expected a non-negative integer"
        raise InvalidMagnitude(token, msg)

    magnitude = int(rest)
    if magnitude > max_magnitude:
        msg = f"Step count in {token!r} exceeds the maximum of {max_magnitude}"
        raise InvalidMagnitude(token, msg)

    return Command(direction=direction, magnitude=magnitude)


def parse_commands(
    tokens: Iterable[str], *, max_magnitude: int = MAX_MAGNITUDE
) -> list[Command]:
    """Parse *tokens* in order, failing on the first malformed one."""
    return [parse_command(token, max_magnitude=max_magnitude) for token in tokens]

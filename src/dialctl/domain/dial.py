"""Dial state machine — pointer position and zero-crossing accounting.

States are positions ``0..perimeter-1``; transitions are :meth:`Dial.apply`.

Zero crossings are derived geometrically rather than by stepping:

- every whole lap (``magnitude // perimeter``) visits 0 exactly once;
- the residual (``magnitude % perimeter``) visits 0 iff it covers the
  distance to 0 in the direction of travel. Standing on 0, that distance
  is a full perimeter: leaving 0 does not count as visiting it.

INVARIANT: ``0 <= position < perimeter`` between calls.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dialctl.domain.commands import Command
from dialctl.domain.types import Direction

MAX_PERIMETER = 2**31 - 1


@dataclass(frozen=True)
class Turn:
    """Outcome of applying one command."""

    position: int
    crossings: int

    @property
    def landed_on_zero(self) -> bool:
        return self.position == 0

    def __iter__(self) -> Iterator[int]:
        yield self.position
        yield self.crossings


class Dial:
    """A circular dial with a fixed perimeter and a mutable pointer.

    Usage::

        dial = Dial(perimeter=100, position=50)
        position, crossings = dial.apply(parse_command("L68"))
    """

    def __init__(self, perimeter: int = 100, position: int = 0) -> None:
        if not 1 <= perimeter <= MAX_PERIMETER:
            msg = f"Perimeter must be between 1 and {MAX_PERIMETER}, got {perimeter}"
            raise ValueError(msg)
        if not 0 <= position < perimeter:
            msg = f"Start position {position} is outside 0..{perimeter - 1}"
            raise ValueError(msg)
        self._perimeter = perimeter
        self._position = position

    def __repr__(self) -> str:
        return f"Dial(perimeter={self._perimeter}, position={self._position})"

    @property
    def perimeter(self) -> int:
        return self._perimeter

    @property
    def position(self) -> int:
        return self._position

    def position_after(self, command: Command) -> int:
        """Pointer position *command* would leave the dial at."""
        # Python's % already yields a result in [0, perimeter).
        return (self._position + command.delta) % self._perimeter

    def distance_to_zero(self, direction: Direction) -> int:
        """Steps needed to reach 0 travelling in *direction*.

        From 0 itself the answer is a full lap.
        """
        if self._position == 0:
            return self._perimeter
        if direction is Direction.FORWARD:
            return self._perimeter - self._position
        return self._position

    def crossings_for(self, command: Command) -> int:
        """Number of times *command* would visit position 0."""
        full_laps, residual = divmod(command.magnitude, self._perimeter)
        reaches_zero = residual >= self.distance_to_zero(command.direction)
        return full_laps + (1 if reaches_zero else 0)

    def apply(self, command: Command) -> Turn:
        """Rotate by *command*, returning the new position and crossings."""
        crossings = self.crossings_for(command)
        self._position = self.position_after(command)
        return Turn(position=self._position, crossings=crossings)

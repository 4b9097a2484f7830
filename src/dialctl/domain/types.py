"""Rotation direction enum.

Directions are written ``L`` (toward lower numbers) and ``R`` (toward
higher numbers) in command tokens.
"""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Direction of travel around the dial."""

    BACKWARD = "L"
    FORWARD = "R"

    @property
    def sign(self) -> int:
        """Signed unit multiplier: -1 for BACKWARD, +1 for FORWARD."""
        return -1 if self is Direction.BACKWARD else 1

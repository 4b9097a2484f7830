"""Tests for Command and the token parser."""

from __future__ import annotations

import dataclasses

import pytest

from dialctl.domain.commands import (
    MAX_MAGNITUDE,
    Command,
    CommandParseError,
    InvalidDirection,
    InvalidMagnitude,
    parse_command,
    parse_commands,
)
from dialctl.domain.types import Direction


class TestCommand:
    def test_delta_backward(self) -> None:
        assert Command(Direction.BACKWARD, 68).delta == -68

    def test_delta_forward(self) -> None:
        assert Command(Direction.FORWARD, 48).delta == 48

    def test_token(self) -> None:
        assert Command(Direction.BACKWARD, 68).token == "L68"
        assert Command(Direction.FORWARD, 0).token == "R0"

    def test_frozen(self) -> None:
        cmd = Command(Direction.FORWARD, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cmd.magnitude = 2  # type: ignore[misc]


class TestParseCommand:
    def test_backward(self) -> None:
        assert parse_command("L68") == Command(direction=Direction.BACKWARD, magnitude=68)

    def test_forward(self) -> None:
        assert parse_command("R48") == Command(direction=Direction.FORWARD, magnitude=48)

    def test_zero_magnitude(self) -> None:
        assert parse_command("R0").magnitude == 0

    def test_leading_zeros(self) -> None:
        assert parse_command("L007").magnitude == 7

    def test_multi_lap_magnitude(self) -> None:
        assert parse_command("R1000").magnitude == 1000

    def test_max_magnitude_accepted(self) -> None:
        assert parse_command(f"R{MAX_MAGNITUDE}").magnitude == MAX_MAGNITUDE

    @pytest.mark.parametrize("token", ["E68", "l68", "r5", "68", "", " L5", "X"])
    def test_invalid_direction(self, token: str) -> None:
        with pytest.raises(InvalidDirection) as excinfo:
            parse_command(token)
        assert excinfo.value.token == token
        assert excinfo.value.code == "INVALID_DIRECTION"

    @pytest.mark.parametrize(
        "token",
        ["LA8", "L", "R-5", "R+5", "L5 ", "L5\n", "R1_000", "R1.5", "R٣"],
    )
    def test_invalid_magnitude(self, token: str) -> None:
        with pytest.raises(InvalidMagnitude) as excinfo:
            parse_command(token)
        assert excinfo.value.code == "INVALID_MAGNITUDE"

    def test_magnitude_over_range(self) -> None:
        with pytest.raises(InvalidMagnitude, match="exceeds"):
            parse_command(f"L{MAX_MAGNITUDE + 1}")

    def test_custom_max_magnitude(self) -> None:
        assert parse_command("R10", max_magnitude=10).magnitude == 10
        with pytest.raises(InvalidMagnitude):
            parse_command("R11", max_magnitude=10)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_command("E1")
        assert issubclass(InvalidDirection, CommandParseError)
        assert issubclass(InvalidMagnitude, CommandParseError)


class TestParseCommands:
    def test_preserves_order(self) -> None:
        commands = parse_commands(["L68", "L30", "R48"])
        assert [c.token for c in commands] == ["L68", "L30", "R48"]

    def test_fails_on_first_bad_token(self) -> None:
        with pytest.raises(InvalidDirection) as excinfo:
            parse_commands(["L1", "Q2", "LA3"])
        assert excinfo.value.token == "Q2"

    def test_empty(self) -> None:
        assert parse_commands([]) == []

"""Shared pytest fixtures and test helpers for dialctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from dialctl.domain.commands import Command
from dialctl.domain.types import Direction

# The worked example: ten rotations from 50 on a 100-position dial.
EXAMPLE_COMMANDS = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep stray dialctl.toml files and DIALCTL_* env vars out of every test."""
    monkeypatch.delenv("DIALCTL_CONFIG", raising=False)
    for key in ("DIALCTL_DIAL__PERIMETER", "DIALCTL_DIAL__START", "DIALCTL_PARSER__MAX_MAGNITUDE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dial_logger = logging.getLogger("dialctl")
    dial_level = dial_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dial_logger.setLevel(dial_level)


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    """The worked example written one token per line, with a trailing blank line."""
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE_COMMANDS) + "\n\n", encoding="utf-8")
    return path


def left(magnitude: int) -> Command:
    return Command(direction=Direction.BACKWARD, magnitude=magnitude)


def right(magnitude: int) -> Command:
    return Command(direction=Direction.FORWARD, magnitude=magnitude)

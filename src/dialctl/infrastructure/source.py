"""Command list sources.

A command list is plain text with one token per line. Blank lines and
surrounding whitespace are ignored; line numbers are kept so parse
errors can point at the offending line.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO


class UnreadableSource(ValueError):
    """A command list could not be decoded as UTF-8 text."""

    code = "UNREADABLE_INPUT"

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


def read_lines(stream: TextIO) -> list[str]:
    """Read a UTF-8 command list, returning its lines without newlines.

    Raises:
        UnreadableSource: the stream holds bytes that are not valid UTF-8.
    """
    name = str(getattr(stream, "name", "<input>"))
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        bad = exc.object[exc.start : exc.end]
        msg = f"{name} is not valid UTF-8 text: {exc.reason} ({bytes(bad)!r})"
        raise UnreadableSource(name, msg) from exc
    return text.splitlines()


def iter_tokens(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, token)`` for every non-blank line (1-based)."""
    for number, line in enumerate(lines, start=1):
        token = line.strip()
        if token:
            yield number, token

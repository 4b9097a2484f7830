"""structlog configuration for dialctl.

Everything logs to stderr so stdout stays clean for results. The
console renderer is the default; ``--log-json`` switches to one JSON
object per line. Service modules log through stdlib ``logging``; their
records pass through the same processor chain, so both kinds of logger
carry the dial context bound by :func:`dial_context`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

LOGGER_NAME = "dialctl"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib records to a single stderr handler.

    Args:
        verbose: Emit DEBUG records from ``dialctl`` loggers (one per
            applied command). Otherwise only WARNING and above.
        log_json: Render JSON lines instead of the console format.

    Safe to call repeatedly: the root handler is replaced, not stacked.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


@contextmanager
def dial_context(*, op: str, perimeter: int, start: int) -> Iterator[None]:
    """Bind the simulated dial to every record logged inside the block."""
    with structlog.contextvars.bound_contextvars(op=op, perimeter=perimeter, start=start):
        yield

"""Logging for the board: stdlib loggers rendered through structlog.

Every module logs with ``logging.getLogger(__name__)``; this routes those
records, plus any structlog loggers, to one stream handler. Board loggers
emit DEBUG when verbose, everything else stays at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

BOARD_LOGGER = "prjboard"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _final_renderer(log_json: bool, out: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=out.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Install the board's log handler, replacing any earlier one.

    Args:
        verbose: Let ``prjboard.*`` loggers through at DEBUG.
        log_json: One JSON object per line instead of console formatting.
        stream: Where lines go (default: stderr).
    """
    out = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _final_renderer(log_json, out),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(BOARD_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

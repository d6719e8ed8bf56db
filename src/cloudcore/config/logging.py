"""Logging setup: stdlib loggers rendered by structlog.

Library modules only ever call ``logging.getLogger(__name__)``.  Rendering is
decided once, by the application, through :func:`configure_logging`:

- console (default): key/value lines on stderr, colored on a TTY
- JSON (``--log-json``): one JSON object per line on stderr

The same processor chain handles native structlog loggers and plain stdlib
records, so both come out with ``level``, ``logger`` and ``timestamp`` fields.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "cloudcore"

# Chatty dependencies kept at WARNING even when cloudcore runs verbose.
QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "weasyprint", "fontTools")


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def build_formatter(*, log_json: bool, colors: bool = False) -> logging.Formatter:
    """Return a ProcessorFormatter rendering stdlib and structlog records alike."""
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=colors)
    )
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route all logging through a single structlog-formatted handler.

    Safe to call repeatedly; the root handler is replaced, never stacked.

    Args:
        verbose: Let ``cloudcore.*`` loggers through at DEBUG.  Otherwise
            only warnings and errors are shown.
        log_json: Render JSON lines instead of console lines.
        stream: Destination for log lines, ``sys.stderr`` when omitted.
    """
    target = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(target)
    handler.setFormatter(build_formatter(log_json=log_json, colors=target.isatty()))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

"""Structured logging via structlog.

Configured once by the CLI before any work starts. Library modules log
through `logging.getLogger(__name__)`; the stdlib bridge below routes those
records to stderr so they never mix with generated output on stdout.

Renderer selection:
  debug=True   `ConsoleRenderer` with colours for interactive use.
  debug=False  `JSONRenderer` for build logs.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(debug: bool = False) -> None:
    """Configure structlog and the stdlib bridge.

    Calling multiple times is safe; the last call wins.
    """
    level = logging.DEBUG if debug else logging.INFO

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=level,
    )
    # basicConfig is a no-op once handlers exist; the level still has to follow debug
    logging.getLogger().setLevel(level)

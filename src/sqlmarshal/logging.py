"""Structured logging for sqlmarshal, built on structlog.

Library modules only ask for loggers; output is configured once by the
application (the command line does it from settings)::

    >>> from sqlmarshal.logging import configure_logging, get_logger
    >>> configure_logging("DEBUG")
    >>> get_logger(__name__).debug("record_tokenized", table="Person", fields=3)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def _level_from_name(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def configure_logging(level: str | int = "WARNING", json: bool = False) -> None:
    """Route structlog through stdlib logging on stderr.

    Args:
        level: Log level name or number.
        json: Render events as JSON lines instead of console text.
    """
    log_level = _level_from_name(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    logging.basicConfig(format="%(message)s", level=log_level, handlers=[handler], force=True)

    renderer: Processor
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to ``name`` (usually ``__name__``).

    The logger always writes through the stdlib logger of the same name, so
    an application that never calls :func:`configure_logging` keeps full
    control through :mod:`logging`.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )

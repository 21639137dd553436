"""Structured logging configuration.

zkcli logs through structlog.  Log lines go to stderr so that command
output on stdout stays machine readable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

DEFAULT_LEVEL: int = logging.ERROR


def configure_logging(level: int = DEFAULT_LEVEL) -> None:
    """Configure structlog to render events at or above *level*.

    Args:
        level: A :mod:`logging` level such as ``logging.INFO``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog bound logger.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)


def level_for(*, verbose: bool, debug: bool) -> int:
    """Map the CLI verbosity flags to a logging level."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return DEFAULT_LEVEL

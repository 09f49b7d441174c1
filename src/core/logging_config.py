"""Structured logging configuration.

This module initializes a structlog logger with a stable structured format.
Records are routed through the standard ``logging`` tree so they land on
stderr and never mix with command output on stdout.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger rendering JSON through stdlib logging.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def configure_verbose_logging() -> None:
    """Emit info-level records on stderr for the current process."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")

# -*- coding: utf-8 -*-
"""
Centralized logging configuration for the max-calorie solvers.

Library modules only ask for a logger via `get_logger(__name__)`; the
scripts call `configure_logging(...)` once at startup. Until that happens
structlog falls back to its default console output.
"""

from __future__ import annotations
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    extra_processors: Optional[list] = None,
) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Parameters
    ----------
    level : str
        Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_json : bool
        Render events as JSON lines instead of the human-readable console format.
    include_timestamp : bool
        Add an ISO timestamp to each event.
    extra_processors : list | None
        Additional structlog processors inserted before the renderer.
    """
    log_level = getattr(logging, level.upper())

    # Events go to stderr so stdout stays free for the food report.
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Return a structlog logger bound to `name` (typically __name__)."""
    return structlog.get_logger(name)


def get_solver_logger(name: str, method: str) -> FilteringBoundLogger:
    """Return a lazy logger carrying the solver method on every event."""
    return structlog.get_logger(name, subsystem="solver", method=method)

# -*- coding: utf-8 -*-
"""
Logging helpers (structlog).
"""

from .config import configure_logging, get_logger, get_solver_logger

__all__ = ["configure_logging", "get_logger", "get_solver_logger"]

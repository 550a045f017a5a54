# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    DatabaseLoadError,
    StateValidationError,
    InputSizeError,
    SearchCancelledError,
)
from .items import FoodItem, FoodVector

__all__ = [
    # errors
    "SchemaError",
    "DatabaseLoadError",
    "StateValidationError",
    "InputSizeError",
    "SearchCancelledError",
    # core models
    "FoodItem",
    "FoodVector",
]

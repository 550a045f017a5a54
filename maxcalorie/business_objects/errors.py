# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when a food database file violates the expected layout."""


class DatabaseLoadError(SchemaError):
    """Raised when a food database cannot be opened or read at all."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class InputSizeError(StateValidationError):
    """
    Raised when the exhaustive search is handed more items than its
    bitmask enumeration can represent.

    Attributes
    ----------
    size : int
        Number of items that were supplied.
    limit : int
        Exclusive upper bound on the number of items.
    """

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Exhaustive search supports fewer than {limit} items; got {size}."
        )
        self.size = size
        self.limit = limit


class SearchCancelledError(RuntimeError):
    """Raised when a running exhaustive search is stopped by its caller."""

    def __init__(self, masks_evaluated: int) -> None:
        super().__init__(
            f"Exhaustive search cancelled after {masks_evaluated} subsets."
        )
        self.masks_evaluated = masks_evaluated

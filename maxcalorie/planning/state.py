# -*- coding: utf-8 -*-
"""
Immutable input snapshot for a max-calorie planning run.

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.FoodItem
- The snapshot shares FoodItem references with whatever collection it was
  built from; items are frozen, so no copies are needed.
"""

from __future__ import annotations
from dataclasses import dataclass

from maxcalorie.business_objects.errors import StateValidationError
from maxcalorie.business_objects.items import FoodVector


@dataclass(frozen=True)
class SelectionState:
    """
    Immutable problem input.

    Attributes
    ----------
    foods : list[FoodItem]
        All available foods, in source order. Treat as read-only.
    capacity : float
        Maximum total weight (ounces) of the chosen foods.
    """
    foods: FoodVector
    capacity: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.capacity >= 0:
            raise StateValidationError(
                f"SelectionState.capacity must be >= 0; got {self.capacity}."
            )

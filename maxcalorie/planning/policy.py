# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the max-calorie planning pipeline.

Exhaustive-path candidate filter:
  - min_calories / max_calories: inclusive calorie range a food must fall in
  - max_items: keep only the first `max_items` qualifying foods, in source order

The greedy solver ignores these knobs and always sees the full collection.
"""

from __future__ import annotations
from dataclasses import dataclass

from maxcalorie.business_objects.errors import StateValidationError


@dataclass(frozen=True)
class Policy:
    """
    Planning knobs (pure data holder).

    Attributes
    ----------
    min_calories : float
        Lowest calorie value a candidate may have (inclusive).
    max_calories : float
        Highest calorie value a candidate may have (inclusive).
    max_items : int
        Cap on the number of candidates handed to the exhaustive search.
    """
    min_calories: float = 0.0
    max_calories: float = float("inf")
    max_items: int = 20

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.min_calories > self.max_calories:
            raise StateValidationError(
                f"Policy.min_calories ({self.min_calories}) exceeds "
                f"max_calories ({self.max_calories})."
            )
        if self.max_items < 0:
            raise StateValidationError("Policy.max_items must be >= 0.")

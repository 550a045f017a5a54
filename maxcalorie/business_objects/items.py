# -*- coding: utf-8 -*-
"""
Food item model for the max-calorie problem.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List

from .errors import StateValidationError


@dataclass(frozen=True)
class FoodItem:
    """
    One food item available for purchase.

    Attributes
    ----------
    description : str
        Human-readable description, e.g. "spicy chicken breast". Non-empty.
    weight : float
        Weight in ounces. Strictly positive.
    calories : float
        Calories; expected to be nonnegative but not enforced.
    """
    description: str
    weight: float
    calories: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("FoodItem.description must be non-empty.")
        if math.isnan(self.weight) or self.weight <= 0:
            raise StateValidationError(
                f"FoodItem[{self.description}] weight must be > 0; got {self.weight}."
            )

    @property
    def density(self) -> float:
        """Calories per ounce."""
        return self.calories / self.weight


# Ordered collection of shared, read-only food items.
FoodVector = List[FoodItem]

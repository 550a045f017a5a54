# -*- coding: utf-8 -*-
"""
Solution model for max-calorie planning results.

Produced by the solvers and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass

from maxcalorie.business_objects.items import FoodVector


@dataclass(frozen=True)
class Solution:
    """
    Foods chosen by one solver run.

    Attributes
    ----------
    method : str
        Solver that produced the result ("greedy" or "exhaustive").
    foods : list[FoodItem]
        Chosen foods, in the solver's result order.
    total_weight : float
        Sum of the chosen weights (ounces).
    total_calories : float
        Sum of the chosen calories.
    considered : int
        Number of foods the solver was given.
    """
    method: str
    foods: FoodVector
    total_weight: float
    total_calories: float
    considered: int

    @classmethod
    def from_foods(cls, method: str, foods: FoodVector, considered: int) -> "Solution":
        return cls(
            method=method,
            foods=foods,
            total_weight=sum(f.weight for f in foods),
            total_calories=sum(f.calories for f in foods),
            considered=considered,
        )

    @property
    def is_empty(self) -> bool:
        return not self.foods

# -*- coding: utf-8 -*-
"""
Calorie-density features and the density ranking used by the greedy solver.

Pure/stateless: no mutation, no I/O.
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from maxcalorie.business_objects.items import FoodItem


def compute_food_features(food: FoodItem) -> Dict[str, float]:
    """
    Compute derived features for a single food.

    Features:
      - calories: raw calories
      - weight:   raw weight (ounces, always > 0 by FoodItem validation)
      - density:  calories / weight
    """
    c = float(food.calories)
    w = float(food.weight)
    return {
        "calories": c,
        "weight": w,
        "density": c / w,
    }


def rank_by_density(foods: List[FoodItem]) -> List[Tuple[float, FoodItem]]:
    """
    Pair every food with its density and order the pairs by density, highest
    first. `sorted` is stable, so equal densities keep their input order.
    """
    pairs = [(f.density, f) for f in foods]
    return sorted(pairs, key=lambda pair: -pair[0])

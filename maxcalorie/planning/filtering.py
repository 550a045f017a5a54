# -*- coding: utf-8 -*-
"""
Candidate filter for the exhaustive solver.

Drops foods outside a calorie range and bounds the number of candidates,
since the exhaustive search is exponential in its input size.
"""

from __future__ import annotations

from maxcalorie.business_objects.errors import StateValidationError
from maxcalorie.business_objects.items import FoodVector
from maxcalorie.logging import get_logger

logger = get_logger(__name__)


def filter_food_vector(
    source: FoodVector,
    min_calories: float,
    max_calories: float,
    total_size: int,
) -> FoodVector:
    """
    Return the first `total_size` foods of `source` whose calories lie in
    [min_calories, max_calories], in source order.

    Truncation keeps the earliest qualifying foods, not the highest-calorie
    ones. The returned list references the same FoodItem objects as `source`.
    """
    if total_size < 0:
        raise StateValidationError(f"total_size must be >= 0; got {total_size}.")
    if min_calories > max_calories:
        raise StateValidationError(
            f"min_calories ({min_calories}) exceeds max_calories ({max_calories})."
        )

    filtered: FoodVector = []
    scanned = 0
    for food in source:
        if len(filtered) >= total_size:
            break
        scanned += 1
        if min_calories <= food.calories <= max_calories:
            filtered.append(food)

    logger.debug(
        "foods_filtered",
        kept=len(filtered),
        scanned=scanned,
        source_size=len(source),
        min_calories=min_calories,
        max_calories=max_calories,
        total_size=total_size,
    )
    return filtered

# -*- coding: utf-8 -*-
"""
Human-readable listing of a food selection.
"""

from __future__ import annotations
import sys
from typing import List, Optional, TextIO

from maxcalorie.business_objects.items import FoodVector
from maxcalorie.quality_metrics.core import sum_food_vector

HEADER = "*** food Vector ***"
EMPTY_MARKER = "[empty food list]"


def format_food_vector(foods: FoodVector) -> str:
    """
    Render each food on its own line followed by the grand totals.
    An empty selection renders only the header and EMPTY_MARKER.
    """
    lines: List[str] = [HEADER]
    if not foods:
        lines.append(EMPTY_MARKER)
        return "\n".join(lines)

    for food in foods:
        lines.append(
            f"Ye olde {food.description} ==> "
            f"Weight of {food.weight:g} ounces; calories = {food.calories:g}"
        )
    total_weight, total_calories = sum_food_vector(foods)
    lines.append(f"> Grand total weight: {total_weight:g} ounces")
    lines.append(f"> Grand total calories: {total_calories:g}")
    return "\n".join(lines)


def print_food_vector(foods: FoodVector, file: Optional[TextIO] = None) -> None:
    print(format_food_vector(foods), file=file or sys.stdout)

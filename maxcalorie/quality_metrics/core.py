# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for max-calorie runs.
- No side effects
- Works off FoodVector, SelectionState and Solution

Public API:
  - sum_food_vector(foods) -> (total_weight, total_calories)
  - compute_selection_metrics(state, solution) -> Dict[str, float]
  - optimality_gap(heuristic, optimum) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Dict, Tuple

from maxcalorie.business_objects.items import FoodVector
from maxcalorie.planning.solution import Solution
from maxcalorie.planning.state import SelectionState


def sum_food_vector(foods: FoodVector) -> Tuple[float, float]:
    """Total weight and total calories of `foods`."""
    total_weight = 0.0
    total_calories = 0.0
    for food in foods:
        total_weight += food.weight
        total_calories += food.calories
    return total_weight, total_calories


# ---------------------------------------------------------------------------
# 1) Per-run metrics (weight, calories, remaining, utilization, density)
# ---------------------------------------------------------------------------
def compute_selection_metrics(state: SelectionState, solution: Solution) -> Dict[str, float]:
    """
    KPIs for a single solver run.

    Keys:
      - capacity           : weight budget (ounces)
      - total_weight       : chosen weight (ounces)
      - total_calories     : chosen calories
      - remaining_capacity : capacity - total_weight
      - utilization        : total_weight / capacity (0 if capacity == 0)
      - calories_per_ounce : total_calories / total_weight (0 if nothing chosen)
      - selected_count     : number of chosen foods
      - considered_count   : number of foods the solver was given
    """
    total_weight, total_calories = sum_food_vector(solution.foods)
    capacity = float(state.capacity)
    return {
        "capacity": capacity,
        "total_weight": total_weight,
        "total_calories": total_calories,
        "remaining_capacity": capacity - total_weight,
        "utilization": (total_weight / capacity) if capacity > 0 else 0.0,
        "calories_per_ounce": (total_calories / total_weight) if total_weight > 0 else 0.0,
        "selected_count": float(len(solution.foods)),
        "considered_count": float(solution.considered),
    }


# ---------------------------------------------------------------------------
# 2) Heuristic vs optimum
# ---------------------------------------------------------------------------
def optimality_gap(heuristic: Solution, optimum: Solution) -> Dict[str, float]:
    """
    How many calories the heuristic left on the table.

    Keys:
      - absolute : optimum.total_calories - heuristic.total_calories
      - relative : absolute / optimum.total_calories (0 if the optimum is 0)

    Only meaningful when both solvers saw the same candidates; the gap is
    negative when the heuristic saw foods the filtered optimum did not.
    """
    absolute = optimum.total_calories - heuristic.total_calories
    relative = (absolute / optimum.total_calories) if optimum.total_calories != 0 else 0.0
    return {"absolute": absolute, "relative": relative}

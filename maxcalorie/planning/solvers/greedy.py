# -*- coding: utf-8 -*-
"""
Greedy max-calorie solver.

Ranks foods by calorie density (calories per ounce) and fills the weight
budget in that order, skipping any food that no longer fits. There is no
backtracking, so the result can be far from optimal: a light, dense food
taken first may block a heavy food worth many more calories.

Pipeline (run_greedy):
  1) Rank state.foods by density (stable; ties keep source order)
  2) Single pass over the ranking, committing every food that still fits
  3) Build the Solution and, if a Tracker is given, write:
       - candidates.csv        (density ranking)
       - greedy_selection.csv  (chosen foods, in density order)
       - greedy_summary.csv    (totals / utilization)
"""

from __future__ import annotations
from typing import Optional

from maxcalorie.business_objects.errors import StateValidationError
from maxcalorie.business_objects.items import FoodVector
from maxcalorie.heuristics.density import rank_by_density
from maxcalorie.logging import get_solver_logger
from maxcalorie.planning.solution import Solution
from maxcalorie.planning.state import SelectionState
from maxcalorie.planning.tracker import Tracker

METHOD = "greedy"

logger = get_solver_logger(__name__, METHOD)


def greedy_max_calories(foods: FoodVector, total_weight: float) -> FoodVector:
    """
    Choose foods greedily by calories per ounce within `total_weight` ounces.

    Returns
    -------
    list[FoodItem]
        Chosen foods in descending-density order. Their total weight never
        exceeds `total_weight`.
    """
    if not total_weight >= 0:
        raise StateValidationError(f"total_weight must be >= 0; got {total_weight}.")

    chosen: FoodVector = []
    used_weight = 0.0
    for _, food in rank_by_density(foods):
        if used_weight + food.weight <= total_weight:
            used_weight += food.weight
            chosen.append(food)
    return chosen


def run_greedy(
    state: SelectionState,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Run the greedy solver on the full food collection of `state`.

    Returns
    -------
    Solution
        Greedy selection with its totals.
    """
    chosen = greedy_max_calories(state.foods, state.capacity)
    solution = Solution.from_foods(METHOD, chosen, considered=len(state.foods))

    logger.info(
        "greedy_solve_complete",
        considered=solution.considered,
        selected=len(solution.foods),
        capacity=state.capacity,
        total_weight=solution.total_weight,
        total_calories=solution.total_calories,
    )

    if tracker is not None:
        tracker.write_candidates_csv([food for _, food in rank_by_density(state.foods)])
        tracker.write_selection_csv(solution)
        tracker.write_summary_csv(state, solution)

    return solution

# -*- coding: utf-8 -*-
"""
Exhaustive (brute-force) max-calorie solver.

Every subset of the candidate foods is encoded as an integer mask: bit i set
means food i is included. Masks are scanned in ascending order from 0 to
2**n - 1 and the feasible mask with the strictly greatest calorie total is
kept; an equal total found later never replaces it, so ties resolve to the
lowest mask.

The search costs O(2**n * n). Callers bound n with the candidate filter
(see planning.filtering) and the solver itself refuses n >= MAX_EXHAUSTIVE_ITEMS.

Pipeline (run_exhaustive):
  1) Filter state.foods with the Policy calorie range and item cap
  2) Enumerate all masks over the filtered foods
  3) Build the Solution and, if a Tracker is given, write:
       - candidates.csv            (filtered foods with densities)
       - exhaustive_selection.csv  (chosen foods, in source order)
       - exhaustive_summary.csv    (totals / utilization)
"""

from __future__ import annotations
from typing import Callable, Optional

from maxcalorie.business_objects.errors import (
    InputSizeError,
    SearchCancelledError,
    StateValidationError,
)
from maxcalorie.business_objects.items import FoodVector
from maxcalorie.logging import get_solver_logger
from maxcalorie.planning.filtering import filter_food_vector
from maxcalorie.planning.policy import Policy
from maxcalorie.planning.solution import Solution
from maxcalorie.planning.state import SelectionState
from maxcalorie.planning.tracker import Tracker

METHOD = "exhaustive"

# Exclusive bound on the candidate count: masks must fit in 64 bits.
MAX_EXHAUSTIVE_ITEMS = 64

# Polled once per mask; returning True aborts the search.
StopHook = Callable[[], bool]

logger = get_solver_logger(__name__, METHOD)


def _subset_totals(foods: FoodVector, mask: int) -> tuple[float, float]:
    weight = 0.0
    calories = 0.0
    for j, food in enumerate(foods):
        if (mask >> j) & 1:
            weight += food.weight
            calories += food.calories
    return weight, calories


def exhaustive_max_calories(
    foods: FoodVector,
    total_weight: float,
    should_stop: Optional[StopHook] = None,
) -> FoodVector:
    """
    Return the subset of `foods` with the most calories whose weight fits
    within `total_weight` ounces.

    Parameters
    ----------
    foods : list[FoodItem]
        Candidates; fewer than MAX_EXHAUSTIVE_ITEMS of them.
    total_weight : float
        Weight budget in ounces (>= 0).
    should_stop : callable | None
        Cooperative cancellation hook checked before each mask.

    Returns
    -------
    list[FoodItem]
        The optimal subset in source order. Among equal-calorie optima the one
        with the lowest mask wins.

    Raises
    ------
    InputSizeError
        If len(foods) >= MAX_EXHAUSTIVE_ITEMS. Raised before any search.
    SearchCancelledError
        If `should_stop` returned True.
    """
    n = len(foods)
    if n >= MAX_EXHAUSTIVE_ITEMS:
        logger.error("exhaustive_input_too_large", size=n, limit=MAX_EXHAUSTIVE_ITEMS)
        raise InputSizeError(n, MAX_EXHAUSTIVE_ITEMS)
    if not total_weight >= 0:
        raise StateValidationError(f"total_weight must be >= 0; got {total_weight}.")

    best_mask = 0
    best_calories = 0.0
    for mask in range(1 << n):
        if should_stop is not None and should_stop():
            logger.warning("exhaustive_search_cancelled", masks_evaluated=mask, size=n)
            raise SearchCancelledError(mask)
        weight, calories = _subset_totals(foods, mask)
        if weight <= total_weight and calories > best_calories:
            best_mask = mask
            best_calories = calories

    return [food for j, food in enumerate(foods) if (best_mask >> j) & 1]


def run_exhaustive(
    state: SelectionState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
    should_stop: Optional[StopHook] = None,
) -> Solution:
    """
    Filter the foods of `state` with `policy` and search the survivors exhaustively.

    Returns
    -------
    Solution
        Optimal selection over the filtered candidates.
    """
    if policy is None:
        policy = Policy()

    candidates = filter_food_vector(
        state.foods,
        policy.min_calories,
        policy.max_calories,
        policy.max_items,
    )
    logger.info(
        "exhaustive_solve_started",
        candidates=len(candidates),
        subsets=1 << len(candidates) if len(candidates) < MAX_EXHAUSTIVE_ITEMS else None,
        capacity=state.capacity,
    )

    chosen = exhaustive_max_calories(candidates, state.capacity, should_stop=should_stop)
    solution = Solution.from_foods(METHOD, chosen, considered=len(candidates))

    logger.info(
        "exhaustive_solve_complete",
        considered=solution.considered,
        selected=len(solution.foods),
        capacity=state.capacity,
        total_weight=solution.total_weight,
        total_calories=solution.total_calories,
    )

    if tracker is not None:
        tracker.write_candidates_csv(candidates)
        tracker.write_selection_csv(solution)
        tracker.write_summary_csv(state, solution)

    return solution

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the exhaustive max-calorie solver on a filtered food database and print
the selection.

The search is exponential in the candidate count, so the foods are first
filtered to a calorie range and capped at MAX_ITEMS (first qualifying foods
in file order). Set TIME_LIMIT_S to abort long searches.

Usage:
    python scripts/run_exhaustive.py

Outputs under OUT_DIR (when WRITE_ARTIFACTS is True):
  - candidates.csv             (filtered foods, with densities)
  - exhaustive_selection.csv   (chosen foods, in file order)
  - exhaustive_summary.csv     (totals / utilization)
"""

from __future__ import annotations
import os
import sys
import time
from typing import Optional

# ====== CONFIGURATION ======
FOODS_PATH = "data/food_sample.txt"
OUT_DIR = "reports/exhaustive"
WRITE_ARTIFACTS = True

# Weight budget in ounces
CAPACITY = 10.0

# Candidate filter (inclusive calorie range + count cap)
MIN_CALORIES = 1.0
MAX_CALORIES = 1000.0
MAX_ITEMS = 20

# Wall-clock limit for the search; None = no limit
TIME_LIMIT_S: Optional[float] = 60.0

LOG_LEVEL = "INFO"
# ============================

from maxcalorie.business_objects.errors import InputSizeError, SearchCancelledError
from maxcalorie.logging import configure_logging
from maxcalorie.planning import SelectionState, Policy
from maxcalorie.planning.solvers.exhaustive import run_exhaustive
from maxcalorie.planning.tracker import Tracker
from maxcalorie.reporting.printer import print_food_vector
from maxcalorie.utils.read_foods import load_food_database


def main() -> int:
    configure_logging(level=LOG_LEVEL)

    foods = load_food_database(FOODS_PATH)
    state = SelectionState(foods=foods, capacity=CAPACITY)
    policy = Policy(
        min_calories=MIN_CALORIES,
        max_calories=MAX_CALORIES,
        max_items=MAX_ITEMS,
    )

    should_stop = None
    if TIME_LIMIT_S is not None:
        deadline = time.monotonic() + TIME_LIMIT_S
        should_stop = lambda: time.monotonic() > deadline  # noqa: E731

    tracker = Tracker(out_dir=OUT_DIR) if WRITE_ARTIFACTS else None
    try:
        solution = run_exhaustive(state, policy, tracker=tracker, should_stop=should_stop)
    except InputSizeError as e:
        print(f"Too many candidates: {e} Lower MAX_ITEMS.", file=sys.stderr)
        return 2
    except SearchCancelledError as e:
        print(f"Search stopped: {e}", file=sys.stderr)
        return 1

    print(
        f"\n=== Exhaustive selection (capacity {CAPACITY:g} oz, "
        f"{solution.considered} of {len(foods)} foods considered) ==="
    )
    print_food_vector(solution.foods)

    if tracker is not None:
        print(f"\nArtifacts written under: {os.path.abspath(OUT_DIR)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the greedy max-calorie solver on a food database and print the selection.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_greedy.py

Outputs under OUT_DIR (when WRITE_ARTIFACTS is True):
  - candidates.csv         (every food, with densities)
  - greedy_selection.csv   (chosen foods, in density order)
  - greedy_summary.csv     (totals / utilization)
"""

from __future__ import annotations
import os

# ====== CONFIGURATION ======
FOODS_PATH = "data/food_sample.txt"
OUT_DIR = "reports/greedy"
WRITE_ARTIFACTS = True

# Weight budget in ounces
CAPACITY = 10.0

LOG_LEVEL = "INFO"
# ============================

from maxcalorie.logging import configure_logging
from maxcalorie.planning import SelectionState
from maxcalorie.planning.solvers.greedy import run_greedy
from maxcalorie.planning.tracker import Tracker
from maxcalorie.reporting.printer import print_food_vector
from maxcalorie.utils.read_foods import load_food_database


def main() -> None:
    configure_logging(level=LOG_LEVEL)

    foods = load_food_database(FOODS_PATH)
    state = SelectionState(foods=foods, capacity=CAPACITY)

    tracker = Tracker(out_dir=OUT_DIR) if WRITE_ARTIFACTS else None
    solution = run_greedy(state, tracker=tracker)

    print(f"\n=== Greedy selection (capacity {CAPACITY:g} oz, {len(foods)} foods) ===")
    print_food_vector(solution.foods)

    if tracker is not None:
        print(f"\nArtifacts written under: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()

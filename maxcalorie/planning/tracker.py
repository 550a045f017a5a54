# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for max-calorie solver runs.

Files produced (when Tracker is used):
  - candidates.csv             (foods handed to the solver, with densities)
  - <method>_selection.csv     (chosen foods, in the solver's result order)
  - <method>_summary.csv       (one row of run KPIs)

Notes
-----
- Callers decide when to invoke these writers; the solvers call them at the
  end of run_greedy / run_exhaustive when a tracker is passed in.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import Optional

from maxcalorie.business_objects.items import FoodVector
from maxcalorie.heuristics.density import compute_food_features
from maxcalorie.planning.solution import Solution
from maxcalorie.planning.state import SelectionState
from maxcalorie.quality_metrics.core import compute_selection_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def _path(self, filename: str) -> str:
        os.makedirs(self.out_dir, exist_ok=True)
        return os.path.join(self.out_dir, filename)

    def _write_food_rows(self, path: str, foods: FoodVector) -> None:
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "description", "weight", "calories", "density"])
            for idx, food in enumerate(foods):
                feats = compute_food_features(food)
                w.writerow([idx, food.description, feats["weight"], feats["calories"], feats["density"]])

    # -----------------------------
    # Inputs
    # -----------------------------
    def write_candidates_csv(self, foods: FoodVector, filename: str = "candidates.csv") -> str:
        """
        Persist the foods a solver was given, in the order it received them.

        Columns:
          order_index, description, weight, calories, density
        """
        path = self._path(filename)
        self._write_food_rows(path, foods)
        return path

    # -----------------------------
    # Outputs
    # -----------------------------
    def write_selection_csv(self, solution: Solution, filename: Optional[str] = None) -> str:
        """Persist the chosen foods (same columns as candidates.csv)."""
        path = self._path(filename or f"{solution.method}_selection.csv")
        self._write_food_rows(path, solution.foods)
        return path

    def write_summary_csv(
        self,
        state: SelectionState,
        solution: Solution,
        filename: Optional[str] = None,
    ) -> str:
        """
        Persist the run KPIs as a single row.

        Columns:
          method, then every key of compute_selection_metrics(...)
        """
        path = self._path(filename or f"{solution.method}_summary.csv")
        metrics = compute_selection_metrics(state, solution)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["method", *metrics.keys()])
            w.writerow([solution.method, *metrics.values()])
        return path

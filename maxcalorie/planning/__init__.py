# -*- coding: utf-8 -*-
"""
Planning layer public API for the max-calorie pipeline.

This module exposes the core planning-time data contracts:
  - SelectionState (immutable problem snapshot)
  - Policy configuration
  - Solution

Solvers (planning.solvers.greedy / planning.solvers.exhaustive), the
candidate filter and the tracker are intentionally not exported here to
avoid cluttering the namespace. Import them explicitly when needed.
"""

from .state import SelectionState
from .policy import Policy
from .solution import Solution

__all__ = [
    "SelectionState",
    "Policy",
    "Solution",
]

# -*- coding: utf-8 -*-
"""
maxcalorie: choose the foods that maximize calories within a weight limit.

Layers
------
- business_objects : FoodItem model and exceptions
- heuristics       : calorie-density features and ranking
- planning         : state, policy, filtering, solvers, artifact tracker
- quality_metrics  : pure totals / utilization / optimality gap helpers
- reporting        : human-readable listing of a chosen subset
- utils            : food database loader
"""

__version__ = "0.1.0"

"""Tests for the pure quality metrics."""

import pytest

from maxcalorie.business_objects import FoodItem
from maxcalorie.planning import SelectionState, Solution
from maxcalorie.quality_metrics.core import (
    compute_selection_metrics,
    optimality_gap,
    sum_food_vector,
)


class TestSumFoodVector:
    """Test suite for sum_food_vector."""

    def test_empty(self) -> None:
        assert sum_food_vector([]) == (0.0, 0.0)

    def test_totals(self, mixed_foods) -> None:
        assert sum_food_vector(mixed_foods) == (7.0, 30.0)


class TestSelectionMetrics:
    """Test suite for compute_selection_metrics."""

    def test_metrics(self, mixed_foods) -> None:
        state = SelectionState(foods=mixed_foods, capacity=8.0)
        solution = Solution.from_foods("greedy", mixed_foods[:2], considered=3)
        m = compute_selection_metrics(state, solution)
        assert m["total_weight"] == 3.0
        assert m["total_calories"] == 18.0
        assert m["remaining_capacity"] == 5.0
        assert m["utilization"] == pytest.approx(3.0 / 8.0)
        assert m["calories_per_ounce"] == pytest.approx(6.0)
        assert m["selected_count"] == 2
        assert m["considered_count"] == 3

    def test_zero_capacity_and_empty_selection(self) -> None:
        state = SelectionState(foods=[], capacity=0.0)
        solution = Solution.from_foods("exhaustive", [], considered=0)
        m = compute_selection_metrics(state, solution)
        assert m["utilization"] == 0.0
        assert m["calories_per_ounce"] == 0.0
        assert solution.is_empty


class TestOptimalityGap:
    """Test suite for optimality_gap."""

    def test_gap(self, light_and_heavy) -> None:
        greedy = Solution.from_foods("greedy", light_and_heavy[:1], considered=2)
        best = Solution.from_foods("exhaustive", light_and_heavy[1:], considered=2)
        gap = optimality_gap(greedy, best)
        assert gap["absolute"] == 50.0
        assert gap["relative"] == pytest.approx(50.0 / 60.0)

    def test_zero_optimum(self) -> None:
        empty = Solution.from_foods("greedy", [], considered=0)
        assert optimality_gap(empty, empty) == {"absolute": 0.0, "relative": 0.0}

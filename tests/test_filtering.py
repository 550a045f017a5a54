"""Tests for the exhaustive-path candidate filter."""

import pytest

from maxcalorie.business_objects import FoodItem, StateValidationError
from maxcalorie.planning.filtering import filter_food_vector


@pytest.fixture
def foods():
    return [
        FoodItem("zero", 1.0, 0.0),
        FoodItem("low", 1.0, 50.0),
        FoodItem("mid", 1.0, 200.0),
        FoodItem("high", 1.0, 900.0),
        FoodItem("mid2", 1.0, 250.0),
        FoodItem("mid3", 1.0, 300.0),
    ]


class TestFilterFoodVector:
    """Test suite for filter_food_vector."""

    def test_calorie_range_is_inclusive(self, foods) -> None:
        result = filter_food_vector(foods, 50.0, 250.0, 10)
        assert [f.description for f in result] == ["low", "mid", "mid2"]

    def test_truncates_to_first_qualifying_in_source_order(self, foods) -> None:
        result = filter_food_vector(foods, 100.0, 1000.0, 2)
        # Not the two highest-calorie foods ("high", "mid3").
        assert [f.description for f in result] == ["mid", "high"]

    def test_zero_size_gives_empty(self, foods) -> None:
        assert filter_food_vector(foods, 0.0, 1000.0, 0) == []

    def test_shares_item_references(self, foods) -> None:
        result = filter_food_vector(foods, 0.0, 1000.0, 10)
        assert all(a is b for a, b in zip(result, foods))

    def test_source_untouched(self, foods) -> None:
        before = list(foods)
        filter_food_vector(foods, 100.0, 200.0, 1)
        assert foods == before

    def test_negative_size_rejected(self, foods) -> None:
        with pytest.raises(StateValidationError):
            filter_food_vector(foods, 0.0, 10.0, -1)

    def test_inverted_range_rejected(self, foods) -> None:
        with pytest.raises(StateValidationError):
            filter_food_vector(foods, 10.0, 0.0, 5)

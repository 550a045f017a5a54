"""Tests for the FoodItem model."""

import dataclasses
import math

import pytest

from maxcalorie.business_objects import FoodItem, StateValidationError


class TestFoodItem:
    """Test suite for FoodItem validation and derived values."""

    def test_valid_item(self) -> None:
        food = FoodItem("spicy chicken breast", weight=4.0, calories=220.0)
        assert food.description == "spicy chicken breast"
        assert food.weight == 4.0
        assert food.calories == 220.0

    def test_density(self) -> None:
        assert FoodItem("oats", weight=2.0, calories=300.0).density == 150.0

    def test_empty_description_rejected(self) -> None:
        with pytest.raises(StateValidationError):
            FoodItem("", weight=1.0, calories=1.0)

    @pytest.mark.parametrize("weight", [0.0, -1.5, math.nan])
    def test_nonpositive_weight_rejected(self, weight: float) -> None:
        with pytest.raises(StateValidationError):
            FoodItem("water", weight=weight, calories=0.0)

    def test_negative_calories_allowed(self) -> None:
        assert FoodItem("odd", weight=1.0, calories=-5.0).calories == -5.0

    def test_immutable(self) -> None:
        food = FoodItem("egg", weight=1.8, calories=143.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            food.weight = 2.0  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert FoodItem("egg", 1.8, 143.0) == FoodItem("egg", 1.8, 143.0)

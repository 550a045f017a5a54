"""Tests for the human-readable food report."""

import io

from maxcalorie.business_objects import FoodItem
from maxcalorie.reporting.printer import (
    EMPTY_MARKER,
    HEADER,
    format_food_vector,
    print_food_vector,
)


class TestFormatFoodVector:
    """Test suite for format_food_vector / print_food_vector."""

    def test_empty_selection(self) -> None:
        text = format_food_vector([])
        assert text.splitlines() == [HEADER, EMPTY_MARKER]
        assert "Grand total" not in text

    def test_lists_items_and_totals(self) -> None:
        foods = [FoodItem("OATS", 2.5, 389.0), FoodItem("EGG", 1.5, 143.0)]
        lines = format_food_vector(foods).splitlines()
        assert lines[0] == HEADER
        assert lines[1] == "Ye olde OATS ==> Weight of 2.5 ounces; calories = 389"
        assert lines[2] == "Ye olde EGG ==> Weight of 1.5 ounces; calories = 143"
        assert lines[3] == "> Grand total weight: 4 ounces"
        assert lines[4] == "> Grand total calories: 532"

    def test_print_to_stream(self) -> None:
        buf = io.StringIO()
        print_food_vector([], file=buf)
        assert buf.getvalue() == f"{HEADER}\n{EMPTY_MARKER}\n"

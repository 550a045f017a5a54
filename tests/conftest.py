"""Pytest configuration and shared fixtures."""

import random
from pathlib import Path
from typing import Callable, List

import pytest

from maxcalorie.business_objects.items import FoodItem

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def sample_db_path() -> Path:
    """Path to the sample food database shipped with the repo."""
    return DATA_DIR / "food_sample.txt"


@pytest.fixture
def write_db(tmp_path: Path) -> Callable[[List[str]], Path]:
    """Write the given lines (header included) to a temporary database file."""

    def _write(lines: List[str]) -> Path:
        path = tmp_path / "foods.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def light_and_heavy() -> List[FoodItem]:
    """A light dense food that blocks a heavy food worth far more calories."""
    return [
        FoodItem("light", weight=1.0, calories=10.0),
        FoodItem("heavy", weight=10.0, calories=60.0),
    ]


@pytest.fixture
def mixed_foods() -> List[FoodItem]:
    """Foods with distinct densities: 5.0, 8.0, 3.0."""
    return [
        FoodItem("a", weight=2.0, calories=10.0),
        FoodItem("b", weight=1.0, calories=8.0),
        FoodItem("c", weight=4.0, calories=12.0),
    ]


@pytest.fixture
def make_random_foods() -> Callable[[random.Random, int], List[FoodItem]]:
    """Factory for integer-valued foods, so every subset sum is exact."""

    def _make(rng: random.Random, n: int) -> List[FoodItem]:
        return [
            FoodItem(f"food-{i}", weight=float(rng.randint(1, 20)), calories=float(rng.randint(0, 100)))
            for i in range(n)
        ]

    return _make

# -*- coding: utf-8 -*-
"""
I/O helper for loading the food database.

Format: UTF-8 text, one food per line, fields separated by '^':

    description^weight_ounces^calories

The first line is a header row and is ignored. Lines with the wrong field
count, unparsable numbers, or values a FoodItem rejects (empty description,
weight <= 0) are skipped and logged; they never fail the whole load. A file
that cannot be opened raises DatabaseLoadError.

Maps directly to:
- business_objects.items.FoodItem
"""

from __future__ import annotations
import math
from typing import List, Optional

from maxcalorie.business_objects.errors import DatabaseLoadError
from maxcalorie.business_objects.items import FoodItem, FoodVector
from maxcalorie.logging import get_logger

FIELD_SEPARATOR = "^"
FIELD_COUNT = 3

logger = get_logger(__name__)


def _parse_number(field: str) -> Optional[float]:
    try:
        value = float(field.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_food_line(line: str) -> FoodItem:
    """
    Parse one database row into a FoodItem.

    Raises
    ------
    ValueError
        With a short reason if the row cannot become a FoodItem.
    """
    fields: List[str] = line.split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        raise ValueError(f"want {FIELD_COUNT} fields but got {len(fields)}")

    description, weight_field, calories_field = fields
    weight = _parse_number(weight_field)
    if weight is None:
        raise ValueError(f"invalid weight {weight_field!r}")
    calories = _parse_number(calories_field)
    if calories is None:
        raise ValueError(f"invalid calories {calories_field!r}")

    return FoodItem(description=description, weight=weight, calories=calories)


def load_food_database(path: str) -> FoodVector:
    """
    Load all the valid food items from the database at `path`.

    Returns
    -------
    list[FoodItem]
        Valid foods in file order.

    Raises
    ------
    DatabaseLoadError
        If the file cannot be opened or is not valid UTF-8 text.
    """
    foods: FoodVector = []
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_number, raw in enumerate(f, start=1):
                # First line is a header row
                if line_number == 1:
                    continue
                line = raw.rstrip("\r\n")
                if not line.strip():
                    continue
                try:
                    foods.append(parse_food_line(line))
                except ValueError as e:  # includes StateValidationError
                    skipped += 1
                    logger.warning(
                        "food_row_skipped",
                        path=path,
                        line_number=line_number,
                        reason=str(e),
                    )
    except (OSError, UnicodeDecodeError) as e:
        raise DatabaseLoadError(f"{path}: cannot read food database: {e}") from e

    logger.info("food_database_loaded", path=path, loaded=len(foods), skipped=skipped)
    return foods

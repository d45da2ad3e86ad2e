"""Quick-add form parsing."""

import math

from nutriai.domain.errors import InvalidEntryError
from nutriai.domain.foods import DEFAULT_FOOD_NAME, FoodEntry

DEFAULT_GRAMS = "100"


def parse_quick_add(  # noqa: PLR0913
    name: str,
    calories: str,
    protein: str,
    fat: str,
    carb: str,
    grams: str = DEFAULT_GRAMS,
) -> FoodEntry:
    """Build a new entry from raw form text.

    Macro fields must be whole numbers and grams any finite number. An empty
    name falls back to the generic placeholder.
    """
    return FoodEntry(
        name=name.strip() or DEFAULT_FOOD_NAME,
        grams=_parse_float("grams", grams),
        calories=_parse_int("calories", calories),
        protein=_parse_int("protein", protein),
        fat=_parse_int("fat", fat),
        carb=_parse_int("carb", carb),
    )


def _parse_int(field_name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise InvalidEntryError(field_name, raw) from exc


def _parse_float(field_name: str, raw: str) -> float:
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise InvalidEntryError(field_name, raw) from exc
    if not math.isfinite(value):
        raise InvalidEntryError(field_name, raw)
    return value

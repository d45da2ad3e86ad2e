"""Domain models for logged foods."""

from dataclasses import dataclass, field
from typing import NamedTuple
from uuid import uuid4

DEFAULT_FOOD_NAME = "Food"


def new_entry_id() -> str:
    """Return a fresh opaque entry identifier."""
    return str(uuid4())


@dataclass(frozen=True)
class FoodEntry:
    """One logged food item with its calorie and macro contribution."""

    name: str
    grams: float
    calories: int
    protein: int
    fat: int
    carb: int
    id: str = field(default_factory=new_entry_id)


class DailyTotals(NamedTuple):
    """Summed calories and macros for a list of entries."""

    calories: int = 0
    protein: int = 0
    fat: int = 0
    carb: int = 0


@dataclass(frozen=True)
class DailyTargets:
    """Daily calorie and macro goals."""

    calories: int = 2250
    protein_g: int = 180
    fat_g: int = 70
    carbs_g: int = 225


def sum_entries(entries: list[FoodEntry]) -> DailyTotals:
    """Return elementwise totals for a list of entries."""
    calories = protein = fat = carb = 0
    for entry in entries:
        calories += entry.calories
        protein += entry.protein
        fat += entry.fat
        carb += entry.carb
    return DailyTotals(calories, protein, fat, carb)

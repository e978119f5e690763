"""Domain models for logged food entries."""

from dataclasses import dataclass
from typing import Literal

MealType = Literal["breakfast", "lunch", "dinner", "snack"]

MEAL_TYPES: tuple[MealType, ...] = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class FoodEntry:
    """One logged instance of food consumption."""

    id: int
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    time: str
    meal: MealType


@dataclass(frozen=True)
class NutritionTotals:
    """Element-wise sum of macros across logged entries."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0

    def add(self, entry: FoodEntry) -> "NutritionTotals":
        """Return new totals including the given entry."""
        return NutritionTotals(
            calories=self.calories + entry.calories,
            protein=self.protein + entry.protein,
            carbs=self.carbs + entry.carbs,
            fat=self.fat + entry.fat,
        )

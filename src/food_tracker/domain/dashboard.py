"""Domain models for the dashboard view."""

from dataclasses import dataclass

from food_tracker.domain.meals import FoodEntry, NutritionTotals


@dataclass(frozen=True)
class DailyGoals:
    """Daily nutrition targets."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class GoalProgress:
    """Progress of one nutrient against its daily target."""

    consumed: float
    target: float
    percentage: int
    remaining: float


@dataclass(frozen=True)
class DashboardSummary:
    """Totals, goal progress and recent entries."""

    totals: NutritionTotals
    calories: GoalProgress
    protein: GoalProgress
    carbs: GoalProgress
    fat: GoalProgress
    recent_meals: list[FoodEntry]

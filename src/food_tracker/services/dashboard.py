"""Dashboard aggregation over the meal store."""

from dataclasses import dataclass

from food_tracker.domain.dashboard import DailyGoals, DashboardSummary, GoalProgress
from food_tracker.services.meals import MealStore

DEFAULT_GOALS = DailyGoals(calories=2200, protein=150, carbs=250, fat=80)


@dataclass
class DashboardService:
    """Computes today's progress against daily goals."""

    store: MealStore
    goals: DailyGoals = DEFAULT_GOALS
    recent_limit: int = 3

    def summary(self, recent_limit: int | None = None) -> DashboardSummary:
        """Return totals, goal progress and the most recent entries."""
        totals = self.store.get_nutrition_totals()
        limit = self.recent_limit if recent_limit is None else recent_limit
        return DashboardSummary(
            totals=totals,
            calories=goal_progress(totals.calories, self.goals.calories),
            protein=goal_progress(totals.protein, self.goals.protein),
            carbs=goal_progress(totals.carbs, self.goals.carbs),
            fat=goal_progress(totals.fat, self.goals.fat),
            recent_meals=self.store.recent_meals(limit),
        )


def goal_progress(consumed: float, target: float) -> GoalProgress:
    """Return progress of a consumed amount against a target."""
    percentage = round(consumed / target * 100) if target > 0 else 0
    return GoalProgress(
        consumed=consumed,
        target=target,
        percentage=percentage,
        remaining=max(target - consumed, 0),
    )

"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_tracker.domain.dashboard import DailyGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_path: Path = Path(".food_tracker/storage.json")
    storage_key: str = "foodTracker-meals"
    chatbot_delay_seconds: float = 1.5
    recent_meals_limit: int = 3
    calorie_goal: float = 2200
    protein_goal_g: float = 150
    carbs_goal_g: float = 250
    fat_goal_g: float = 80
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOOD_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def daily_goals(self) -> DailyGoals:
        """Return the configured daily targets."""
        return DailyGoals(
            calories=self.calorie_goal,
            protein=self.protein_goal_g,
            carbs=self.carbs_goal_g,
            fat=self.fat_goal_g,
        )

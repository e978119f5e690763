"""Pydantic models for API request payloads."""

from pydantic import BaseModel, field_validator

from food_tracker.domain.meals import MealType
from food_tracker.services.tracker import FoodForm


class FoodFormRequest(BaseModel):
    """Add/edit food form payload; numbers may arrive as text."""

    name: str = ""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""
    meal: MealType = "breakfast"

    @field_validator("calories", "protein", "carbs", "fat", mode="before")
    @classmethod
    def _number_as_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    def to_form(self) -> FoodForm:
        """Convert to the tracker's form draft."""
        return FoodForm(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            meal=self.meal,
        )


class LogFoodRequest(BaseModel):
    """Catalog add-to-log payload."""

    meal: MealType = "snack"


class ChatRequest(BaseModel):
    """Chat message payload."""

    text: str

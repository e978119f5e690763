"""Domain models for the static food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogFood:
    """Nutrition per serving for a known food."""

    id: int
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    category: str
    serving: str

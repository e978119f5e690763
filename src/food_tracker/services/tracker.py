"""Food tracker form handling on top of the meal store."""

import re
from dataclasses import dataclass, replace

from food_tracker.domain.meals import MEAL_TYPES, FoodEntry, MealType
from food_tracker.errors import ValidationError
from food_tracker.services.meals import MealStore, PersistResult

MISSING_FIELDS_MESSAGE = "Please enter at least food name and calories."

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class FoodForm:
    """Draft values typed into the add/edit food form."""

    name: str = ""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""
    meal: MealType = "breakfast"


@dataclass(frozen=True)
class TrackerResult:
    """Entry written by a form submission and the persistence outcome."""

    entry: FoodEntry
    persisted: PersistResult


@dataclass
class FoodTrackerService:
    """Validates form drafts and turns them into meal store commands."""

    store: MealStore

    def submit_new(self, form: FoodForm) -> TrackerResult:
        """Create a new entry from the form."""
        _require_name_and_calories(form)
        entry = FoodEntry(
            id=self.store.next_entry_id(),
            time=self.store.current_time_label(),
            **_form_values(form),
        )
        return TrackerResult(entry=entry, persisted=self.store.add_meal(entry))

    def start_edit(self, meal_id: int) -> FoodForm | None:
        """Return a form populated from an existing entry."""
        entry = self.store.get_meal(meal_id)
        if entry is None:
            return None
        return FoodForm(
            name=entry.name,
            calories=_format_number(entry.calories),
            protein=_format_number(entry.protein),
            carbs=_format_number(entry.carbs),
            fat=_format_number(entry.fat),
            meal=entry.meal,
        )

    def submit_edit(self, meal_id: int, form: FoodForm) -> TrackerResult | None:
        """Replace an existing entry, keeping its id and time."""
        _require_name_and_calories(form)
        current = self.store.get_meal(meal_id)
        if current is None:
            return None
        updated = replace(current, **_form_values(form))
        return TrackerResult(
            entry=updated, persisted=self.store.update_meal(meal_id, updated)
        )

    def delete(self, meal_id: int) -> PersistResult:
        """Delete an entry by id."""
        return self.store.delete_meal(meal_id)

    def grouped(self) -> dict[MealType, list[FoodEntry]]:
        """Return entries grouped by meal category in display order."""
        return {meal: self.store.meals_by_category(meal) for meal in MEAL_TYPES}


def parse_amount(raw: str) -> int:
    """Parse the leading integer of a form value; blanks and junk become 0."""
    match = _INT_PREFIX.match(raw or "")
    if match is None:
        return 0
    return max(int(match.group(1)), 0)


def _require_name_and_calories(form: FoodForm) -> None:
    if not form.name or not form.calories:
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if form.meal not in MEAL_TYPES:
        raise ValidationError(f"Unknown meal category: {form.meal}")


def _form_values(form: FoodForm) -> dict[str, object]:
    return {
        "name": form.name,
        "calories": parse_amount(form.calories),
        "protein": parse_amount(form.protein),
        "carbs": parse_amount(form.carbs),
        "fat": parse_amount(form.fat),
        "meal": form.meal,
    }


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)

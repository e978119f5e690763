"""Meal store: the authoritative collection of logged food entries."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from food_tracker.domain.meals import FoodEntry, MealType, NutritionTotals
from food_tracker.errors import StorageWriteError
from food_tracker.services.persistence import decode_meals, encode_meals

logger = logging.getLogger(__name__)

STORAGE_KEY = "foodTracker-meals"

SEED_MEALS: tuple[FoodEntry, ...] = (
    FoodEntry(
        id=1,
        name="Greek Yogurt with Berries",
        calories=245,
        protein=20,
        carbs=30,
        fat=5,
        time="8:30 AM",
        meal="breakfast",
    ),
    FoodEntry(
        id=2,
        name="Grilled Chicken Salad",
        calories=420,
        protein=45,
        carbs=15,
        fat=22,
        time="12:45 PM",
        meal="lunch",
    ),
    FoodEntry(
        id=3,
        name="Almonds & Apple",
        calories=185,
        protein=6,
        carbs=15,
        fat=14,
        time="3:20 PM",
        meal="snack",
    ),
)


class LocalStorage(Protocol):
    """Durable key-value storage for string values."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def remove_item(self, key: str) -> None:
        """Remove a key if present."""


@dataclass(frozen=True)
class PersistResult:
    """Outcome of writing the collection to storage."""

    ok: bool
    error: str | None = None


def format_time_of_day(moment: datetime) -> str:
    """Format a time the way entries display it, e.g. 08:30 AM."""
    return moment.strftime("%I:%M %p")


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class MealStore:
    """Ordered collection of food entries mirrored to local storage."""

    storage: LocalStorage
    key: str = STORAGE_KEY
    clock: Callable[[], datetime] = _local_now
    _meals: list[FoodEntry] | None = field(default=None, init=False, repr=False)
    _last_id: int = field(default=0, init=False, repr=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False
    )

    def initialize(self) -> list[FoodEntry]:
        """Load persisted entries once, seeding when none are usable."""
        with self._lock:
            if self._meals is not None:
                return self._meals
            result = decode_meals(self.storage.get_item(self.key))
            if result.status == "loaded":
                self._meals = list(result.entries)
                logger.info(
                    "Loaded meals from storage", extra={"count": len(self._meals)}
                )
                return self._meals
            if result.status == "malformed":
                logger.warning(
                    "Discarding malformed stored meals: %s", result.reason
                )
            self._meals = list(SEED_MEALS)
            return self._meals

    @property
    def meals(self) -> list[FoodEntry]:
        """Snapshot of the ordered collection."""
        return self.list_meals()

    def list_meals(self) -> list[FoodEntry]:
        """Return all entries in insertion order."""
        with self._lock:
            return list(self._entries())

    def get_meal(self, meal_id: int) -> FoodEntry | None:
        """Return the entry with the given id, if present."""
        with self._lock:
            for entry in self._entries():
                if entry.id == meal_id:
                    return entry
        return None

    def recent_meals(self, limit: int) -> list[FoodEntry]:
        """Return the last ``limit`` entries in insertion order."""
        if limit <= 0:
            return []
        with self._lock:
            return list(self._entries()[-limit:])

    def meals_by_category(self, meal: MealType) -> list[FoodEntry]:
        """Return entries for one meal category in insertion order."""
        with self._lock:
            return [entry for entry in self._entries() if entry.meal == meal]

    def add_meal(self, entry: FoodEntry) -> PersistResult:
        """Append an entry to the end of the collection."""
        with self._lock:
            self._entries().append(entry)
            return self._persist()

    def update_meal(self, meal_id: int, entry: FoodEntry) -> PersistResult:
        """Replace the entry with ``meal_id`` in place; no-op if absent."""
        with self._lock:
            self._meals = [
                entry if existing.id == meal_id else existing
                for existing in self._entries()
            ]
            return self._persist()

    def delete_meal(self, meal_id: int) -> PersistResult:
        """Remove the entry with ``meal_id``; no-op if absent."""
        with self._lock:
            self._meals = [
                existing for existing in self._entries() if existing.id != meal_id
            ]
            return self._persist()

    def get_nutrition_totals(self) -> NutritionTotals:
        """Return the element-wise sum of macros over all entries."""
        total = NutritionTotals()
        with self._lock:
            for entry in self._entries():
                total = total.add(entry)
        return total

    def next_entry_id(self) -> int:
        """Return a fresh id based on the current time in milliseconds."""
        with self._lock:
            candidate = int(self.clock().timestamp() * 1000)
            highest = max((entry.id for entry in self._entries()), default=0)
            self._last_id = max(candidate, highest + 1, self._last_id + 1)
            return self._last_id

    def current_time_label(self) -> str:
        """Return the display time string for a new entry."""
        return format_time_of_day(self.clock())

    def _entries(self) -> list[FoodEntry]:
        if self._meals is None:
            return self.initialize()
        return self._meals

    def _persist(self) -> PersistResult:
        try:
            self.storage.set_item(self.key, encode_meals(self._entries()))
        except StorageWriteError as exc:
            logger.error("Failed to persist meals: %s", exc)
            return PersistResult(ok=False, error=str(exc))
        return PersistResult(ok=True)

"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from food_tracker.config import Settings
from food_tracker.containers import AppContainer, build_container
from food_tracker.domain.meals import FoodEntry
from food_tracker.errors import StorageWriteError
from food_tracker.services.chatbot import ChatSession, DietChatbot
from food_tracker.services.meals import LocalStorage, MealStore

FIXED_NOW = datetime(2024, 5, 1, 9, 5, tzinfo=UTC)


def fixed_clock() -> datetime:
    return FIXED_NOW


@dataclass
class InMemoryStorage(LocalStorage):
    """In-memory local storage for tests."""

    items: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append(key)

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class FailingStorage(InMemoryStorage):
    """Storage whose writes always fail, like a full quota."""

    def set_item(self, key: str, value: str) -> None:
        raise StorageWriteError("quota exceeded")


def make_entry(entry_id: int, **overrides: object) -> FoodEntry:
    values: dict[str, object] = {
        "id": entry_id,
        "name": f"Food {entry_id}",
        "calories": 100,
        "protein": 10,
        "carbs": 10,
        "fat": 5,
        "time": "09:00 AM",
        "meal": "snack",
    }
    values.update(overrides)
    return FoodEntry(**values)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def meal_store(storage: InMemoryStorage) -> MealStore:
    return MealStore(storage=storage, clock=fixed_clock)


@pytest.fixture
def empty_store(storage: InMemoryStorage) -> MealStore:
    storage.items["foodTracker-meals"] = "[]"
    return MealStore(storage=storage, clock=fixed_clock)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        storage_path=tmp_path / "storage.json",
        chatbot_delay_seconds=0,
    )


@pytest.fixture
def container(settings: Settings, storage: InMemoryStorage) -> AppContainer:
    built = build_container(settings, storage=storage)
    built.chat_session = ChatSession(
        DietChatbot(delay_seconds=0, rng=random.Random(7))
    )
    return built

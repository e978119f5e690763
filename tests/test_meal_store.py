"""Tests for the meal store."""

import json
import logging
from dataclasses import asdict, replace

from food_tracker.domain.meals import FoodEntry, NutritionTotals
from food_tracker.services.meals import SEED_MEALS, MealStore
from tests.conftest import FailingStorage, InMemoryStorage, fixed_clock, make_entry

APPLE = FoodEntry(
    id=10,
    name="Apple",
    calories=95,
    protein=0,
    carbs=25,
    fat=0,
    time="9:00 AM",
    meal="snack",
)


def test_fresh_store_seeds_example_meals(meal_store: MealStore) -> None:
    totals = meal_store.get_nutrition_totals()

    assert meal_store.list_meals() == list(SEED_MEALS)
    assert totals == NutritionTotals(calories=850, protein=71, carbs=60, fat=41)


def test_seed_times_use_unpadded_hours() -> None:
    assert [entry.time for entry in SEED_MEALS] == ["8:30 AM", "12:45 PM", "3:20 PM"]


def test_first_read_loads_without_explicit_initialize(
    storage: InMemoryStorage,
) -> None:
    storage.items["foodTracker-meals"] = json.dumps([asdict(APPLE)])

    store = MealStore(storage=storage)

    assert store.get_meal(10) == APPLE
    assert store.initialize() == [APPLE]


def test_add_meal_appends_and_updates_totals(meal_store: MealStore) -> None:
    before = len(meal_store.meals)

    result = meal_store.add_meal(APPLE)

    assert result.ok
    assert len(meal_store.meals) == before + 1
    assert meal_store.meals[-1] == APPLE
    assert meal_store.get_nutrition_totals().calories == 850 + 95


def test_adds_with_distinct_ids_keep_count_and_order(empty_store: MealStore) -> None:
    entries = [make_entry(entry_id) for entry_id in (5, 3, 9, 1)]
    for entry in entries:
        empty_store.add_meal(entry)

    meals = empty_store.list_meals()
    assert meals == entries
    assert len({meal.id for meal in meals}) == len(entries)
    assert empty_store.recent_meals(2) == entries[-2:]


def test_update_replaces_in_place(meal_store: MealStore) -> None:
    meal_store.add_meal(APPLE)
    meal_store.add_meal(make_entry(11))
    before = meal_store.list_meals()

    updated = replace(APPLE, calories=120)
    meal_store.update_meal(10, updated)

    after = meal_store.list_meals()
    assert after[3] == updated
    assert [meal for index, meal in enumerate(after) if index != 3] == [
        meal for index, meal in enumerate(before) if index != 3
    ]
    assert meal_store.get_nutrition_totals().calories == 850 + 120 + 100


def test_update_and_delete_missing_id_are_noops(meal_store: MealStore) -> None:
    before = meal_store.list_meals()

    meal_store.update_meal(404, make_entry(404))
    meal_store.delete_meal(404)

    assert meal_store.list_meals() == before


def test_delete_removes_entry_and_repeat_is_noop(meal_store: MealStore) -> None:
    meal_store.add_meal(APPLE)

    meal_store.delete_meal(10)
    assert meal_store.get_meal(10) is None
    assert meal_store.get_nutrition_totals().calories == 850

    meal_store.delete_meal(10)
    assert meal_store.list_meals() == list(SEED_MEALS)


def test_totals_are_zero_for_empty_collection(empty_store: MealStore) -> None:
    assert empty_store.get_nutrition_totals() == NutritionTotals(0, 0, 0, 0)


def test_every_mutation_writes_full_collection(
    meal_store: MealStore, storage: InMemoryStorage
) -> None:
    meal_store.add_meal(APPLE)
    meal_store.update_meal(10, replace(APPLE, name="Green Apple"))
    meal_store.delete_meal(1)

    assert storage.writes == ["foodTracker-meals"] * 3
    stored = json.loads(storage.items["foodTracker-meals"])
    assert [row["id"] for row in stored] == [2, 3, 10]
    assert stored[-1]["name"] == "Green Apple"
    assert set(stored[0]) == {
        "id",
        "name",
        "calories",
        "protein",
        "carbs",
        "fat",
        "time",
        "meal",
    }


def test_reload_matches_persisted_state(
    meal_store: MealStore, storage: InMemoryStorage
) -> None:
    meal_store.add_meal(APPLE)

    reloaded = MealStore(storage=storage, clock=fixed_clock)

    assert reloaded.list_meals() == meal_store.list_meals()


def test_initialize_reads_storage_once(storage: InMemoryStorage) -> None:
    store = MealStore(storage=storage)
    store.initialize()
    storage.items["foodTracker-meals"] = "[]"

    store.initialize()

    assert store.list_meals() == list(SEED_MEALS)


def test_malformed_storage_falls_back_to_seed(
    storage: InMemoryStorage, caplog, monkeypatch
) -> None:
    monkeypatch.setattr(logging.getLogger("food_tracker"), "propagate", True)
    storage.items["foodTracker-meals"] = "{not json"

    with caplog.at_level(logging.WARNING, logger="food_tracker"):
        store = MealStore(storage=storage)
        meals = store.list_meals()

    assert meals == list(SEED_MEALS)
    assert "malformed" in caplog.text


def test_schema_violation_falls_back_to_seed(storage: InMemoryStorage) -> None:
    storage.items["foodTracker-meals"] = json.dumps(
        [{"id": 1, "name": "Bad", "calories": "lots"}]
    )

    store = MealStore(storage=storage)

    assert store.list_meals() == list(SEED_MEALS)


def test_write_failure_is_reported_not_raised() -> None:
    store = MealStore(storage=FailingStorage(), clock=fixed_clock)

    result = store.add_meal(APPLE)

    assert not result.ok
    assert result.error == "quota exceeded"
    assert store.meals[-1] == APPLE


def test_next_entry_id_is_unique_and_monotonic(meal_store: MealStore) -> None:
    first = meal_store.next_entry_id()
    second = meal_store.next_entry_id()

    assert first == int(fixed_clock().timestamp() * 1000)
    assert second == first + 1


def test_next_entry_id_skips_past_existing_ids(empty_store: MealStore) -> None:
    future_id = int(fixed_clock().timestamp() * 1000) + 50
    empty_store.add_meal(make_entry(future_id))

    assert empty_store.next_entry_id() == future_id + 1


def test_meals_by_category(meal_store: MealStore) -> None:
    meal_store.add_meal(APPLE)

    snacks = meal_store.meals_by_category("snack")

    assert [meal.id for meal in snacks] == [3, 10]


def test_reload_keeps_entries_without_form_checks(
    empty_store: MealStore, storage: InMemoryStorage
) -> None:
    empty_store.add_meal(make_entry(10))
    empty_store.add_meal(make_entry(11, name="", fat=-1))

    reloaded = MealStore(storage=storage, clock=fixed_clock)

    assert reloaded.list_meals() == empty_store.list_meals()
    assert reloaded.get_meal(11).name == ""

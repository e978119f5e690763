"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_tracker.adapters.json_file_storage import JsonFileStorage
from food_tracker.config import Settings
from food_tracker.services.catalog import FoodCatalogService
from food_tracker.services.chatbot import ChatSession, DietChatbot
from food_tracker.services.dashboard import DashboardService
from food_tracker.services.meals import LocalStorage, MealStore
from food_tracker.services.tracker import FoodTrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: LocalStorage
    meal_store: MealStore
    tracker_service: FoodTrackerService
    catalog_service: FoodCatalogService
    dashboard_service: DashboardService
    chat_session: ChatSession


def build_container(
    settings: Settings | None = None, storage: LocalStorage | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_storage = storage or JsonFileStorage(resolved_settings.storage_path)
    meal_store = MealStore(storage=resolved_storage, key=resolved_settings.storage_key)
    chatbot = DietChatbot(delay_seconds=resolved_settings.chatbot_delay_seconds)
    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        meal_store=meal_store,
        tracker_service=FoodTrackerService(meal_store),
        catalog_service=FoodCatalogService(meal_store),
        dashboard_service=DashboardService(
            store=meal_store,
            goals=resolved_settings.daily_goals(),
            recent_limit=resolved_settings.recent_meals_limit,
        ),
        chat_session=ChatSession(chatbot),
    )

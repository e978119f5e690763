"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from food_tracker.api.schemas import ChatRequest, FoodFormRequest, LogFoodRequest
from food_tracker.app_logging import configure_logging
from food_tracker.containers import AppContainer
from food_tracker.domain.meals import FoodEntry
from food_tracker.errors import NotFoundError, ValidationError
from food_tracker.services.meals import PersistResult


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.meal_store.initialize()
        logger.info(
            "Meal store ready",
            extra={"storage_key": app.state.container.meal_store.key},
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/meals")
    async def list_meals(request: Request) -> dict[str, object]:
        """Return all logged entries in insertion order."""
        store = _container(request).meal_store
        return {"meals": [asdict(entry) for entry in store.list_meals()]}

    @app.get("/meals/totals")
    async def meal_totals(request: Request) -> dict[str, float]:
        """Return nutrition totals over all entries."""
        return asdict(_container(request).meal_store.get_nutrition_totals())

    @app.get("/meals/grouped")
    async def grouped_meals(request: Request) -> dict[str, object]:
        """Return entries grouped by meal category."""
        grouped = _container(request).tracker_service.grouped()
        return {
            meal: [asdict(entry) for entry in entries]
            for meal, entries in grouped.items()
        }

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def add_meal(payload: FoodFormRequest, request: Request) -> dict[str, object]:
        """Log a new entry from the tracker form."""
        result = _container(request).tracker_service.submit_new(payload.to_form())
        return _entry_response(result.entry, result.persisted)

    @app.get("/meals/{meal_id}")
    async def get_meal(meal_id: int, request: Request) -> dict[str, object]:
        """Return one entry."""
        entry = _container(request).meal_store.get_meal(meal_id)
        if entry is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return asdict(entry)

    @app.put("/meals/{meal_id}")
    async def update_meal(
        meal_id: int, payload: FoodFormRequest, request: Request
    ) -> dict[str, object]:
        """Replace an entry with the edited form values."""
        result = _container(request).tracker_service.submit_edit(
            meal_id, payload.to_form()
        )
        if result is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _entry_response(result.entry, result.persisted)

    @app.delete("/meals/{meal_id}")
    async def delete_meal(meal_id: int, request: Request) -> dict[str, object]:
        """Delete an entry; unknown ids are ignored."""
        persisted = _container(request).tracker_service.delete(meal_id)
        return _persist_fields(persisted)

    @app.get("/dashboard")
    async def dashboard(
        request: Request, recent: int | None = None
    ) -> dict[str, object]:
        """Return totals, goal progress and recent entries."""
        return asdict(_container(request).dashboard_service.summary(recent))

    @app.get("/foods")
    async def search_foods(
        request: Request, search: str | None = None, category: str | None = None
    ) -> dict[str, object]:
        """Search the food catalog."""
        foods = _container(request).catalog_service.search(search, category)
        return {"foods": [asdict(food) for food in foods]}

    @app.get("/foods/categories")
    async def food_categories(request: Request) -> dict[str, list[str]]:
        """Return the catalog category filters."""
        return {"categories": _container(request).catalog_service.categories()}

    @app.post("/foods/{food_id}/log", status_code=status.HTTP_201_CREATED)
    async def log_food(
        food_id: int, request: Request, payload: LogFoodRequest | None = None
    ) -> dict[str, object]:
        """Add one serving of a catalog food to the log."""
        meal = payload.meal if payload else "snack"
        logged = _container(request).catalog_service.add_to_log(food_id, meal)
        return _entry_response(logged.entry, logged.persisted)

    @app.get("/chat/messages")
    async def chat_messages(request: Request) -> dict[str, object]:
        """Return the conversation so far."""
        session = _container(request).chat_session
        return {"messages": [asdict(message) for message in session.messages]}

    @app.post("/chat/messages")
    async def send_chat_message(
        payload: ChatRequest, request: Request
    ) -> dict[str, object]:
        """Send a message and wait for the scripted reply."""
        reply = await _container(request).chat_session.send(payload.text)
        if reply is None:
            raise ValidationError("Message text is empty.")
        return {"reply": asdict(reply)}

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _persist_fields(persisted: PersistResult) -> dict[str, object]:
    return {"persisted": persisted.ok, "warning": persisted.error}


def _entry_response(entry: FoodEntry, persisted: PersistResult) -> dict[str, object]:
    return {"meal": asdict(entry), **_persist_fields(persisted)}

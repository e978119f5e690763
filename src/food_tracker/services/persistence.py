"""Serialization of the meal collection for durable local storage."""

import json
from dataclasses import asdict, dataclass, field
from typing import Literal

from pydantic import BaseModel, Field, StrictInt, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from food_tracker.domain.meals import FoodEntry, MealType


class FoodEntryPayload(BaseModel):
    """Stored shape of a food entry.

    Accepts anything the meal store accepts, so a saved collection always
    loads back; field values are checked by the forms that create entries.
    """

    id: StrictInt
    name: str
    calories: float = Field(allow_inf_nan=False)
    protein: float = Field(allow_inf_nan=False)
    carbs: float = Field(allow_inf_nan=False)
    fat: float = Field(allow_inf_nan=False)
    time: str
    meal: MealType

    def to_entry(self) -> FoodEntry:
        """Convert the payload to a domain entry."""
        return FoodEntry(
            id=self.id,
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            time=self.time,
            meal=self.meal,
        )


_MEALS_ADAPTER = TypeAdapter(list[FoodEntryPayload])


@dataclass(frozen=True)
class LoadResult:
    """Outcome of decoding a stored meal collection."""

    status: Literal["loaded", "missing", "malformed"]
    entries: list[FoodEntry] = field(default_factory=list)
    reason: str | None = None


def encode_meals(entries: list[FoodEntry]) -> str:
    """Serialize the full ordered collection to a JSON array."""
    return json.dumps([asdict(entry) for entry in entries], ensure_ascii=False)


def decode_meals(raw: str | None) -> LoadResult:
    """Decode a stored collection, validating its schema."""
    if raw is None:
        return LoadResult(status="missing")
    try:
        payloads = _MEALS_ADAPTER.validate_json(raw)
    except PydanticValidationError as exc:
        return LoadResult(status="malformed", reason=_summarize_errors(exc))
    return LoadResult(
        status="loaded", entries=[payload.to_entry() for payload in payloads]
    )


def _summarize_errors(exc: PydanticValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", "invalid value"))
    if location:
        return f"{location}: {message} ({exc.error_count()} errors)"
    return f"{message} ({exc.error_count()} errors)"

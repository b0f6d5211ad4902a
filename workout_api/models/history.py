import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from workout_api.utils.dates import dt_to_iso


def _contains_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_contains_non_finite(v) for v in value.values())
    if isinstance(value, list):
        return any(_contains_non_finite(v) for v in value)
    return False


class HistoryCreate(BaseModel):
    """
    Body for saving a workout to history.

    The exercise entries are accepted as-is and are not checked against the
    catalog. Numbers must stay representable in a JSON response.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )

    exercises: list[Any]
    workout_type: str | None = None
    duration: int | float | str | None = None
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("exercises")
    @classmethod
    def exercises_must_be_finite(cls, exercises: list[Any]) -> list[Any]:
        if _contains_non_finite(exercises):
            raise ValueError("exercises contain a number that is out of range")
        try:
            total = estimate_calories(exercises)
        except OverflowError:
            total = math.inf
        if not math.isfinite(total):
            raise ValueError("calories add up to a number that is out of range")
        return exercises


class HistoryEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    timestamp: datetime
    workout_type: str
    exercises: list[Any]
    exercise_count: int
    duration: int | float | str | None = None
    notes: str = ""
    estimated_calories: int | float = 0

    def to_response(self) -> dict:
        data = self.model_dump(by_alias=True)
        data["timestamp"] = dt_to_iso(self.timestamp)
        return data


def estimate_calories(exercises: list[Any]) -> int | float:
    """Sum the numeric `calories` field of each object entry; anything else counts 0."""
    total: int | float = 0
    for item in exercises:
        if not isinstance(item, dict):
            continue
        calories = item.get("calories")
        if isinstance(calories, bool) or not isinstance(calories, (int, float)):
            continue
        if isinstance(calories, float) and not math.isfinite(calories):
            continue
        total += calories
    return total

import json
import threading
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from workout_api.errors import ForbiddenError, NotFoundError
from workout_api.models.exercise import (
    CUSTOM_ID_START,
    DEFAULT_CALORIES,
    DEFAULT_DURATION,
    DEFAULT_EQUIPMENT,
    DEFAULT_REPS,
    DEFAULT_SETS,
    Exercise,
    ExerciseCreate,
)
from workout_api.models.routine import NutritionTip, StretchItem, WarmupItem
from workout_api.repositories.errors import CatalogLoadError
from workout_api.utils.log import logger
from workout_api.utils.params import require_choice
from workout_api.utils.taxonomy import DIFFICULTIES, EXERCISE_CATEGORIES, MUSCLE_GROUPS


@dataclass(frozen=True)
class Catalog:
    """Everything loaded once at startup. Nothing here changes afterwards."""

    exercises: tuple[Exercise, ...]
    category_index: dict[int, frozenset[str]] = field(default_factory=dict)
    warmups: tuple[WarmupItem, ...] = ()
    stretches: tuple[StretchItem, ...] = ()
    nutrition_tips: tuple[NutritionTip, ...] = ()


def build_category_index(
    categories: dict[str, list[int]],
) -> dict[int, frozenset[str]]:
    """
    Invert {"push": [1, 2], "compound": [1]} into {1: {"push", "compound"}, 2: {"push"}}.
    """
    index: dict[int, set[str]] = {}
    for tag, ids in categories.items():
        if tag not in EXERCISE_CATEGORIES:
            raise CatalogLoadError(f"Unknown exercise category: {tag}")
        for exercise_id in ids:
            index.setdefault(exercise_id, set()).add(tag)
    return {exercise_id: frozenset(tags) for exercise_id, tags in index.items()}


def parse_catalog(raw: dict) -> Catalog:
    try:
        exercises = tuple(Exercise(**item) for item in raw.get("exercises", []))
        warmups = tuple(WarmupItem(**item) for item in raw.get("warmups", []))
        stretches = tuple(StretchItem(**item) for item in raw.get("stretches", []))
        tips = tuple(NutritionTip(**item) for item in raw.get("nutritionTips", []))
    except PydanticValidationError as e:
        raise CatalogLoadError("Catalog contains an invalid entry") from e

    seen: set[int] = set()
    for ex in exercises:
        if ex.id in seen:
            raise CatalogLoadError(f"Duplicate exercise id {ex.id}")
        if not ex.is_builtin or ex.id < 1:
            raise CatalogLoadError(
                f"Built-in exercise id {ex.id} outside 1-{CUSTOM_ID_START - 1}"
            )
        seen.add(ex.id)

    return Catalog(
        exercises=exercises,
        category_index=build_category_index(raw.get("categories", {})),
        warmups=warmups,
        stretches=stretches,
        nutrition_tips=tips,
    )


def load_catalog(path: Path) -> Catalog:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.exception(f"Failed to read catalog from {path}")
        raise CatalogLoadError(f"Failed to read catalog from {path}") from e

    catalog = parse_catalog(raw)
    logger.info(
        f"Catalog loaded: {len(catalog.exercises)} exercises, "
        f"{len(catalog.warmups)} warm-ups, {len(catalog.stretches)} stretches, "
        f"{len(catalog.nutrition_tips)} nutrition tips"
    )
    return catalog


class CatalogRepository:
    """
    Built-in exercises plus the process-lifetime list of custom ones.

    Built-ins are frozen and read without locking; the custom list and the
    id counter share one lock.
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._custom: list[Exercise] = []
        self._next_id = CUSTOM_ID_START
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, path: Path) -> "CatalogRepository":
        return cls(load_catalog(path))

    # ---------------------- Side tables ---------------------------

    @property
    def category_index(self) -> dict[int, frozenset[str]]:
        return self._catalog.category_index

    @property
    def warmups(self) -> tuple[WarmupItem, ...]:
        return self._catalog.warmups

    @property
    def stretches(self) -> tuple[StretchItem, ...]:
        return self._catalog.stretches

    @property
    def nutrition_tips(self) -> tuple[NutritionTip, ...]:
        return self._catalog.nutrition_tips

    def categories_for(self, exercise_id: int) -> dict[str, bool]:
        tags = self.category_index.get(exercise_id, frozenset())
        return {tag: tag in tags for tag in EXERCISE_CATEGORIES}

    # ---------------------- Exercises ---------------------------

    def builtin_exercises(self) -> list[Exercise]:
        return list(self._catalog.exercises)

    def custom_exercises(self) -> list[Exercise]:
        with self._lock:
            return list(self._custom)

    def all_exercises(self) -> list[Exercise]:
        """Built-ins first, then custom exercises in creation order."""
        return self.builtin_exercises() + self.custom_exercises()

    def get_exercise_by_id(self, exercise_id: int) -> Exercise | None:
        for ex in self.all_exercises():
            if ex.id == exercise_id:
                return ex
        return None

    def add_exercise(self, data: ExerciseCreate) -> Exercise:
        muscle = require_choice("muscle", data.muscle, MUSCLE_GROUPS)
        difficulty = require_choice("difficulty", data.difficulty, DIFFICULTIES)

        with self._lock:
            exercise = Exercise(
                id=self._next_id,
                name=data.name,
                muscle=muscle,  # type: ignore[arg-type]
                difficulty=difficulty,  # type: ignore[arg-type]
                description=data.description or "",
                equipment=data.equipment or DEFAULT_EQUIPMENT,
                sets=data.sets or DEFAULT_SETS,
                reps=data.reps or DEFAULT_REPS,
                duration=data.duration or DEFAULT_DURATION,
                calories=data.calories or DEFAULT_CALORIES,
                custom=True,
            )
            self._next_id += 1
            self._custom.append(exercise)

        logger.info(f"Custom exercise created id={exercise.id} name={exercise.name}")
        return exercise

    def delete_exercise(self, exercise_id: int) -> Exercise:
        if exercise_id < CUSTOM_ID_START:
            raise ForbiddenError("Cannot delete built-in exercises", id=exercise_id)

        with self._lock:
            for i, ex in enumerate(self._custom):
                if ex.id == exercise_id:
                    deleted = self._custom.pop(i)
                    break
            else:
                raise NotFoundError("Custom exercise not found", id=exercise_id)

        logger.info(f"Custom exercise deleted id={exercise_id}")
        return deleted

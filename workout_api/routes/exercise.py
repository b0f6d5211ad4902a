import math
from typing import Sequence

from fastapi import APIRouter, Depends

from workout_api.dependencies import get_catalog_repo, get_favorites_repo, get_stats_repo
from workout_api.errors import NotFoundError
from workout_api.models.exercise import Exercise, ExerciseCreate
from workout_api.repositories.catalog import CatalogRepository
from workout_api.repositories.favorites import FavoritesRepository
from workout_api.repositories.stats import StatsRepository
from workout_api.services import composer
from workout_api.services.filters import filter_exercises
from workout_api.utils import auth
from workout_api.utils.log import logger
from workout_api.utils.params import clamp, validate_choice
from workout_api.utils.taxonomy import DIFFICULTIES, EXERCISE_CATEGORIES, MUSCLE_GROUPS

router = APIRouter(tags=["exercise"], dependencies=[Depends(auth.require_api_key)])


def paginate(
    items: Sequence[Exercise], page: int | None, limit: int | None
) -> tuple[list[Exercise], dict]:
    """
    Slice out one page and describe it.
    page is 1-based and at least 1; limit is 1-50, default 10.
    """
    page_num = max(1, page or 1)
    limit_num = clamp(limit, 1, 50, default=10)
    start = (page_num - 1) * limit_num

    pagination = {
        "currentPage": page_num,
        "itemsPerPage": limit_num,
        "totalItems": len(items),
        "totalPages": math.ceil(len(items) / limit_num),
    }
    return list(items[start : start + limit_num]), pagination


# ---------------------- List ---------------------------


@router.get("/exercises")
def list_exercises(
    muscle: str | None = None,
    difficulty: str | None = None,
    equipment: str | None = None,
    category: str | None = None,
    page: int | None = None,
    limit: int | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    """Filtered, paginated listing of built-in and custom exercises"""
    muscle = validate_choice("muscle", muscle, MUSCLE_GROUPS)
    difficulty = validate_choice("difficulty", difficulty, DIFFICULTIES)
    category = validate_choice("category", category, EXERCISE_CATEGORIES)

    filtered = filter_exercises(
        catalog.all_exercises(),
        muscle=muscle,
        difficulty=difficulty,
        equipment=equipment,
        category=category,
        category_index=catalog.category_index,
    )
    exercises, pagination = paginate(filtered, page, limit)

    return {
        "exercises": [ex.model_dump() for ex in exercises],
        "pagination": pagination,
        "filters": {
            "muscle": muscle or "all",
            "difficulty": difficulty or "all",
            "equipment": equipment or "all",
            "category": category or "all",
        },
    }


@router.get("/exercise/{exercise_id}")
def get_exercise(
    exercise_id: int,
    catalog: CatalogRepository = Depends(get_catalog_repo),
    favorites: FavoritesRepository = Depends(get_favorites_repo),
    stats: StatsRepository = Depends(get_stats_repo),
):
    exercise = catalog.get_exercise_by_id(exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise not found", id=exercise_id)

    stats.record_exercise_view(exercise_id)

    return {
        **exercise.model_dump(),
        "categories": catalog.categories_for(exercise_id),
        "isFavorite": favorites.contains(exercise_id),
    }


@router.get("/random-exercise")
def get_random_exercise(
    muscle: str | None = None,
    difficulty: str | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    return composer.random_exercise(
        catalog.all_exercises(), muscle=muscle, difficulty=difficulty
    )


@router.get("/muscles")
def get_muscles(catalog: CatalogRepository = Depends(get_catalog_repo)):
    """Exercise counts per muscle group, broken down by difficulty"""
    exercises = catalog.all_exercises()

    muscles = []
    for muscle in MUSCLE_GROUPS:
        matching = filter_exercises(exercises, muscle=muscle)
        muscles.append(
            {
                "muscle": muscle,
                "exerciseCount": len(matching),
                "difficulties": {
                    level: len(filter_exercises(matching, difficulty=level))
                    for level in DIFFICULTIES
                },
            }
        )

    return {"muscles": muscles, "totalExercises": len(exercises)}


# ---------------------- Custom exercises ---------------------------


@router.post("/exercises", status_code=201)
def create_exercise(
    data: ExerciseCreate,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    logger.info(f"Creating custom exercise {data.name}")
    exercise = catalog.add_exercise(data)
    return {"message": "Exercise created successfully", "exercise": exercise.model_dump()}


@router.delete("/exercises/{exercise_id}")
def delete_exercise(
    exercise_id: int,
    catalog: CatalogRepository = Depends(get_catalog_repo),
    favorites: FavoritesRepository = Depends(get_favorites_repo),
):
    logger.info(f"Deleting custom exercise {exercise_id}")
    deleted = catalog.delete_exercise(exercise_id)
    favorites.discard(exercise_id)
    return {"message": "Exercise deleted successfully", "exercise": deleted.model_dump()}

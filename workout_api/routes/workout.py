from fastapi import APIRouter, Depends, Query

from workout_api.dependencies import get_catalog_repo
from workout_api.repositories.catalog import CatalogRepository
from workout_api.services import composer
from workout_api.utils import auth
from workout_api.utils.log import logger

router = APIRouter(tags=["workout"], dependencies=[Depends(auth.require_api_key)])


@router.get("/generate-workout")
def generate_workout(
    muscle: str | None = None,
    difficulty: str | None = None,
    count: int | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    """Random set of exercises matching the filters"""
    logger.info(
        f"Generating workout muscle={muscle} difficulty={difficulty} count={count}"
    )
    return composer.generate_workout(
        catalog.all_exercises(), muscle=muscle, difficulty=difficulty, count=count
    )


@router.get("/workout-plan")
def workout_plan(
    difficulty: str | None = None,
    days: int | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    """Seven-day training split for a difficulty level"""
    logger.info(f"Generating workout plan difficulty={difficulty} days={days}")
    return composer.weekly_plan(
        catalog.all_exercises(), difficulty=difficulty, days=days
    )


@router.get("/superset")
def superset(
    superset_type: str | None = Query(default=None, alias="type"),
    sets: int | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    logger.info(f"Generating supersets type={superset_type} sets={sets}")
    return composer.superset(
        catalog.all_exercises(),
        catalog.category_index,
        superset_type=superset_type,
        sets=sets,
    )


@router.get("/hiit")
def hiit(
    rounds: int | None = None,
    work: int | None = None,
    rest: int | None = None,
):
    logger.info(f"Generating HIIT rounds={rounds} work={work} rest={rest}")
    return composer.hiit(rounds=rounds, work=work, rest=rest)

from fastapi import APIRouter, Depends, Query

from workout_api.dependencies import get_catalog_repo
from workout_api.repositories.catalog import CatalogRepository
from workout_api.services import routines
from workout_api.utils import auth
from workout_api.utils.log import logger

router = APIRouter(tags=["routines"], dependencies=[Depends(auth.require_api_key)])


@router.get("/warm-up")
def warm_up(
    warmup_type: str | None = Query(default=None, alias="type"),
    count: int | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    logger.info(f"Generating warm-up type={warmup_type} count={count}")
    return routines.warm_up(catalog.warmups, warmup_type=warmup_type, count=count)


@router.get("/stretches")
def stretches(
    target_area: str | None = Query(default=None, alias="targetArea"),
    count: int | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    logger.info(f"Generating stretches targetArea={target_area} count={count}")
    return routines.stretches(catalog.stretches, target_area=target_area, count=count)


@router.get("/cooldown")
def cooldown(catalog: CatalogRepository = Depends(get_catalog_repo)):
    logger.info("Generating cooldown")
    return routines.cooldown(catalog.stretches, catalog.nutrition_tips)


@router.get("/nutrition")
def nutrition(
    category: str | None = None,
    catalog: CatalogRepository = Depends(get_catalog_repo),
):
    return routines.nutrition_tips(catalog.nutrition_tips, category=category)

from fastapi import APIRouter, Depends

from workout_api.dependencies import get_catalog_repo, get_favorites_repo
from workout_api.errors import NotFoundError
from workout_api.repositories.catalog import CatalogRepository
from workout_api.repositories.favorites import FavoritesRepository
from workout_api.utils import auth

router = APIRouter(
    prefix="/favorites",
    tags=["favorites"],
    dependencies=[Depends(auth.require_api_key)],
)


@router.get("")
def list_favorites(
    catalog: CatalogRepository = Depends(get_catalog_repo),
    favorites: FavoritesRepository = Depends(get_favorites_repo),
):
    """Favourited exercises, in catalog order"""
    ids = favorites.ids()
    favorite_exercises = [ex for ex in catalog.all_exercises() if ex.id in ids]
    return {
        "favorites": [ex.model_dump() for ex in favorite_exercises],
        "count": len(favorite_exercises),
    }


@router.post("/{exercise_id}", status_code=201)
def add_favorite(
    exercise_id: int,
    catalog: CatalogRepository = Depends(get_catalog_repo),
    favorites: FavoritesRepository = Depends(get_favorites_repo),
):
    exercise = catalog.get_exercise_by_id(exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise not found", id=exercise_id)

    favorites.add(exercise_id)
    return {"message": "Added to favorites", "exercise": exercise.model_dump()}


@router.delete("/{exercise_id}")
def remove_favorite(
    exercise_id: int,
    favorites: FavoritesRepository = Depends(get_favorites_repo),
):
    favorites.remove(exercise_id)
    return {"message": "Removed from favorites", "exerciseId": exercise_id}

from fastapi import APIRouter, Depends

from workout_api.dependencies import get_history_repo
from workout_api.models.history import HistoryCreate
from workout_api.repositories.history import HistoryRepository
from workout_api.utils import auth
from workout_api.utils.params import clamp

router = APIRouter(
    prefix="/history",
    tags=["history"],
    dependencies=[Depends(auth.require_api_key)],
)


@router.get("")
def get_history(
    limit: int | None = None,
    history: HistoryRepository = Depends(get_history_repo),
):
    """Most recent workouts first"""
    limit_num = clamp(limit, 1, 50, default=10)
    return {
        "history": [entry.to_response() for entry in history.list_recent(limit_num)],
        "totalWorkouts": history.count(),
        "limit": limit_num,
    }


@router.post("", status_code=201)
def save_workout(
    data: HistoryCreate,
    history: HistoryRepository = Depends(get_history_repo),
):
    entry = history.add_entry(data)
    return {"message": "Workout saved to history", "workout": entry.to_response()}


@router.delete("")
def clear_history(history: HistoryRepository = Depends(get_history_repo)):
    removed = history.clear()
    return {"message": "History cleared", "deletedCount": removed}

from fastapi import APIRouter, Depends

from workout_api.dependencies import get_catalog_repo, get_favorites_repo, get_stats_repo
from workout_api.repositories.catalog import CatalogRepository
from workout_api.repositories.favorites import FavoritesRepository
from workout_api.repositories.stats import StatsRepository
from workout_api.utils import auth, dates
from workout_api.utils.params import clamp

router = APIRouter(tags=["stats"], dependencies=[Depends(auth.require_api_key)])


@router.get("/stats")
def get_stats(
    stats: StatsRepository = Depends(get_stats_repo),
    catalog: CatalogRepository = Depends(get_catalog_repo),
    favorites: FavoritesRepository = Depends(get_favorites_repo),
):
    """Usage counters since the process started"""
    top_exercises = []
    for exercise_id, views in stats.top_exercises():
        exercise = catalog.get_exercise_by_id(exercise_id)
        top_exercises.append(
            {"name": exercise.name if exercise else "Unknown", "views": views}
        )

    return {
        "totalRequests": stats.total_requests,
        "uptime": dates.format_uptime(stats.uptime_seconds()),
        "startTime": dates.dt_to_iso(stats.start_time),
        "topEndpoints": [
            {"endpoint": endpoint, "hits": hits}
            for endpoint, hits in stats.top_endpoints()
        ],
        "topExercises": top_exercises,
        "totalExercises": len(catalog.all_exercises()),
        "customExercises": len(catalog.custom_exercises()),
        "totalFavorites": favorites.count(),
        "rateLimitHits": stats.rate_limit_hits,
    }


@router.get("/logs")
def get_logs(
    limit: int | None = None,
    stats: StatsRepository = Depends(get_stats_repo),
):
    limit_num = clamp(limit, 1, 100, default=50)
    logs, total = stats.recent_logs(limit_num)
    return {
        "logs": [entry.to_response() for entry in logs],
        "totalLogs": total,
        "limit": limit_num,
    }

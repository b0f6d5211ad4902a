import platform

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from workout_api.dependencies import get_catalog_repo
from workout_api.repositories.catalog import CatalogRepository
from workout_api.settings import settings
from workout_api.templates.templates import render_template
from workout_api.utils.dates import dt_to_iso, now
from workout_api.utils.taxonomy import MUSCLE_GROUPS

router = APIRouter()

BUILD_TIME = now()

ENDPOINTS: dict[str, dict[str, str]] = {
    "core": {
        "exercises": "GET /exercises",
        "exerciseById": "GET /exercise/:id",
        "randomExercise": "GET /random-exercise",
        "muscles": "GET /muscles",
    },
    "workouts": {
        "generateWorkout": "GET /generate-workout",
        "workoutPlan": "GET /workout-plan",
        "superset": "GET /superset",
        "hiit": "GET /hiit",
        "warmUp": "GET /warm-up",
        "stretches": "GET /stretches",
        "cooldown": "GET /cooldown",
        "nutrition": "GET /nutrition",
    },
    "user": {
        "favorites": "GET /favorites",
        "addFavorite": "POST /favorites/:id",
        "removeFavorite": "DELETE /favorites/:id",
        "addExercise": "POST /exercises",
        "deleteExercise": "DELETE /exercises/:id",
        "history": "GET /history",
        "saveWorkout": "POST /history",
        "clearHistory": "DELETE /history",
    },
    "meta": {
        "stats": "GET /stats",
        "logs": "GET /logs",
        "health": "GET /health",
    },
}


@router.get("/", response_class=HTMLResponse)
def home(request: Request, catalog: CatalogRepository = Depends(get_catalog_repo)):
    return render_template(
        request,
        "home.html",
        context={
            "sections": ENDPOINTS,
            "total_exercises": len(catalog.all_exercises()),
            "muscle_groups": MUSCLE_GROUPS,
        },
    )


@router.get("/health", response_class=JSONResponse)
def health():
    return {"status": "ok", "timestamp": dt_to_iso(now())}


@router.get("/api")
def api_info(catalog: CatalogRepository = Depends(get_catalog_repo)):
    return {
        "message": "Welcome to the Workout Generator API",
        "version": settings.VERSION,
        "documentation": "/",
        "totalExercises": len(catalog.all_exercises()),
        "customExercises": len(catalog.custom_exercises()),
        "muscleGroups": list(MUSCLE_GROUPS),
        "endpoints": ENDPOINTS,
    }


@router.get("/meta")
async def get_meta():
    return {
        "app_name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "build_time": dt_to_iso(BUILD_TIME),
        "python_version": platform.python_version(),
        "environment": settings.ENV,
    }

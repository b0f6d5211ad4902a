from fastapi import FastAPI

from workout_api.middleware.rate_limit import RateLimitMiddleware
from workout_api.middleware.request_log import RequestLogMiddleware
from workout_api.settings import settings

from .error_handlers import register_error_handlers
from .routes import exercise, favorites, history, home, routines, stats, workout

app = FastAPI(title="Workout Generator API", version=settings.VERSION)

register_error_handlers(app)
# The last middleware added runs first: rate-limited requests never reach the log.
app.add_middleware(RequestLogMiddleware)
app.add_middleware(RateLimitMiddleware)

app.include_router(home.router)
app.include_router(exercise.router)
app.include_router(workout.router)
app.include_router(routines.router)
app.include_router(favorites.router)
app.include_router(history.router)
app.include_router(stats.router)

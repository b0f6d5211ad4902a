from functools import lru_cache

from workout_api.repositories.catalog import CatalogRepository
from workout_api.repositories.favorites import FavoritesRepository
from workout_api.repositories.history import HistoryRepository
from workout_api.repositories.rate_limit import InMemoryRateLimiter
from workout_api.repositories.stats import StatsRepository
from workout_api.settings import settings

# One instance of each store for the life of the process. Routes receive
# them through Depends() so tests can swap in fresh ones.


@lru_cache
def get_catalog_repo() -> CatalogRepository:  # pragma: no cover
    return CatalogRepository.from_file(settings.CATALOG_PATH)


@lru_cache
def get_favorites_repo() -> FavoritesRepository:  # pragma: no cover
    return FavoritesRepository()


@lru_cache
def get_history_repo() -> HistoryRepository:  # pragma: no cover
    return HistoryRepository(capacity=settings.HISTORY_LIMIT)


@lru_cache
def get_stats_repo() -> StatsRepository:  # pragma: no cover
    return StatsRepository(log_capacity=settings.REQUEST_LOG_LIMIT)


@lru_cache
def get_rate_limiter() -> InMemoryRateLimiter:  # pragma: no cover
    return InMemoryRateLimiter()

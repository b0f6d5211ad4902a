import random
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from workout_api import dependencies
from workout_api.main import app
from workout_api.middleware import request_log
from workout_api.models.exercise import Exercise, ExerciseCreate
from workout_api.repositories.catalog import Catalog, CatalogRepository, parse_catalog
from workout_api.repositories.favorites import FavoritesRepository
from workout_api.repositories.history import HistoryRepository
from workout_api.repositories.stats import StatsRepository
from workout_api.settings import settings
from tests.test_data import TEST_CATALOG


@pytest.fixture(autouse=True)
def disable_rate_limiting_for_tests():
    settings.RATE_LIMIT_ENABLED = False
    yield
    settings.RATE_LIMIT_ENABLED = True


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so sampling in tests is repeatable."""
    return random.Random(1234)


# --------------- Catalog & stores ---------------


@pytest.fixture
def catalog() -> Catalog:
    return parse_catalog(TEST_CATALOG)


@pytest.fixture
def exercises(catalog) -> list[Exercise]:
    return list(catalog.exercises)


@pytest.fixture
def catalog_repo(catalog) -> CatalogRepository:
    return CatalogRepository(catalog)


@pytest.fixture
def favorites_repo() -> FavoritesRepository:
    return FavoritesRepository()


@pytest.fixture
def history_repo() -> HistoryRepository:
    return HistoryRepository(capacity=100)


@pytest.fixture
def stats_repo() -> StatsRepository:
    return StatsRepository()


@pytest.fixture
def exercise_create_factory() -> Callable[..., ExerciseCreate]:
    def _make(**overrides: Any) -> ExerciseCreate:
        base = {"name": "Cable Fly", "muscle": "chest", "difficulty": "intermediate"}
        return ExerciseCreate(**{**base, **overrides})

    return _make


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture(autouse=True)
def override_stores(
    app_instance,
    monkeypatch,
    catalog_repo,
    favorites_repo,
    history_repo,
    stats_repo,
):
    """
    Give every test its own in-memory stores, both for the routes and for
    the request log middleware.
    """
    overrides = {
        dependencies.get_catalog_repo: lambda: catalog_repo,
        dependencies.get_favorites_repo: lambda: favorites_repo,
        dependencies.get_history_repo: lambda: history_repo,
        dependencies.get_stats_repo: lambda: stats_repo,
    }
    app_instance.dependency_overrides.update(overrides)
    monkeypatch.setattr(request_log, "get_stats_repo", lambda: stats_repo)
    try:
        yield
    finally:
        for dep in overrides:
            app_instance.dependency_overrides.pop(dep, None)


@pytest.fixture
def client(app_instance):
    return TestClient(app_instance, raise_server_exceptions=False)

from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    PROJECT_NAME: str = "workout-generator"
    VERSION: str = "5.0.0"
    ENV: str = "dev"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Catalog ─────────────────────

    CATALOG_PATH: Path = PACKAGE_DIR / "data" / "catalog.json"

    # ──────────────────── In-memory stores ─────────────────────

    HISTORY_LIMIT: int = 100
    REQUEST_LOG_LIMIT: int = 1000

    # ──────────────────── Auth ─────────────────────

    # Unset means the X-API-Key check is skipped (local dev)
    API_KEY: str | None = None

    # ──────────────────── Rate limiting ─────────────────────
    RATE_LIMIT_ENABLED: bool = True

    RATE_LIMIT_MAX_REQUESTS: int = 100
    RATE_LIMIT_WINDOW_SECONDS: int = 900

    # Only the catalog and generator endpoints are limited
    RATE_LIMIT_PREFIXES: tuple[str, ...] = (
        "/api",
        "/exercises",
        "/exercise",
        "/generate-workout",
        "/workout-plan",
        "/superset",
        "/hiit",
    )

    # ─────────────────────────────────────────

    @property
    def api_key_required(self) -> bool:
        return bool(self.API_KEY)


settings = Settings()

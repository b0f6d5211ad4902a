from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from workout_api.dependencies import get_rate_limiter, get_stats_repo
from workout_api.settings import settings
from workout_api.utils.log import logger

# ─────────────────────────────────────────
# Config
# ─────────────────────────────────────────


@dataclass(frozen=True)
class LimitConfig:
    max_requests: int
    window_seconds: int


RATE_LIMIT_BODY = {
    "error": "Too many requests",
    "message": "Rate limit exceeded. Please try again later.",
}


# ─────────────────────────────────────────
# Middleware
# ─────────────────────────────────────────


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rate limiting middleware.

    - Applies one fixed-window limit per client (ip + user agent) to the
      configured path prefixes only.
    - Counters live in process memory via InMemoryRateLimiter.
    - Blocked requests are counted in the usage stats.
    """

    def __init__(self, app):
        super().__init__(app)

        self.limited_prefixes = settings.RATE_LIMIT_PREFIXES

        self.limits = LimitConfig(
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not settings.RATE_LIMIT_ENABLED:
            return await call_next(request)

        path = request.url.path

        if not self._is_limited(path):
            return await call_next(request)

        client_id = self._identify_client(request)

        allowed, retry_after = get_rate_limiter().hit(
            client_id=client_id,
            limit=self.limits.max_requests,
            window_seconds=self.limits.window_seconds,
        )

        if not allowed:
            logger.info(
                f"Request blocked by rate limiter.\nPath: {path}\nMethod:{request.method}\nRetry after: {retry_after}",
            )
            get_stats_repo().record_rate_limit_hit()
            return JSONResponse(
                {**RATE_LIMIT_BODY, "retryAfter": f"{retry_after} seconds"},
                status_code=429,
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)

    # ─────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────

    def _is_limited(self, path: str) -> bool:
        # "/exercise" covers "/exercise/3" but not "/exercisez"
        return any(
            path == prefix or path.startswith(prefix + "/")
            for prefix in self.limited_prefixes
        )

    def _identify_client(self, request: Request) -> str:
        ip = get_client_ip(request)
        ua = request.headers.get("user-agent", "unknown")
        ua_hash = str(abs(hash(ua)) % 10_000_000)
        return f"ip:{ip}:ua:{ua_hash}"


def get_client_ip(request: Request) -> str:
    """
    Extract client IP, preferring X-Forwarded-For.
    """
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"

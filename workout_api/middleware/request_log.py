from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from workout_api.dependencies import get_stats_repo
from workout_api.middleware.rate_limit import get_client_ip
from workout_api.utils.log import logger


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    Records every request in the usage stats and the bounded request log.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        get_stats_repo().record_request(
            method=request.method,
            path=request.url.path,
            query=dict(request.query_params),
            ip=get_client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )

        response = await call_next(request)

        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code}"
        )
        return response

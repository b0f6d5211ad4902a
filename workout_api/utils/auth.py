import secrets

from fastapi import Header, HTTPException

from workout_api.settings import settings
from workout_api.utils.log import logger


def api_key_matches(provided: str | None, expected: str) -> bool:
    if not provided:
        return False
    return secrets.compare_digest(provided.encode(), expected.encode())


async def require_api_key(
    x_api_key: str | None = Header(default=None),
    x_rapidapi_key: str | None = Header(default=None),
) -> None:
    """
    Shared-secret check on the X-API-Key header.

    - No API_KEY configured: everything is allowed (local dev).
    - X-RapidAPI-Key present: the gateway has already authenticated the caller.
    """
    if not settings.api_key_required:
        return

    if x_rapidapi_key:
        logger.debug("Request authenticated by RapidAPI gateway header")
        return

    if not api_key_matches(x_api_key, settings.API_KEY or ""):
        logger.warning("Rejected request with invalid or missing API key")
        raise HTTPException(
            status_code=401,
            detail="Invalid or missing API key. Include X-API-Key header.",
        )

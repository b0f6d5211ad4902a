from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from workout_api.errors import WorkoutApiError
from workout_api.utils.log import logger


async def workout_api_error_handler(request: Request, exc: WorkoutApiError):
    logger.info(
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "parameter": ".".join(str(part) for part in err.get("loc", ())[1:])
            or ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    logger.info(f"Rejected malformed request to {request.url.path}: {details}")
    return JSONResponse(
        status_code=400, content={"error": "Invalid request", "details": details}
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")

    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    # the handlers take narrower exception types than Exception, which the
    # Starlette signature does not express
    app.add_exception_handler(WorkoutApiError, workout_api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

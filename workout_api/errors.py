from typing import Any, Iterable


class WorkoutApiError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 400

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, **self.details}


# ------------------------- CLIENT ERRORS -------------------------


class ValidationError(WorkoutApiError):
    """Raised when a parameter falls outside its fixed set of values."""

    status_code = 400

    def __init__(self, parameter: str, valid_options: Iterable[str]):
        super().__init__(
            f"Invalid {parameter} parameter",
            parameter=parameter,
            validOptions=list(valid_options),
        )
        self.parameter = parameter


class DuplicateError(WorkoutApiError):
    """Raised when adding something that is already present."""

    status_code = 400


class NotFoundError(WorkoutApiError):
    """Raised when a lookup or a well-formed query yields nothing."""

    status_code = 404


class ForbiddenError(WorkoutApiError):
    """Raised when the target exists but is protected, e.g. built-in exercises."""

    status_code = 403

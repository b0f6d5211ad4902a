from typing import Iterable

from workout_api.errors import ValidationError


def validate_choice(
    parameter: str, value: str | None, options: Iterable[str]
) -> str | None:
    """
    Lowercase value and check it against options.
    Returns None when no value was supplied.
    """
    if value is None or value.strip() == "":
        return None

    options = tuple(options)
    normalised = value.strip().lower()
    if normalised not in options:
        raise ValidationError(parameter, options)
    return normalised


def require_choice(parameter: str, value: str | None, options: Iterable[str]) -> str:
    """Like validate_choice, but a missing or blank value is rejected too."""
    options = tuple(options)
    normalised = validate_choice(parameter, value, options)
    if normalised is None:
        raise ValidationError(parameter, options)
    return normalised


def clamp(value: int | None, low: int, high: int | None, default: int) -> int:
    """
    Substitute default for a missing or zero value, then clamp to [low, high].
    high=None leaves the upper end open.
    """
    if not value:
        value = default
    value = max(low, value)
    if high is not None:
        value = min(high, value)
    return value

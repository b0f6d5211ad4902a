import random
from typing import Any, Sequence

from workout_api.models.routine import NutritionTip, StretchItem, WarmupItem
from workout_api.services.sampling import sample
from workout_api.utils.dates import format_clock
from workout_api.utils.params import clamp, validate_choice
from workout_api.utils.taxonomy import NUTRITION_CATEGORIES, STRETCH_AREAS, WARMUP_TYPES

COOLDOWN_STRETCHES = 5
COOLDOWN_TIPS = 2
COOLDOWN_MESSAGE = "Great workout! Remember to hydrate and refuel."


def _total_duration(items: Sequence[WarmupItem] | Sequence[StretchItem]) -> str:
    return f"{format_clock(sum(item.duration for item in items))} min"


def warm_up(
    warmups: Sequence[WarmupItem],
    *,
    warmup_type: str | None = None,
    count: int | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """
    Random warm-up routine. "full" draws from every warm-up type.
    An empty pool gives an empty routine rather than an error.
    """
    warmup_type = validate_choice("type", warmup_type, WARMUP_TYPES) or "full"

    pool = list(warmups)
    if warmup_type != "full":
        pool = [w for w in pool if w.type == warmup_type]

    routine = sample(pool, clamp(count, 1, None, default=5), rng)

    return {
        "warmup": [w.model_dump() for w in routine],
        "count": len(routine),
        "totalDuration": _total_duration(routine),
        "totalCalories": sum(w.calories for w in routine),
        "type": warmup_type,
    }


def stretches(
    items: Sequence[StretchItem],
    *,
    target_area: str | None = None,
    count: int | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    target_area = validate_choice("targetArea", target_area, STRETCH_AREAS) or "all"

    pool = list(items)
    if target_area != "all":
        pool = [s for s in pool if s.target_area == target_area]

    routine = sample(pool, clamp(count, 1, None, default=5), rng)

    return {
        "stretches": [s.model_dump(by_alias=True) for s in routine],
        "count": len(routine),
        "totalDuration": _total_duration(routine),
        "targetArea": target_area,
    }


def nutrition_tips(
    tips: Sequence[NutritionTip],
    *,
    category: str | None = None,
) -> dict[str, Any]:
    category = (
        validate_choice("category", category, (*NUTRITION_CATEGORIES, "all")) or "all"
    )

    selected = list(tips)
    if category != "all":
        selected = [t for t in selected if t.category == category]

    return {
        "tips": [t.model_dump() for t in selected],
        "count": len(selected),
        "category": category,
        "categories": list(NUTRITION_CATEGORIES),
    }


def cooldown(
    items: Sequence[StretchItem],
    tips: Sequence[NutritionTip],
    *,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    chosen_stretches = sample(items, COOLDOWN_STRETCHES, rng)
    chosen_tips = sample(tips, COOLDOWN_TIPS, rng)

    return {
        "cooldown": {
            "stretches": [s.model_dump(by_alias=True) for s in chosen_stretches],
            "nutritionTips": [t.model_dump() for t in chosen_tips],
        },
        "totalDuration": _total_duration(chosen_stretches),
        "message": COOLDOWN_MESSAGE,
    }

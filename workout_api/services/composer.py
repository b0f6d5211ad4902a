"""
Workout composition over a catalog view.

Every function here is pure apart from drawing random numbers: it takes the
exercises to work from plus request parameters and returns a JSON-ready
dict. Parameters are validated first so a bad value never reaches the
filters.
"""

import math
import random
from typing import Any, Mapping, Sequence

from workout_api.errors import NotFoundError
from workout_api.models.exercise import Exercise
from workout_api.services.filters import filter_exercises
from workout_api.services.sampling import choice, sample, shuffle
from workout_api.utils.dates import format_clock
from workout_api.utils.params import clamp, validate_choice
from workout_api.utils.taxonomy import (
    DAY_NAMES,
    DIFFICULTIES,
    LOWER_BODY_MUSCLES,
    MUSCLE_GROUPS,
    SUPERSET_TYPES,
    UPPER_BODY_MUSCLES,
)

# ─────────────────────────────────────────
# Tables
# ─────────────────────────────────────────

WORKOUT_SPLITS: dict[str, tuple[tuple[str, tuple[str, ...]], ...]] = {
    "beginner": (
        ("Full Body A", ("chest", "back", "legs")),
        ("Rest", ()),
        ("Full Body B", ("shoulders", "arms", "core")),
        ("Rest", ()),
        ("Full Body A", ("chest", "back", "legs")),
        ("Active Recovery", ("core",)),
        ("Rest", ()),
    ),
    "intermediate": (
        ("Push Day", ("chest", "shoulders")),
        ("Pull Day", ("back", "arms")),
        ("Leg Day", ("legs", "core")),
        ("Rest", ()),
        ("Upper Body", ("chest", "back", "shoulders")),
        ("Lower Body", ("legs", "core")),
        ("Rest", ()),
    ),
    "advanced": (
        ("Chest & Triceps", ("chest", "arms")),
        ("Back & Biceps", ("back", "arms")),
        ("Legs", ("legs",)),
        ("Shoulders & Core", ("shoulders", "core")),
        ("Upper Power", ("chest", "back")),
        ("Lower Power", ("legs", "core")),
        ("Active Recovery", ("core", "shoulders")),
    ),
}

EXERCISES_PER_MUSCLE = 2

# (name, calories burned in a 40 second work interval)
HIIT_EXERCISES: tuple[tuple[str, int], ...] = (
    ("Burpees", 15),
    ("Mountain Climbers", 12),
    ("Jump Squats", 14),
    ("High Knees", 11),
    ("Box Jumps", 15),
    ("Plank Jacks", 10),
    ("Jumping Lunges", 14),
    ("Tuck Jumps", 16),
    ("Speed Skaters", 12),
    ("Bicycle Crunches", 8),
)
HIIT_BASE_WORK_SECONDS = 40

REST_BETWEEN_SUPERSETS = "60-90 seconds"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _dump(exercises: Sequence[Exercise]) -> list[dict[str, Any]]:
    return [ex.model_dump() for ex in exercises]


# ─────────────────────────────────────────
# Single exercises
# ─────────────────────────────────────────


def generate_workout(
    exercises: Sequence[Exercise],
    *,
    muscle: str | None = None,
    difficulty: str | None = None,
    count: int | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """
    Random flat workout of up to `count` exercises (1-10, default 3).
    Raises NotFoundError when nothing matches the filters.
    """
    muscle = validate_choice("muscle", muscle, MUSCLE_GROUPS)
    difficulty = validate_choice("difficulty", difficulty, DIFFICULTIES)
    exercise_count = clamp(count, 1, 10, default=3)

    filtered = filter_exercises(exercises, muscle=muscle, difficulty=difficulty)
    if not filtered:
        raise NotFoundError(
            "No exercises found matching your criteria",
            muscle=muscle or "any",
            difficulty=difficulty or "any",
        )

    workout = sample(filtered, exercise_count, rng)

    return {
        "workout": _dump(workout),
        "count": len(workout),
        "filters": {
            "muscle": muscle or "all",
            "difficulty": difficulty or "all",
            "count": exercise_count,
        },
    }


def random_exercise(
    exercises: Sequence[Exercise],
    *,
    muscle: str | None = None,
    difficulty: str | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    muscle = validate_choice("muscle", muscle, MUSCLE_GROUPS)
    difficulty = validate_choice("difficulty", difficulty, DIFFICULTIES)

    filtered = filter_exercises(exercises, muscle=muscle, difficulty=difficulty)
    if not filtered:
        raise NotFoundError(
            "No exercises found matching your criteria",
            muscle=muscle or "any",
            difficulty=difficulty or "any",
        )

    return {
        "exercise": choice(filtered, rng).model_dump(),
        "filters": {
            "muscle": muscle or "all",
            "difficulty": difficulty or "all",
        },
    }


# ─────────────────────────────────────────
# Weekly plan
# ─────────────────────────────────────────


def weekly_plan(
    exercises: Sequence[Exercise],
    *,
    difficulty: str | None = None,
    days: int | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """
    Seven-day split for the given difficulty (default intermediate).

    `days` is clamped to 1-7 and echoed back, but the plan always covers
    the whole week in Monday..Sunday order.
    """
    difficulty = validate_choice("difficulty", difficulty, DIFFICULTIES) or "intermediate"
    workout_days = clamp(days, 1, 7, default=5)

    plan = []
    for day_name, (day_type, muscles) in zip(DAY_NAMES, WORKOUT_SPLITS[difficulty]):
        day_exercises: list[Exercise] = []
        for muscle in muscles:
            pool = [ex for ex in exercises if ex.muscle == muscle]
            day_exercises.extend(sample(pool, EXERCISES_PER_MUSCLE, rng))

        plan.append(
            {
                "day": day_name,
                "type": day_type,
                "muscles": list(muscles),
                "exercises": _dump(day_exercises),
            }
        )

    return {
        "plan": plan,
        "difficulty": difficulty,
        "days": workout_days,
        "totalWorkoutDays": sum(1 for day in plan if day["exercises"]),
        "totalExercises": sum(len(day["exercises"]) for day in plan),
    }


# ─────────────────────────────────────────
# Supersets
# ─────────────────────────────────────────


def _zip_pairs(
    first: Sequence[Exercise],
    second: Sequence[Exercise],
    labels: tuple[str, str],
    set_count: int,
) -> list[dict[str, Any]]:
    pairs = []
    for i, (ex1, ex2) in enumerate(zip(first, second)):
        if i >= set_count:
            break
        pairs.append(
            {
                "setNumber": i + 1,
                "exercise1": {**ex1.model_dump(), "type": labels[0]},
                "exercise2": {**ex2.model_dump(), "type": labels[1]},
            }
        )
    return pairs


def superset(
    exercises: Sequence[Exercise],
    category_index: Mapping[int, frozenset[str]],
    *,
    superset_type: str | None = None,
    sets: int | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """
    Pair exercises for back-to-back work.

    push-pull and upper-lower shuffle each side independently and zip them,
    stopping when either side runs out. same-muscle picks one muscle and
    pairs neighbours of its shuffled exercises, dropping any leftover.
    """
    superset_type = validate_choice("type", superset_type, SUPERSET_TYPES) or "push-pull"
    set_count = clamp(sets, 1, 5, default=3)

    supersets: list[dict[str, Any]] = []

    if superset_type == "push-pull":
        push = filter_exercises(exercises, category="push", category_index=category_index)
        pull = filter_exercises(exercises, category="pull", category_index=category_index)
        supersets = _zip_pairs(
            shuffle(push, rng), shuffle(pull, rng), ("push", "pull"), set_count
        )

    elif superset_type == "upper-lower":
        upper = [ex for ex in exercises if ex.muscle in UPPER_BODY_MUSCLES]
        lower = [ex for ex in exercises if ex.muscle in LOWER_BODY_MUSCLES]
        supersets = _zip_pairs(
            shuffle(upper, rng), shuffle(lower, rng), ("upper", "lower"), set_count
        )

    else:
        muscle = choice(MUSCLE_GROUPS, rng)
        pool = shuffle(filter_exercises(exercises, muscle=muscle), rng)
        for i in range(0, min(set_count * 2, len(pool) - 1), 2):
            supersets.append(
                {
                    "setNumber": i // 2 + 1,
                    "exercise1": pool[i].model_dump(),
                    "exercise2": pool[i + 1].model_dump(),
                    "muscle": muscle,
                }
            )

    return {
        "type": superset_type,
        "supersets": supersets,
        "totalSets": len(supersets),
        "restBetweenSupersets": REST_BETWEEN_SUPERSETS,
        "filters": {"type": superset_type, "sets": set_count},
    }


# ─────────────────────────────────────────
# HIIT
# ─────────────────────────────────────────


def hiit(
    *,
    rounds: int | None = None,
    work: int | None = None,
    rest: int | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    round_count = clamp(rounds, 1, 10, default=4)
    work_time = clamp(work, 10, 120, default=HIIT_BASE_WORK_SECONDS)
    rest_time = clamp(rest, 5, 120, default=20)

    selected = sample(HIIT_EXERCISES, round_count, rng)

    workout = [
        {
            "round": i + 1,
            "exercise": name,
            "workSeconds": work_time,
            "restSeconds": rest_time,
            "estimatedCalories": _round_half_up(
                calories * work_time / HIIT_BASE_WORK_SECONDS
            ),
        }
        for i, (name, calories) in enumerate(selected)
    ]

    total_time = len(workout) * (work_time + rest_time)

    return {
        "workout": workout,
        "summary": {
            "rounds": len(workout),
            "workInterval": f"{work_time}s",
            "restInterval": f"{rest_time}s",
            "totalTime": format_clock(total_time),
            "estimatedCalories": sum(r["estimatedCalories"] for r in workout),
        },
        "filters": {"rounds": round_count, "work": work_time, "rest": rest_time},
    }

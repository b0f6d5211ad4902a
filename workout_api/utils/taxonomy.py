# workout_api/utils/taxonomy.py

MUSCLE_GROUPS: tuple[str, ...] = (
    "chest",
    "back",
    "legs",
    "shoulders",
    "arms",
    "core",
)

UPPER_BODY_MUSCLES: tuple[str, ...] = ("chest", "back", "shoulders", "arms")
LOWER_BODY_MUSCLES: tuple[str, ...] = ("legs", "core")

DIFFICULTIES: tuple[str, ...] = (
    "beginner",
    "intermediate",
    "advanced",
)

EXERCISE_CATEGORIES: tuple[str, ...] = (
    "compound",
    "isolation",
    "push",
    "pull",
)

WARMUP_TYPES: tuple[str, ...] = (
    "upper",
    "lower",
    "cardio",
    "core",
    "full",
)

STRETCH_AREAS: tuple[str, ...] = (
    "legs",
    "upper",
    "arms",
    "back",
    "hips",
    "core",
    "all",
)

NUTRITION_CATEGORIES: tuple[str, ...] = (
    "pre-workout",
    "post-workout",
    "hydration",
    "muscle-building",
    "fat-loss",
    "protein",
    "recovery",
    "supplements",
)

SUPERSET_TYPES: tuple[str, ...] = (
    "push-pull",
    "upper-lower",
    "same-muscle",
)

DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

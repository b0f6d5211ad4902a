import random
from collections import Counter

import pytest

from workout_api.errors import NotFoundError, ValidationError
from workout_api.services import composer
from workout_api.utils.taxonomy import DAY_NAMES, MUSCLE_GROUPS
from tests.test_data import PULL_IDS, PUSH_IDS

# --------------- generate_workout ---------------


def test_generate_workout_returns_only_what_exists(exercises, rng):
    result = composer.generate_workout(
        exercises, muscle="chest", difficulty="beginner", count=5, rng=rng
    )

    assert result["count"] == 3
    assert len(result["workout"]) == 3
    assert all(
        ex["muscle"] == "chest" and ex["difficulty"] == "beginner"
        for ex in result["workout"]
    )
    assert len({ex["id"] for ex in result["workout"]}) == 3


def test_generate_workout_echoes_defaults(exercises, rng):
    result = composer.generate_workout(exercises, rng=rng)

    assert result["filters"] == {"muscle": "all", "difficulty": "all", "count": 3}
    assert result["count"] == 3


def test_generate_workout_normalises_case(exercises, rng):
    result = composer.generate_workout(exercises, muscle="Back", rng=rng)

    assert result["filters"]["muscle"] == "back"
    assert all(ex["muscle"] == "back" for ex in result["workout"])


@pytest.mark.parametrize(
    "count, expected",
    [(None, 3), (0, 3), (-4, 1), (1, 1), (10, 10), (50, 10)],
)
def test_generate_workout_clamps_count(exercises, rng, count, expected):
    result = composer.generate_workout(exercises, count=count, rng=rng)

    assert result["filters"]["count"] == expected
    assert result["count"] == expected


def test_generate_workout_invalid_muscle_raises_validation_error(exercises):
    with pytest.raises(ValidationError) as excinfo:
        composer.generate_workout(exercises, muscle="glutes")

    assert excinfo.value.parameter == "muscle"
    assert excinfo.value.details["validOptions"] == list(MUSCLE_GROUPS)


def test_generate_workout_invalid_difficulty_raises_before_filtering():
    # An empty catalog would give NotFound; validation has to win
    with pytest.raises(ValidationError):
        composer.generate_workout([], difficulty="expert")


def test_generate_workout_empty_result_raises_not_found(exercises):
    with pytest.raises(NotFoundError) as excinfo:
        composer.generate_workout(exercises, muscle="legs", difficulty="advanced")

    assert excinfo.value.details == {"muscle": "legs", "difficulty": "advanced"}


# --------------- random_exercise ---------------


def test_random_exercise_respects_filters(exercises, rng):
    for _ in range(20):
        result = composer.random_exercise(exercises, muscle="core", rng=rng)
        assert result["exercise"]["muscle"] == "core"


def test_random_exercise_not_found(exercises):
    with pytest.raises(NotFoundError) as excinfo:
        composer.random_exercise(exercises, muscle="shoulders", difficulty="advanced")

    assert excinfo.value.details["difficulty"] == "advanced"


# --------------- weekly_plan ---------------


@pytest.mark.parametrize("days", [None, 1, 3, 7, 40])
def test_weekly_plan_always_has_seven_days_in_order(exercises, rng, days):
    result = composer.weekly_plan(exercises, days=days, rng=rng)

    assert [day["day"] for day in result["plan"]] == list(DAY_NAMES)


@pytest.mark.parametrize("days, expected", [(None, 5), (0, 5), (-1, 1), (3, 3), (12, 7)])
def test_weekly_plan_echoes_clamped_days(exercises, rng, days, expected):
    assert composer.weekly_plan(exercises, days=days, rng=rng)["days"] == expected


def test_weekly_plan_defaults_to_intermediate(exercises, rng):
    result = composer.weekly_plan(exercises, rng=rng)

    assert result["difficulty"] == "intermediate"
    assert [day["type"] for day in result["plan"]] == [
        "Push Day",
        "Pull Day",
        "Leg Day",
        "Rest",
        "Upper Body",
        "Lower Body",
        "Rest",
    ]


def test_weekly_plan_rest_days_are_empty(exercises, rng):
    result = composer.weekly_plan(exercises, difficulty="beginner", rng=rng)

    rest_days = [day for day in result["plan"] if day["type"] == "Rest"]
    assert len(rest_days) == 3
    assert all(day["exercises"] == [] and day["muscles"] == [] for day in rest_days)


def test_weekly_plan_samples_two_per_muscle_in_listed_order(exercises, rng):
    result = composer.weekly_plan(exercises, difficulty="intermediate", rng=rng)

    push_day = result["plan"][0]
    muscles = [ex["muscle"] for ex in push_day["exercises"]]

    # Two chest exercises, then the single shoulder exercise in the catalog
    assert muscles == ["chest", "chest", "shoulders"]


def test_weekly_plan_exercises_match_day_muscles(exercises, rng):
    result = composer.weekly_plan(exercises, difficulty="advanced", rng=rng)

    for day in result["plan"]:
        counts = Counter(ex["muscle"] for ex in day["exercises"])
        assert set(counts) <= set(day["muscles"])
        assert all(n <= 2 for n in counts.values())


def test_weekly_plan_totals(exercises, rng):
    result = composer.weekly_plan(exercises, difficulty="advanced", rng=rng)

    assert result["totalWorkoutDays"] == 7
    assert result["totalExercises"] == sum(len(d["exercises"]) for d in result["plan"])


def test_weekly_plan_with_sparse_catalog_degrades_to_empty_days(rng):
    result = composer.weekly_plan([], difficulty="beginner", rng=rng)

    assert len(result["plan"]) == 7
    assert result["totalWorkoutDays"] == 0
    assert result["totalExercises"] == 0


def test_weekly_plan_invalid_difficulty(exercises):
    with pytest.raises(ValidationError):
        composer.weekly_plan(exercises, difficulty="elite")


# --------------- superset ---------------


def test_push_pull_pairs_are_bounded_by_smaller_side(exercises, catalog, rng):
    result = composer.superset(
        exercises, catalog.category_index, superset_type="push-pull", sets=5, rng=rng
    )

    assert result["totalSets"] == min(5, len(PUSH_IDS), len(PULL_IDS))
    for pair in result["supersets"]:
        assert pair["exercise1"]["id"] in PUSH_IDS
        assert pair["exercise1"]["type"] == "push"
        assert pair["exercise2"]["id"] in PULL_IDS
        assert pair["exercise2"]["type"] == "pull"


def test_push_pull_never_recycles_exercises(exercises, catalog, rng):
    result = composer.superset(
        exercises, catalog.category_index, superset_type="push-pull", sets=5, rng=rng
    )

    firsts = [p["exercise1"]["id"] for p in result["supersets"]]
    seconds = [p["exercise2"]["id"] for p in result["supersets"]]
    assert len(set(firsts)) == len(firsts)
    assert len(set(seconds)) == len(seconds)


def test_superset_defaults(exercises, catalog, rng):
    result = composer.superset(exercises, catalog.category_index, rng=rng)

    assert result["type"] == "push-pull"
    assert result["filters"] == {"type": "push-pull", "sets": 3}
    assert [p["setNumber"] for p in result["supersets"]] == [1, 2, 3]
    assert result["restBetweenSupersets"] == "60-90 seconds"


def test_upper_lower_pairs(exercises, catalog, rng):
    result = composer.superset(
        exercises, catalog.category_index, superset_type="upper-lower", sets=5, rng=rng
    )

    # Only four legs/core exercises exist
    assert result["totalSets"] == 4
    for pair in result["supersets"]:
        assert pair["exercise1"]["muscle"] in ("chest", "back", "shoulders", "arms")
        assert pair["exercise1"]["type"] == "upper"
        assert pair["exercise2"]["muscle"] in ("legs", "core")
        assert pair["exercise2"]["type"] == "lower"


def test_same_muscle_pairs_share_one_muscle(exercises, catalog):
    per_muscle = Counter(ex.muscle for ex in exercises)

    for seed in range(30):
        result = composer.superset(
            exercises,
            catalog.category_index,
            superset_type="same-muscle",
            sets=5,
            rng=random.Random(seed),
        )
        pairs = result["supersets"]
        if not pairs:
            continue

        muscle = pairs[0]["muscle"]
        assert result["totalSets"] == min(5, per_muscle[muscle] // 2)
        used = []
        for pair in pairs:
            assert pair["muscle"] == muscle
            assert pair["exercise1"]["muscle"] == muscle
            assert pair["exercise2"]["muscle"] == muscle
            used += [pair["exercise1"]["id"], pair["exercise2"]["id"]]
        assert len(used) == len(set(used))


def test_same_muscle_drops_unpaired_leftover(exercises, catalog, monkeypatch):
    monkeypatch.setattr(composer, "choice", lambda items, rng=None: "back")

    result = composer.superset(
        exercises, catalog.category_index, superset_type="same-muscle", sets=5
    )

    # Three back exercises give one pair and one leftover
    assert result["totalSets"] == 1
    assert result["supersets"][0]["muscle"] == "back"


def test_superset_invalid_type(exercises, catalog):
    with pytest.raises(ValidationError) as excinfo:
        composer.superset(exercises, catalog.category_index, superset_type="giant-set")

    assert excinfo.value.parameter == "type"


@pytest.mark.parametrize("sets, expected", [(None, 3), (0, 3), (-2, 1), (9, 5)])
def test_superset_clamps_sets(exercises, catalog, rng, sets, expected):
    result = composer.superset(exercises, catalog.category_index, sets=sets, rng=rng)

    assert result["filters"]["sets"] == expected


# --------------- hiit ---------------

BASE_CALORIES = dict(composer.HIIT_EXERCISES)


def test_hiit_defaults(rng):
    result = composer.hiit(rng=rng)

    assert len(result["workout"]) == 4
    assert result["summary"]["rounds"] == 4
    assert result["summary"]["workInterval"] == "40s"
    assert result["summary"]["restInterval"] == "20s"
    assert result["summary"]["totalTime"] == "4:00"
    for r in result["workout"]:
        assert r["estimatedCalories"] == BASE_CALORIES[r["exercise"]]


def test_hiit_scales_calories_and_totals(rng):
    result = composer.hiit(rounds=3, work=30, rest=15, rng=rng)

    assert result["summary"]["totalTime"] == "2:15"
    for r in result["workout"]:
        assert r["workSeconds"] == 30
        assert r["restSeconds"] == 15
        expected = composer._round_half_up(BASE_CALORIES[r["exercise"]] * 30 / 40)
        assert r["estimatedCalories"] == expected
    assert result["summary"]["estimatedCalories"] == sum(
        r["estimatedCalories"] for r in result["workout"]
    )


def test_hiit_clamps_each_parameter_independently(rng):
    result = composer.hiit(rounds=50, work=500, rest=1, rng=rng)

    assert result["filters"] == {"rounds": 10, "work": 120, "rest": 5}
    assert len(result["workout"]) == 10
    assert len({r["exercise"] for r in result["workout"]}) == 10
    assert result["summary"]["totalTime"] == "20:50"


def test_hiit_rounds_are_numbered_from_one(rng):
    result = composer.hiit(rounds=5, rng=rng)

    assert [r["round"] for r in result["workout"]] == [1, 2, 3, 4, 5]


def test_round_half_up():
    assert composer._round_half_up(2.5) == 3
    assert composer._round_half_up(3.75) == 4
    assert composer._round_half_up(11.25) == 11

from typing import Mapping, Sequence

from workout_api.models.exercise import Exercise


def filter_exercises(
    exercises: Sequence[Exercise],
    *,
    muscle: str | None = None,
    difficulty: str | None = None,
    equipment: str | None = None,
    category: str | None = None,
    category_index: Mapping[int, frozenset[str]] | None = None,
) -> list[Exercise]:
    """
    Keep the exercises matching every supplied criterion, in their input order.

    muscle and difficulty are case-insensitive equality, equipment is a
    case-insensitive substring match and category looks the id up in
    category_index. Values are expected to be validated already.
    """
    result = list(exercises)

    if muscle:
        wanted = muscle.lower()
        result = [ex for ex in result if ex.muscle.lower() == wanted]

    if difficulty:
        wanted = difficulty.lower()
        result = [ex for ex in result if ex.difficulty.lower() == wanted]

    if equipment:
        wanted = equipment.lower()
        result = [ex for ex in result if wanted in ex.equipment.lower()]

    if category:
        wanted = category.lower()
        index = category_index or {}
        result = [ex for ex in result if wanted in index.get(ex.id, frozenset())]

    return result

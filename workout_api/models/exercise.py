from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

EquipmentStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=50),
]

Muscle = Literal["chest", "back", "legs", "shoulders", "arms", "core"]
Difficulty = Literal["beginner", "intermediate", "advanced"]

CUSTOM_ID_START = 1000

DEFAULT_EQUIPMENT = "none"
DEFAULT_SETS = 3
DEFAULT_REPS = "10-12"
DEFAULT_DURATION = 30
DEFAULT_CALORIES = 25


class Exercise(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: int
    name: NameStr
    muscle: Muscle
    difficulty: Difficulty
    description: str = ""
    equipment: EquipmentStr = DEFAULT_EQUIPMENT
    sets: int | str = DEFAULT_SETS
    reps: int | str = DEFAULT_REPS
    duration: int = DEFAULT_DURATION
    calories: int | float = DEFAULT_CALORIES
    custom: bool = False

    @property
    def is_builtin(self) -> bool:
        return self.id < CUSTOM_ID_START


class ExerciseCreate(BaseModel):
    """
    Body for adding a custom exercise.

    muscle and difficulty stay plain strings here; they are checked against
    the fixed enums by the repository so the error can list the valid options.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    name: NameStr
    muscle: str
    difficulty: str
    description: str | None = None
    equipment: EquipmentStr | None = None
    sets: int | str | None = None
    reps: int | str | None = None
    duration: int | None = None
    calories: int | float | None = None

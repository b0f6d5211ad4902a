from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WarmupType = Literal["upper", "lower", "cardio", "core"]
StretchArea = Literal["legs", "upper", "arms", "back", "hips", "core"]
NutritionCategory = Literal[
    "pre-workout",
    "post-workout",
    "hydration",
    "muscle-building",
    "fat-loss",
    "protein",
    "recovery",
    "supplements",
]


class WarmupItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: WarmupType
    duration: int = Field(ge=0)  # seconds
    calories: int = Field(default=0, ge=0)
    description: str = ""


class StretchItem(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str
    target_area: StretchArea
    duration: int = Field(ge=0)  # seconds
    description: str = ""


class NutritionTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: NutritionCategory
    tip: str

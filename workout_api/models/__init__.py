from .exercise import Exercise, ExerciseCreate
from .history import HistoryCreate, HistoryEntry
from .routine import NutritionTip, StretchItem, WarmupItem

__all__ = [
    "Exercise",
    "ExerciseCreate",
    "HistoryCreate",
    "HistoryEntry",
    "NutritionTip",
    "StretchItem",
    "WarmupItem",
]

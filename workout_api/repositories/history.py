import threading
from collections import deque

from workout_api.models.history import HistoryCreate, HistoryEntry, estimate_calories
from workout_api.utils import dates
from workout_api.utils.log import logger

DEFAULT_CAPACITY = 100


class HistoryRepository:
    """
    Append-only workout log holding the most recent `capacity` entries.
    The oldest entry is evicted first once full.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)
        self._next_id = 1
        self._lock = threading.Lock()

    def add_entry(self, data: HistoryCreate) -> HistoryEntry:
        exercises = list(data.exercises)

        with self._lock:
            entry = HistoryEntry(
                id=self._next_id,
                timestamp=dates.now(),
                workout_type=data.workout_type or "custom",
                exercises=exercises,
                exercise_count=len(exercises),
                duration=data.duration,
                notes=data.notes or "",
                estimated_calories=estimate_calories(exercises),
            )
            self._next_id += 1
            self._entries.append(entry)

        logger.info(
            f"Workout saved to history id={entry.id} exercises={entry.exercise_count}"
        )
        return entry

    def list_recent(self, limit: int) -> list[HistoryEntry]:
        """Most recent first."""
        with self._lock:
            entries = list(self._entries)
        if limit <= 0:
            return []
        return list(reversed(entries[-limit:]))

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> int:
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.info(f"History cleared. Removed {removed} entries")
        return removed

import threading

from workout_api.errors import DuplicateError, NotFoundError
from workout_api.utils.log import logger


class FavoritesRepository:
    """Set of favourited exercise ids. Membership only, no ordering."""

    def __init__(self):
        self._ids: set[int] = set()
        self._lock = threading.Lock()

    def add(self, exercise_id: int) -> None:
        with self._lock:
            if exercise_id in self._ids:
                raise DuplicateError("Exercise already in favorites", id=exercise_id)
            self._ids.add(exercise_id)
        logger.info(f"Favorite added id={exercise_id}")

    def remove(self, exercise_id: int) -> None:
        with self._lock:
            if exercise_id not in self._ids:
                raise NotFoundError("Exercise not in favorites", id=exercise_id)
            self._ids.remove(exercise_id)
        logger.info(f"Favorite removed id={exercise_id}")

    def discard(self, exercise_id: int) -> None:
        with self._lock:
            self._ids.discard(exercise_id)

    def contains(self, exercise_id: int) -> bool:
        with self._lock:
            return exercise_id in self._ids

    def ids(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._ids)

    def count(self) -> int:
        with self._lock:
            return len(self._ids)

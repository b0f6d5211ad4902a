import threading
import time
from typing import Callable

DEFAULT_WINDOW_SECONDS = 900


class InMemoryRateLimiter:
    """
    Fixed-window request counters keyed by client id.

    Windows older than the current one are dropped on each hit so the
    table only ever holds live buckets.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._counts: dict[tuple[str, int], int] = {}
        self._lock = threading.Lock()

    def hit(
        self, *, client_id: str, limit: int, window_seconds: int = DEFAULT_WINDOW_SECONDS
    ) -> tuple[bool, int]:
        """
        Increment the counter for the current window.

        Returns: (allowed, retry_after_seconds)
        - allowed: True if within limit, False if exceeded
        - retry_after_seconds: seconds until the next window
        """
        now = int(self._clock())
        window_id = now // window_seconds
        retry_after = window_seconds - (now % window_seconds)

        with self._lock:
            stale = [key for key in self._counts if key[1] != window_id]
            for key in stale:
                del self._counts[key]

            key = (client_id, window_id)
            self._counts[key] = self._counts.get(key, 0) + 1
            count = self._counts[key]

        return (count <= limit, retry_after)

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()

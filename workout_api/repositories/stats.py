import threading
from collections import Counter, deque
from dataclasses import asdict, dataclass
from datetime import datetime

from workout_api.utils import dates

DEFAULT_LOG_CAPACITY = 1000
USER_AGENT_MAX_LENGTH = 50


@dataclass(frozen=True)
class RequestLogEntry:
    timestamp: str
    method: str
    path: str
    query: dict[str, str]
    ip: str
    user_agent: str | None

    def to_response(self) -> dict:
        data = asdict(self)
        data["userAgent"] = data.pop("user_agent")
        return data


class StatsRepository:
    """
    Simple usage counters and a bounded request log.
    """

    def __init__(self, log_capacity: int = DEFAULT_LOG_CAPACITY):
        self.start_time: datetime = dates.now()
        self._total_requests = 0
        self._rate_limit_hits = 0
        self._endpoint_hits: Counter[str] = Counter()
        self._exercise_views: Counter[int] = Counter()
        self._logs: deque[RequestLogEntry] = deque(maxlen=log_capacity)
        self._lock = threading.Lock()

    # ---------------------- Recording ---------------------------

    def record_request(
        self,
        *,
        method: str,
        path: str,
        query: dict[str, str],
        ip: str,
        user_agent: str | None,
    ) -> None:
        entry = RequestLogEntry(
            timestamp=dates.dt_to_iso(dates.now()),
            method=method,
            path=path,
            query=query,
            ip=ip,
            user_agent=user_agent[:USER_AGENT_MAX_LENGTH] if user_agent else None,
        )
        with self._lock:
            self._logs.append(entry)
            self._total_requests += 1
            self._endpoint_hits[path] += 1

    def record_exercise_view(self, exercise_id: int) -> None:
        with self._lock:
            self._exercise_views[exercise_id] += 1

    def record_rate_limit_hit(self) -> None:
        with self._lock:
            self._rate_limit_hits += 1

    # ---------------------- Reading ---------------------------

    def recent_logs(self, limit: int) -> tuple[list[RequestLogEntry], int]:
        """Return (most recent first, total held)."""
        with self._lock:
            logs = list(self._logs)
        if limit <= 0:
            return [], len(logs)
        return list(reversed(logs[-limit:])), len(logs)

    def top_endpoints(self, n: int = 5) -> list[tuple[str, int]]:
        with self._lock:
            return self._endpoint_hits.most_common(n)

    def top_exercises(self, n: int = 5) -> list[tuple[int, int]]:
        with self._lock:
            return self._exercise_views.most_common(n)

    @property
    def total_requests(self) -> int:
        with self._lock:
            return self._total_requests

    @property
    def rate_limit_hits(self) -> int:
        with self._lock:
            return self._rate_limit_hits

    def uptime_seconds(self) -> int:
        return int((dates.now() - self.start_time).total_seconds())

from datetime import datetime, timezone


def dt_to_iso(dt: datetime) -> str:
    """
    Convert a datetime to canonical ISO8601.
    Always returns a UTC Z-suffixed string.
    """
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def now() -> datetime:
    return datetime.now(timezone.utc)


def format_clock(seconds: int) -> str:
    """
    Format a number of seconds as minutes:seconds, e.g. 95 -> "1:35".
    """
    if seconds <= 0:
        return "0:00"

    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_uptime(seconds: int) -> str:
    hours, rest = divmod(max(int(seconds), 0), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"

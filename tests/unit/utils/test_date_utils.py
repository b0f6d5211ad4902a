from datetime import datetime, timedelta, timezone

import pytest

from workout_api.utils.dates import dt_to_iso, format_clock, format_uptime, now


def test_dt_to_iso_converts_to_utc_and_adds_z_suffix():
    # 2025-01-01 12:00 in UTC+2 -> 10:00 UTC
    local_dt = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    assert dt_to_iso(local_dt) == "2025-01-01T10:00:00Z"


def test_now_returns_timezone_aware_utc_datetime():
    result = now()

    assert result.tzinfo is not None
    assert result.tzinfo.utcoffset(result) == timedelta(0)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0:00"),
        (-5, "0:00"),
        (5, "0:05"),
        (60, "1:00"),
        (95, "1:35"),
        (3600, "60:00"),
    ],
)
def test_format_clock(seconds, expected):
    assert format_clock(seconds) == expected


def test_format_uptime():
    assert format_uptime(3725) == "1h 2m 5s"
    assert format_uptime(0) == "0h 0m 0s"

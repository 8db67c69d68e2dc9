from __future__ import annotations

from datetime import date, time
from unittest.mock import patch

from api.services.birth_timezone import (
    infer_birth_timezone,
    localize_birth_time,
    resolve_birth_timezone,
    utc_offset_hours,
)


def test_resolve_birth_timezone_uses_inferred_timezone_when_available():
    with patch(
        "api.services.birth_timezone.infer_birth_timezone",
        return_value="America/New_York",
    ):
        resolved, used_fallback = resolve_birth_timezone(
            latitude=33.0393,
            longitude=-85.0319,
            fallback_timezone="America/Los_Angeles",
        )

    assert resolved == "America/New_York"
    assert used_fallback is False


def test_resolve_birth_timezone_falls_back_when_inference_unavailable():
    with patch("api.services.birth_timezone.infer_birth_timezone", return_value=None):
        resolved, used_fallback = resolve_birth_timezone(
            latitude=33.0393,
            longitude=-85.0319,
            fallback_timezone="America/New_York",
        )

    assert resolved == "America/New_York"
    assert used_fallback is True


def test_resolve_birth_timezone_blank_fallback_is_utc():
    with patch("api.services.birth_timezone.infer_birth_timezone", return_value=None):
        resolved, _ = resolve_birth_timezone(latitude=0.0, longitude=-30.0, fallback_timezone=" ")
    assert resolved == "UTC"


def test_infer_birth_timezone_for_london():
    assert infer_birth_timezone(latitude=51.5074, longitude=-0.1278) == "Europe/London"


def test_localize_birth_time_applies_daylight_saving():
    summer = localize_birth_time(date(1990, 6, 15), time(14, 30), "Europe/London")
    winter = localize_birth_time(date(1990, 12, 15), time(14, 30), "Europe/London")

    assert utc_offset_hours(summer) == 1.0
    assert utc_offset_hours(winter) == 0.0
    assert summer.hour == 14


def test_localize_birth_time_fractional_offset():
    moment = localize_birth_time(date(2000, 1, 1), time(9, 0), "Asia/Kolkata")
    assert utc_offset_hours(moment) == 5.5

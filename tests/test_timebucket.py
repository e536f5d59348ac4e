"""Tests for local date/time bucketing."""

from datetime import datetime, timezone

from weather_mailer.weather.timebucket import local_date_str, local_time_str, today_and_tomorrow

# 2025-06-14 17:00:00 UTC
TS = int(datetime(2025, 6, 14, 17, 0, tzinfo=timezone.utc).timestamp())


def test_local_date_shifts_across_midnight():
    assert local_date_str(TS, 0) == "2025-06-14"
    assert local_date_str(TS, 7) == "2025-06-15"


def test_local_time_is_24_hour():
    assert local_time_str(TS, 7) == "00:00"
    assert local_time_str(TS, 0) == "17:00"
    assert local_time_str(TS, -5) == "12:00"


def test_fractional_offset():
    assert local_time_str(TS, 5.5) == "22:30"


def test_today_and_tomorrow_uses_target_offset_not_host():
    reference = datetime(2025, 6, 14, 18, 0, tzinfo=timezone.utc)
    assert today_and_tomorrow(reference, 7) == ("2025-06-15", "2025-06-16")
    assert today_and_tomorrow(reference, -5) == ("2025-06-14", "2025-06-15")


def test_naive_reference_is_utc():
    assert today_and_tomorrow(datetime(2025, 12, 31, 20, 0), 7) == ("2026-01-01", "2026-01-02")

"""
Pytest configuration and shared fixtures for Weather Mailer tests.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from weather_mailer.core.config import Settings
from weather_mailer.weather.models import AnalysisConfig, ForecastPoint, ForecastSet

BANGKOK = timezone(timedelta(hours=7))

# 08:00 on 2025-06-15 in Bangkok
REFERENCE = datetime(2025, 6, 15, 1, 0, tzinfo=timezone.utc)


def _local_ts(hour: int, minute: int = 0, day_offset: int = 0) -> int:
    """Epoch seconds for a Bangkok wall-clock time relative to 2025-06-15."""
    local = datetime(2025, 6, 15, hour, minute, tzinfo=BANGKOK) + timedelta(days=day_offset)
    return int(local.timestamp())


@pytest.fixture
def local_ts():
    """Epoch-seconds helper for Bangkok wall-clock times: local_ts(hour, minute=0, day_offset=0)."""
    return _local_ts


@pytest.fixture
def reference():
    return REFERENCE


@pytest.fixture
def analysis_config():
    return AnalysisConfig(latitude=13.7563, longitude=100.5018, utc_offset_hours=7.0)


@pytest.fixture
def make_point():
    """Factory for ForecastPoint at a Bangkok local hour (day_offset=1 for tomorrow)."""

    def _make(hour, temp=28.0, condition="Clear", description="clear sky", day_offset=0, **kwargs):
        return ForecastPoint(
            timestamp=_local_ts(hour, day_offset=day_offset),
            temperature=temp,
            condition=condition,
            description=description,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_forecast():
    def _make(*points, location="Bangkok"):
        return ForecastSet(location=location, points=tuple(points))

    return _make


@pytest.fixture
def settings():
    """Fully valid settings that never touch the real environment or .env."""
    return Settings(
        _env_file=None,
        OPENWEATHER_API_KEY="test-key",
        OPENWEATHER_BASE_URL="https://api.example.test/data/2.5",
        SENDER_EMAIL="weather@example.com",
        RECIPIENT_EMAIL="me@example.com",
        LATITUDE=13.7563,
        LONGITUDE=100.5018,
        LOCAL_UTC_OFFSET_HOURS=7.0,
        RETRY_DELAY_SECONDS=0.0,
        AWS_REGION="us-east-1",
        AWS_ACCESS_KEY_ID="testing",
        AWS_SECRET_ACCESS_KEY="testing",
        ADMIN_API_KEY="secret",
    )


@pytest.fixture
def owm_payload():
    """OpenWeatherMap /forecast payload: today 11:00/14:00 local plus tomorrow 08:00."""
    return {
        "cod": "200",
        "message": 0,
        "cnt": 3,
        "list": [
            {
                "dt": _local_ts(11),
                "main": {"temp": 29.5, "feels_like": 33.0, "humidity": 70},
                "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds"}],
                "pop": 0.2,
            },
            {
                "dt": _local_ts(14),
                "main": {"temp": 31.0},
                "weather": [{"id": 500, "main": "Rain", "description": "light rain"}],
                "pop": 0.6,
                "rain": {"3h": 4.2},
            },
            {
                "dt": _local_ts(8, day_offset=1),
                "main": {"temp": 27.0},
                "weather": [{"id": 501, "main": "Rain", "description": "moderate rain"}],
                "pop": 0.85,
                "rain": {"3h": 1.1},
            },
        ],
        "city": {"id": 1609350, "name": "Bangkok", "country": "TH"},
    }

"""Rain timing extraction for today and tomorrow."""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Iterable, List, Optional

from weather_mailer.weather.models import ForecastPoint, ForecastSet, RainEvent
from weather_mailer.weather.timebucket import local_date_str, local_time_str

RAIN_KEYWORDS = ("rain", "thunderstorm", "drizzle")
MAX_TOMORROW_EVENTS = 3


def is_rain_condition(condition: Optional[str]) -> bool:
    """True for rain-family primary categories (case-insensitive substring match)."""
    if not condition:
        return False
    lowered = condition.lower()
    return any(keyword in lowered for keyword in RAIN_KEYWORDS)


def _to_event(point: ForecastPoint, is_today: bool, offset_hours: float) -> RainEvent:
    # Half-up rounding: a pop of 0.125 reads as 13%.
    probability = 0
    if point.pop is not None and math.isfinite(point.pop):
        probability = math.floor(point.pop * 100 + 0.5)
    return RainEvent(
        time=local_time_str(point.timestamp, offset_hours),
        is_today=is_today,
        probability=max(0, min(100, probability)),
        volume=float(point.rain_volume),
        description=point.description or "",
        intensity=(point.condition or "").lower(),
    )


def extract_rain_events(
    forecast: ForecastSet,
    today: str,
    offset_hours: float,
    tomorrow: Optional[str] = None,
) -> List[RainEvent]:
    """
    Rain-family samples whose local date is today or tomorrow.

    Order follows the input sequence. Nothing is deduplicated or capped here.
    """
    if tomorrow is None:
        tomorrow = (date.fromisoformat(today) + timedelta(days=1)).isoformat()

    events = []
    for point in forecast.points:
        day = local_date_str(point.timestamp, offset_hours)
        if day not in (today, tomorrow):
            continue
        if not is_rain_condition(point.condition):
            continue
        events.append(_to_event(point, day == today, offset_hours))
    return events


def cap_tomorrow(events: Iterable[RainEvent], limit: int = MAX_TOMORROW_EVENTS) -> List[RainEvent]:
    """Keep every event for today and only the first `limit` for tomorrow."""
    kept = []
    tomorrow_count = 0
    for event in events:
        if not event.is_today:
            if tomorrow_count >= limit:
                continue
            tomorrow_count += 1
        kept.append(event)
    return kept

"""Laundry & umbrella recommendation engine.

This is a deterministic rules engine used for the daily weather email:
- Drying advice ("hang laundry outside" vs "dry indoors")
- Umbrella advice (rain, sun protection, or none)

It never reads the clock or the environment: the reference instant and the
thresholds are passed in, so the same inputs always give the same result.
Forecasts that can't support advice produce an InsufficientData value
rather than an exception.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import List, Optional, Union

from weather_mailer.weather.models import (
    AnalysisConfig,
    DryingAdvice,
    ForecastPoint,
    ForecastSet,
    InsufficientData,
    InsufficientDataReason,
    Recommendation,
    UmbrellaAdvice,
)
from weather_mailer.weather.rain_timing import cap_tomorrow, extract_rain_events, is_rain_condition
from weather_mailer.weather.timebucket import local_date_str, today_and_tomorrow

AnalysisResult = Union[Recommendation, InsufficientData]


def _numeric_temps(points: List[ForecastPoint]) -> List[float]:
    temps = []
    for point in points:
        temp = point.temperature
        if isinstance(temp, bool) or not isinstance(temp, (int, float)):
            continue
        if not math.isfinite(temp):
            continue
        temps.append(float(temp))
    return temps


def decide_drying(has_rain: bool, has_clouds: bool, avg_temp: float, config: AnalysisConfig) -> DryingAdvice:
    """Rain always wins; cloud only matters when it's also cool."""
    if has_rain:
        return DryingAdvice.RAIN
    if has_clouds and avg_temp < config.damp_risk_temp_threshold:
        return DryingAdvice.DAMP_RISK
    return DryingAdvice.GOOD


def decide_umbrella(has_rain: bool, max_temp: float, config: AnalysisConfig) -> UmbrellaAdvice:
    if has_rain:
        return UmbrellaAdvice.BRING_RAIN
    if max_temp > config.high_temp_threshold:
        return UmbrellaAdvice.BRING_SUN
    return UmbrellaAdvice.NOT_NEEDED


def analyze(forecast: ForecastSet, reference: datetime, config: AnalysisConfig) -> AnalysisResult:
    """
    Compute drying and umbrella advice for the local day containing `reference`.

    Rules:
    - No samples at all -> InsufficientData(empty_forecast)
    - No samples on today's local date -> InsufficientData(no_data_for_today)
    - No numeric temperature among today's samples -> InsufficientData(no_temperature_data)
    - Any rain/thunderstorm/drizzle today -> drying=rain, umbrella=bring_rain
    - Else clouds today and mean temp < damp threshold -> drying=damp_risk
    - Else max temp > high threshold -> umbrella=bring_sun
    """
    if not forecast.points:
        return InsufficientData.of(InsufficientDataReason.EMPTY_FORECAST)

    offset = config.utc_offset_hours
    today, tomorrow = today_and_tomorrow(reference, offset)

    today_points = [p for p in forecast.points if local_date_str(p.timestamp, offset) == today]
    if not today_points:
        return InsufficientData.of(InsufficientDataReason.NO_DATA_FOR_TODAY)

    temps = _numeric_temps(today_points)
    if not temps:
        return InsufficientData.of(InsufficientDataReason.NO_TEMPERATURE_DATA)

    min_temp = min(temps)
    max_temp = max(temps)
    avg_temp = sum(temps) / len(temps)

    conditions = [p.condition.lower() for p in today_points if p.condition]
    has_rain = any(is_rain_condition(c) for c in conditions)
    has_clouds = any("cloud" in c for c in conditions)

    description = today_points[0].description or "unknown"

    rain_events = cap_tomorrow(extract_rain_events(forecast, today, offset, tomorrow=tomorrow))

    drying = decide_drying(has_rain, has_clouds, avg_temp, config)
    umbrella = decide_umbrella(has_rain, max_temp, config)

    rain_onset: Optional[str] = None
    if umbrella is UmbrellaAdvice.BRING_RAIN:
        first_today = next((e for e in rain_events if e.is_today), None)
        if first_today is not None:
            rain_onset = first_today.time

    return Recommendation(
        location=forecast.location,
        latitude=config.latitude,
        longitude=config.longitude,
        target_date=today,
        min_temp=min_temp,
        max_temp=max_temp,
        avg_temp=avg_temp,
        description=description,
        has_rain=has_rain,
        has_clouds=has_clouds,
        rain_events=tuple(rain_events),
        drying_advice=drying,
        umbrella_advice=umbrella,
        rain_onset=rain_onset,
    )

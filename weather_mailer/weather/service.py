"""Weather service using OpenWeatherMap API."""

import asyncio
import json
import logging
import math
from typing import Any, Optional

import httpx

from weather_mailer.core.config import Settings, get_settings
from weather_mailer.core.exceptions import ForecastProviderException
from weather_mailer.weather.models import ForecastPoint, ForecastSet

logger = logging.getLogger(__name__)

USER_AGENT = "WeatherMailer/1.0"

# Timestamps outside this window are treated as absent; datetime.fromtimestamp
# stays in range for any supported UTC offset.
MIN_TIMESTAMP = 0
MAX_TIMESTAMP = 253402214400  # 9999-12-31T00:00:00Z


def _number(value: Any) -> Optional[float]:
    """Finite float, or None for anything else (bools, NaN, Infinity, huge ints)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _describe_error(e: httpx.HTTPError) -> str:
    # The request URL carries the API key, so never log str(e) for status errors.
    if isinstance(e, httpx.HTTPStatusError):
        return f"HTTP {e.response.status_code}: {e.response.reason_phrase}"
    return f"{type(e).__name__}: {e}" if str(e) else type(e).__name__


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def parse_forecast_point(item: Any) -> Optional[ForecastPoint]:
    """Build a ForecastPoint from one `list` entry; None if it has no usable timestamp."""
    item = _dict(item)
    ts = _number(item.get("dt"))
    if ts is None or not MIN_TIMESTAMP <= ts <= MAX_TIMESTAMP:
        return None

    weather = item.get("weather")
    first = _dict(weather[0]) if isinstance(weather, list) and weather else {}
    rain = _dict(item.get("rain"))
    condition = first.get("main")
    description = first.get("description")

    return ForecastPoint(
        timestamp=int(ts),
        temperature=_number(_dict(item.get("main")).get("temp")),
        condition=condition if isinstance(condition, str) else None,
        description=description if isinstance(description, str) else None,
        pop=_number(item.get("pop")),
        rain_3h=_number(rain.get("3h")),
        rain_1h=_number(rain.get("1h")),
    )


def parse_forecast(data: Any) -> ForecastSet:
    """
    Convert an OpenWeatherMap /forecast payload into a ForecastSet.

    Raises ForecastProviderException for provider errors or a missing `list`.
    Missing nested fields inside entries are treated as absent.
    """
    if not isinstance(data, dict):
        raise ForecastProviderException("Invalid weather data format received from API")

    cod = data.get("cod")
    if cod and cod not in ("200", 200):
        raise ForecastProviderException(f"OpenWeatherMap API error: {data.get('message') or 'Unknown error'}")

    items = data.get("list")
    if not isinstance(items, list):
        raise ForecastProviderException("Invalid weather data format received from API")

    points = tuple(p for p in (parse_forecast_point(item) for item in items) if p is not None)
    city_name = _dict(data.get("city")).get("name")

    return ForecastSet(
        location=city_name if isinstance(city_name, str) and city_name else "Unknown Location",
        points=points,
    )


class WeatherService:
    """Fetches the short-range forecast for the configured point."""

    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.api_key = self.settings.OPENWEATHER_API_KEY
        self.base_url = self.settings.OPENWEATHER_BASE_URL.rstrip("/")
        self._transport = transport

    async def _get_json(self, client: httpx.AsyncClient, url: str, params: dict) -> Any:
        """GET with linear backoff between attempts. Non-JSON bodies are returned as text."""
        retries = max(1, int(self.settings.MAX_RETRIES))
        for attempt in range(1, retries + 1):
            try:
                response = await client.get(url, params=params)
                response.raise_for_status()
                try:
                    return response.json()
                except json.JSONDecodeError:
                    return response.text
            except httpx.HTTPError as e:
                reason = _describe_error(e)
                logger.warning(f"Request attempt {attempt} failed: {reason}")
                if attempt == retries:
                    raise ForecastProviderException(f"Failed to fetch weather data: {reason}")
                await asyncio.sleep(self.settings.RETRY_DELAY_SECONDS * attempt)

    async def get_forecast(self, lat: float, lon: float) -> ForecastSet:
        """Get the next FORECAST_COUNT 3-hour samples for a coordinate."""
        params = {
            "lat": lat,
            "lon": lon,
            "appid": self.api_key,
            "units": "metric",
            "cnt": self.settings.FORECAST_COUNT,
        }
        async with httpx.AsyncClient(
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            headers={"User-Agent": USER_AGENT},
            transport=self._transport,
        ) as client:
            data = await self._get_json(client, f"{self.base_url}/forecast", params)

        forecast = parse_forecast(data)
        logger.info(f"Weather data received for {forecast.location}, {len(forecast.points)} forecast items")
        return forecast

"""Weather-related models and schemas."""

import math
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ForecastPoint(BaseModel):
    """One 3-hour forecast sample."""
    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Epoch seconds (UTC)")
    temperature: Optional[float] = None  # Celsius
    condition: Optional[str] = Field(None, description="Primary category: Rain, Clouds, Clear, ...")
    description: Optional[str] = None
    pop: Optional[float] = Field(None, description="Precipitation probability 0.0-1.0")
    rain_3h: Optional[float] = None  # mm over the last 3 hours
    rain_1h: Optional[float] = None  # mm over the last hour

    @property
    def rain_volume(self) -> float:
        """3-hour accumulation if reported, else 1-hour, else 0."""
        for volume in (self.rain_3h, self.rain_1h):
            if volume and math.isfinite(volume):
                return volume
        return 0.0


class ForecastSet(BaseModel):
    """Chronological forecast samples for one location."""
    model_config = ConfigDict(frozen=True)

    location: str = "Unknown Location"
    points: Tuple[ForecastPoint, ...] = Field(default_factory=tuple)


class AnalysisConfig(BaseModel):
    """Explicit inputs the analyzer needs besides the forecast itself."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    damp_risk_temp_threshold: float = 30.0
    high_temp_threshold: float = 35.0
    utc_offset_hours: float = Field(7.0, ge=-12, le=14)


class DryingAdvice(str, Enum):
    RAIN = "rain"
    DAMP_RISK = "damp_risk"
    GOOD = "good"


class UmbrellaAdvice(str, Enum):
    BRING_RAIN = "bring_rain"
    BRING_SUN = "bring_sun"
    NOT_NEEDED = "not_needed"


class RainEvent(BaseModel):
    """A rain-family forecast sample, tagged for display."""
    model_config = ConfigDict(frozen=True)

    time: str = Field(..., description="Local time of day, HH:MM")
    is_today: bool
    probability: int = Field(0, ge=0, le=100)
    volume: float = 0.0  # mm
    description: str = ""
    intensity: str = Field("", description="Lower-cased primary category: rain, thunderstorm, drizzle")


class Recommendation(BaseModel):
    """Drying and umbrella advice for the target day."""
    model_config = ConfigDict(frozen=True)

    location: str
    latitude: float
    longitude: float
    target_date: str  # local YYYY-MM-DD
    min_temp: float
    max_temp: float
    avg_temp: float
    description: str
    has_rain: bool
    has_clouds: bool
    rain_events: Tuple[RainEvent, ...] = Field(default_factory=tuple)
    drying_advice: DryingAdvice
    umbrella_advice: UmbrellaAdvice
    rain_onset: Optional[str] = None  # HH:MM of the first rain sample today

    @property
    def today_rain(self) -> Tuple[RainEvent, ...]:
        return tuple(e for e in self.rain_events if e.is_today)

    @property
    def tomorrow_rain(self) -> Tuple[RainEvent, ...]:
        return tuple(e for e in self.rain_events if not e.is_today)


class InsufficientDataReason(str, Enum):
    EMPTY_FORECAST = "empty_forecast"
    NO_DATA_FOR_TODAY = "no_data_for_today"
    NO_TEMPERATURE_DATA = "no_temperature_data"


INSUFFICIENT_DATA_MESSAGES = {
    InsufficientDataReason.EMPTY_FORECAST: "Unable to retrieve weather data.",
    InsufficientDataReason.NO_DATA_FOR_TODAY: "No weather data available for today.",
    InsufficientDataReason.NO_TEMPERATURE_DATA: "Unable to retrieve temperature data.",
}


class InsufficientData(BaseModel):
    """Returned instead of a Recommendation when the forecast can't support one."""
    model_config = ConfigDict(frozen=True)

    reason: InsufficientDataReason
    message: str

    @classmethod
    def of(cls, reason: InsufficientDataReason) -> "InsufficientData":
        return cls(reason=reason, message=INSUFFICIENT_DATA_MESSAGES[reason])


class RenderedMessage(BaseModel):
    """Plain-text and HTML versions of one report."""
    text: str
    html: str

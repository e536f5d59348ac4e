"""
Weather Report Content Templates

All copy used in the daily weather email lives here so wording can change
without touching the decision rules in analyzer.py or the layout in
formatter.py.
"""

from typing import Tuple

from weather_mailer.weather.models import DryingAdvice, RainEvent, UmbrellaAdvice


class WeatherReportContent:
    """Plain-text building blocks for the report, one line per method."""

    # -------------------------------------------------------------------------
    # Header
    # -------------------------------------------------------------------------

    TITLE = "🌤️ Today's Weather"
    SUBJECT_PREFIX = "🌤️ Daily Weather Report"
    ERROR_SUBJECT_PREFIX = "⚠️ Weather Service Error"

    @staticmethod
    def location_line(location: str, lat: float, lon: float) -> str:
        return f"📍 {location} ({lat:.4f}, {lon:.4f})"

    @staticmethod
    def temperature_line(min_temp: float, max_temp: float) -> str:
        return f"🌡️ Temperature: {min_temp:.1f}°C - {max_temp:.1f}°C"

    @staticmethod
    def conditions_line(description: str) -> str:
        return f"☁️ Conditions: {description}"

    # -------------------------------------------------------------------------
    # Drying advice (two lines each)
    # -------------------------------------------------------------------------

    DRYING = {
        DryingAdvice.RAIN: (
            "🌧️ Rain today, don't hang your laundry outside",
            "🏠 Wash and dry indoors, or use a dryer",
        ),
        DryingAdvice.DAMP_RISK: (
            "⚠️ Cloudy today, laundry may dry slowly",
            "👕 Fine to wash, but dry it somewhere with good airflow",
        ),
        DryingAdvice.GOOD: (
            "✅ Nice weather today, go ahead and do laundry!",
            "☀️ Plenty of sun, clothes will dry fast",
        ),
    }

    @classmethod
    def drying_lines(cls, advice: DryingAdvice) -> Tuple[str, str]:
        return cls.DRYING[advice]

    # -------------------------------------------------------------------------
    # Rain timing
    # -------------------------------------------------------------------------

    RAIN_HEADING = "🌧️ Rain forecast:"
    TODAY_HEADING = "📅 Today:"
    TOMORROW_HEADING = "📅 Tomorrow:"
    HEAVY_RAIN_MM = 2.5

    @classmethod
    def intensity_icon(cls, event: RainEvent) -> str:
        if "thunderstorm" in event.intensity:
            return "⛈️"
        if event.volume > cls.HEAVY_RAIN_MM:
            return "🌧️"
        return "🌦️"

    @classmethod
    def rain_event_line(cls, event: RainEvent) -> str:
        line = f"   {cls.intensity_icon(event)} {event.time} - chance {event.probability}%"
        if event.volume > 0:
            line += f" ({event.volume:.1f}mm)"
        return line

    # -------------------------------------------------------------------------
    # Umbrella advice
    # -------------------------------------------------------------------------

    UMBRELLA = {
        UmbrellaAdvice.BRING_RAIN: "☔ Don't forget your umbrella!",
        UmbrellaAdvice.BRING_SUN: "🌂 Very hot today, bring an umbrella for shade",
        UmbrellaAdvice.NOT_NEEDED: "👍 No umbrella needed, the weather looks fine",
    }

    @staticmethod
    def rain_onset_line(time: str) -> str:
        return f"⏰ Rain expected around {time}"

    # -------------------------------------------------------------------------
    # Subjects
    # -------------------------------------------------------------------------

    @staticmethod
    def subject(prefix: str, date_str: str) -> str:
        return f"{prefix} - {date_str}"

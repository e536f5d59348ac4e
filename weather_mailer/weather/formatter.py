"""Render an analysis result as a plain-text message and an HTML email."""

from __future__ import annotations

import html
import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from weather_mailer.core.email_templates import get_weather_report_page
from weather_mailer.weather.content import WeatherReportContent
from weather_mailer.weather.models import (
    AnalysisConfig,
    InsufficientData,
    Recommendation,
    RenderedMessage,
    UmbrellaAdvice,
)

# Inline style applied to each pictograph in the HTML version.
PICTOGRAPH_STYLES = {
    "🌤️": "font-size: 1.2em;",
    "📍": "color: #e74c3c;",
    "🌡️": "color: #f39c12;",
    "☁️": "color: #95a5a6;",
    "❌": "color: #e74c3c; font-weight: bold;",
    "✅": "color: #27ae60; font-weight: bold;",
    "⚠️": "color: #f39c12; font-weight: bold;",
    "☔": "color: #3498db;",
    "🌂": "color: #f39c12;",
    "👍": "color: #27ae60;",
    "🏠": "color: #8e44ad;",
    "👕": "color: #2980b9;",
    "☀️": "color: #f1c40f;",
    "🌧️": "color: #3498db; font-weight: bold;",
    "🌦️": "color: #74b9ff;",
    "🌨️": "color: #74b9ff;",
    "⛈️": "color: #e74c3c; font-weight: bold;",
    "📅": "color: #6c5ce7; font-weight: bold;",
    "⏰": "color: #fd79a8;",
}

# Longest first so a pictograph with a variation selector wins over a bare prefix.
_TOKEN_RE = re.compile(
    "(" + "|".join(re.escape(t) for t in sorted(PICTOGRAPH_STYLES, key=len, reverse=True)) + ")"
)


def _offset_label(offset_hours: float) -> str:
    sign = "+" if offset_hours >= 0 else "-"
    minutes = int(round(abs(offset_hours) * 60))
    return f"UTC{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_local_timestamp(instant: datetime, offset_hours: float) -> str:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    local = instant.astimezone(timezone(timedelta(hours=offset_hours)))
    return f"{local.strftime('%Y-%m-%d %H:%M')} ({_offset_label(offset_hours)})"


def format_text(result: Union[Recommendation, InsufficientData]) -> str:
    """Plain-text message. Sentinels render as their user-facing message."""
    if isinstance(result, InsufficientData):
        return result.message

    c = WeatherReportContent
    lines = [
        c.TITLE,
        c.location_line(result.location, result.latitude, result.longitude),
        c.temperature_line(result.min_temp, result.max_temp),
        c.conditions_line(result.description),
        "",
        *c.drying_lines(result.drying_advice),
    ]

    today_rain = result.today_rain
    tomorrow_rain = result.tomorrow_rain
    if today_rain or tomorrow_rain:
        lines += ["", c.RAIN_HEADING]
        if today_rain:
            lines.append(c.TODAY_HEADING)
            lines += [c.rain_event_line(e) for e in today_rain]
        if tomorrow_rain:
            lines.append(c.TOMORROW_HEADING)
            lines += [c.rain_event_line(e) for e in tomorrow_rain]

    lines += ["", c.UMBRELLA[result.umbrella_advice]]
    if result.umbrella_advice is UmbrellaAdvice.BRING_RAIN and result.rain_onset:
        lines.append(c.rain_onset_line(result.rain_onset))

    return "\n".join(lines) + "\n"


def text_to_html(text: str) -> str:
    """
    Escape text and wrap each known pictograph in a styled span.

    One pass over the tokenized text, so an inserted span is never matched again.
    """
    parts = []
    for piece in _TOKEN_RE.split(text):
        if not piece:
            continue
        style = PICTOGRAPH_STYLES.get(piece)
        if style is not None:
            parts.append(f'<span style="{style}">{piece}</span>')
        else:
            parts.append(html.escape(piece))
    return "".join(parts).replace("\n", "<br>")


def render(
    result: Union[Recommendation, InsufficientData],
    generated_at: Optional[datetime] = None,
    utc_offset_hours: Optional[float] = None,
) -> RenderedMessage:
    """
    Render a result as text plus a full HTML page.

    `generated_at` only feeds the footer; it defaults to the current time.
    The footer uses `utc_offset_hours`, or AnalysisConfig's default offset.
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    if utc_offset_hours is None:
        utc_offset_hours = AnalysisConfig.model_fields["utc_offset_hours"].default

    text = format_text(result)
    page = get_weather_report_page(
        content_html=text_to_html(text),
        generated_at=format_local_timestamp(generated_at, utc_offset_hours),
    )
    return RenderedMessage(text=text, html=page)


def build_subject(reference: datetime, utc_offset_hours: float, error: bool = False) -> str:
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    local_date = reference.astimezone(timezone(timedelta(hours=utc_offset_hours))).date().isoformat()
    prefix = WeatherReportContent.ERROR_SUBJECT_PREFIX if error else WeatherReportContent.SUBJECT_PREFIX
    return WeatherReportContent.subject(prefix, local_date)

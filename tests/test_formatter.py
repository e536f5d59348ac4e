"""Tests for report text and HTML rendering."""

from datetime import datetime, timezone

from weather_mailer.weather.analyzer import analyze
from weather_mailer.weather.formatter import (
    PICTOGRAPH_STYLES,
    build_subject,
    format_local_timestamp,
    format_text,
    render,
    text_to_html,
)
from weather_mailer.weather.models import (
    DryingAdvice,
    InsufficientData,
    InsufficientDataReason,
    RainEvent,
    Recommendation,
    UmbrellaAdvice,
)


def _recommendation(**overrides):
    values = dict(
        location="Bangkok",
        latitude=13.7563,
        longitude=100.5018,
        target_date="2025-06-15",
        min_temp=25.0,
        max_temp=32.0,
        avg_temp=28.5,
        description="scattered clouds",
        has_rain=False,
        has_clouds=True,
        drying_advice=DryingAdvice.DAMP_RISK,
        umbrella_advice=UmbrellaAdvice.NOT_NEEDED,
    )
    values.update(overrides)
    return Recommendation(**values)


class TestFormatText:

    def test_sections_in_order(self):
        text = format_text(_recommendation())

        assert text.splitlines() == [
            "🌤️ Today's Weather",
            "📍 Bangkok (13.7563, 100.5018)",
            "🌡️ Temperature: 25.0°C - 32.0°C",
            "☁️ Conditions: scattered clouds",
            "",
            "⚠️ Cloudy today, laundry may dry slowly",
            "👕 Fine to wash, but dry it somewhere with good airflow",
            "",
            "👍 No umbrella needed, the weather looks fine",
        ]

    def test_good_drying_and_sun_umbrella(self):
        text = format_text(_recommendation(
            drying_advice=DryingAdvice.GOOD, umbrella_advice=UmbrellaAdvice.BRING_SUN, max_temp=36.2,
        ))
        assert "✅ Nice weather today, go ahead and do laundry!" in text
        assert "☀️ Plenty of sun, clothes will dry fast" in text
        assert "🌂 Very hot today, bring an umbrella for shade" in text
        assert "Rain forecast" not in text

    def test_rain_sections(self):
        events = (
            RainEvent(time="14:00", is_today=True, probability=60, volume=4.2, intensity="rain"),
            RainEvent(time="17:00", is_today=True, probability=40, volume=1.0, intensity="rain"),
            RainEvent(time="02:00", is_today=False, probability=85, volume=0.0, intensity="thunderstorm"),
        )
        text = format_text(_recommendation(
            has_rain=True,
            rain_events=events,
            drying_advice=DryingAdvice.RAIN,
            umbrella_advice=UmbrellaAdvice.BRING_RAIN,
            rain_onset="14:00",
        ))

        lines = text.splitlines()
        start = lines.index("🌧️ Rain forecast:")
        assert lines[start:start + 6] == [
            "🌧️ Rain forecast:",
            "📅 Today:",
            "   🌧️ 14:00 - chance 60% (4.2mm)",
            "   🌦️ 17:00 - chance 40% (1.0mm)",
            "📅 Tomorrow:",
            "   ⛈️ 02:00 - chance 85%",
        ]
        assert lines[-2:] == ["☔ Don't forget your umbrella!", "⏰ Rain expected around 14:00"]
        assert lines[5] == "🌧️ Rain today, don't hang your laundry outside"

    def test_tomorrow_only_rain_has_no_today_heading(self):
        events = (RainEvent(time="08:00", is_today=False, probability=50, volume=0.5, intensity="drizzle"),)
        text = format_text(_recommendation(rain_events=events))
        assert "📅 Today:" not in text
        assert "📅 Tomorrow:\n   🌦️ 08:00 - chance 50% (0.5mm)" in text

    def test_rain_umbrella_without_onset(self):
        text = format_text(_recommendation(
            has_rain=True, drying_advice=DryingAdvice.RAIN, umbrella_advice=UmbrellaAdvice.BRING_RAIN,
        ))
        assert "☔ Don't forget your umbrella!" in text
        assert "⏰" not in text

    def test_insufficient_data_renders_its_message(self):
        sentinel = InsufficientData.of(InsufficientDataReason.NO_DATA_FOR_TODAY)
        assert format_text(sentinel) == sentinel.message


class TestHtml:

    def test_each_pictograph_wrapped_once(self):
        text = format_text(_recommendation())
        content = text_to_html(text)

        expected = sum(text.count(token) for token in PICTOGRAPH_STYLES)
        assert content.count("<span") == expected
        assert '<span style="color: #e74c3c;">📍</span>' in content
        assert '<span style="color: #f39c12; font-weight: bold;">⚠️</span>' in content

    def test_newlines_become_breaks(self):
        assert text_to_html("a\nb\n") == "a<br>b<br>"

    def test_plain_text_is_escaped(self):
        content = text_to_html("📍 <Tom & Jerry>")
        assert "&lt;Tom &amp; Jerry&gt;" in content
        assert "<Tom" not in content

    def test_unknown_pictograph_left_alone(self):
        assert text_to_html("🐈 cat") == "🐈 cat"

    def test_page_has_banner_content_and_footer(self):
        generated_at = datetime(2025, 6, 15, 1, 0, tzinfo=timezone.utc)
        rendered = render(_recommendation(), generated_at=generated_at, utc_offset_hours=7.0)

        assert rendered.text == format_text(_recommendation())
        assert rendered.html.startswith("<!DOCTYPE html>")
        assert "Daily Weather Report</h1>" in rendered.html
        assert text_to_html(rendered.text) in rendered.html
        assert "Generated at 2025-06-15 08:00 (UTC+07:00)" in rendered.html

    def test_footer_defaults_to_configured_offset(self):
        generated_at = datetime(2025, 6, 15, 1, 0, tzinfo=timezone.utc)
        rendered = render(_recommendation(), generated_at=generated_at)
        assert "Generated at 2025-06-15 08:00 (UTC+07:00)" in rendered.html

    def test_footer_explicit_utc(self):
        generated_at = datetime(2025, 6, 15, 1, 0, tzinfo=timezone.utc)
        rendered = render(_recommendation(), generated_at=generated_at, utc_offset_hours=0.0)
        assert "Generated at 2025-06-15 01:00 (UTC+00:00)" in rendered.html


def test_render_from_analysis(make_point, make_forecast, reference, analysis_config):
    forecast = make_forecast(make_point(14, temp=29, condition="Rain", description="light rain", pop=0.6, rain_3h=4.2))
    rendered = render(analyze(forecast, reference, analysis_config), generated_at=reference, utc_offset_hours=7.0)
    assert "   🌧️ 14:00 - chance 60% (4.2mm)" in rendered.text
    assert "⏰ Rain expected around 14:00" in rendered.text


def test_format_local_timestamp_negative_offset():
    instant = datetime(2025, 6, 15, 1, 0, tzinfo=timezone.utc)
    assert format_local_timestamp(instant, -3.5) == "2025-06-14 21:30 (UTC-03:30)"


def test_build_subject_uses_local_date():
    instant = datetime(2025, 6, 14, 23, 0, tzinfo=timezone.utc)
    assert build_subject(instant, 7.0) == "🌤️ Daily Weather Report - 2025-06-15"
    assert build_subject(instant, 0.0, error=True) == "⚠️ Weather Service Error - 2025-06-14"

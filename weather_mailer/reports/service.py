"""Daily weather report orchestration: fetch, analyze, render, send."""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from weather_mailer.core.config import Settings, get_settings
from weather_mailer.core.email_service import EmailService
from weather_mailer.core.email_templates import get_service_error_email
from weather_mailer.core.exceptions import AppException
from weather_mailer.reports.models import ReportResult, WeatherReport
from weather_mailer.weather.analyzer import analyze
from weather_mailer.weather.formatter import build_subject, format_local_timestamp, render
from weather_mailer.weather.models import InsufficientData
from weather_mailer.weather.service import WeatherService

logger = logging.getLogger(__name__)


def _utc_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


class ReportService:
    """Builds and delivers the daily weather email."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        weather_service: Optional[WeatherService] = None,
        email_service: Optional[EmailService] = None,
    ):
        self.settings = settings or get_settings()
        self.weather_service = weather_service or WeatherService(self.settings)
        self.email_service = email_service or EmailService(self.settings)

    async def build_report(self, now: Optional[datetime] = None) -> WeatherReport:
        """
        Validate settings, fetch the forecast and render the report.

        Raises:
            ConfigurationException: settings are missing or invalid
            ForecastProviderException: the forecast could not be fetched
        """
        now_utc = _utc_now(now)
        self.settings.validate_for_report()
        config = self.settings.analysis_config()

        logger.info("Fetching weather data...")
        forecast = await self.weather_service.get_forecast(config.latitude, config.longitude)

        logger.info("Analyzing weather data...")
        result = analyze(forecast, now_utc, config)
        if isinstance(result, InsufficientData):
            logger.warning(f"Insufficient forecast data: {result.reason.value}")

        rendered = render(result, generated_at=now_utc, utc_offset_hours=config.utc_offset_hours)
        logger.info(f"Generated message length: {len(rendered.text)} characters")

        return WeatherReport(
            subject=build_subject(now_utc, config.utc_offset_hours),
            text=rendered.text,
            html=rendered.html,
            location=forecast.location,
            forecast_count=len(forecast.points),
            insufficient_data=result.reason if isinstance(result, InsufficientData) else None,
        )

    async def send_daily_report(self, now: Optional[datetime] = None, dry_run: bool = False) -> ReportResult:
        """
        Build and send the report.

        Never raises: failures are logged, reported by email when possible,
        and returned as a failed ReportResult.
        """
        now_utc = _utc_now(now)
        start = time.monotonic()
        logger.info(f"Weather notification started at {now_utc.isoformat()}")

        try:
            report = await self.build_report(now_utc)

            if dry_run:
                logger.info("Dry run - skipping email")
                return ReportResult(
                    status_code=200,
                    status="previewed",
                    message="Weather report built (dry run)",
                    location=report.location,
                    insufficient_data=report.insufficient_data,
                    duration_ms=int((time.monotonic() - start) * 1000),
                )

            logger.info("Sending email notification...")
            message_id = await self.email_service.send_email(report.subject, report.html, report.text)

            duration_ms = int((time.monotonic() - start) * 1000)
            logger.info(f"Weather notification completed in {duration_ms}ms")
            return ReportResult(
                status_code=200,
                status="sent",
                message="Weather notification sent successfully",
                location=report.location,
                message_id=message_id,
                insufficient_data=report.insufficient_data,
                duration_ms=duration_ms,
            )

        except Exception as e:
            error = e.detail if isinstance(e, AppException) else str(e)
            duration_ms = int((time.monotonic() - start) * 1000)
            logger.error(f"Weather notification failed after {duration_ms}ms: {error}")

            if not dry_run:
                await self._send_error_notification(error, now_utc)

            return ReportResult(
                status_code=500,
                status="failed",
                message="Weather notification failed",
                error=error,
                duration_ms=duration_ms,
            )

    async def _send_error_notification(self, error: str, now_utc: datetime) -> bool:
        """Best-effort email about a failed run. Returns False if it couldn't be sent."""
        offset = self.settings.LOCAL_UTC_OFFSET_HOURS
        if not -12 <= offset <= 14:
            offset = 0.0
        html_body, text_body = get_service_error_email(error, format_local_timestamp(now_utc, offset))
        subject = build_subject(now_utc, offset, error=True)

        try:
            await self.email_service.send_email(subject, html_body, text_body)
        except Exception as e:
            detail = e.detail if isinstance(e, AppException) else str(e)
            logger.error(f"Failed to send error notification via email: {detail}")
            return False

        logger.info("Error notification sent via email")
        return True

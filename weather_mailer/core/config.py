"""
Application configuration using Pydantic Settings.
Loads from environment variables / .env file.
"""

import re
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

from weather_mailer.core.exceptions import ConfigurationException
from weather_mailer.weather.models import AnalysisConfig

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    APP_NAME: str = "Weather Mailer"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # OpenWeatherMap
    OPENWEATHER_API_KEY: str = ""
    OPENWEATHER_BASE_URL: str = "https://api.openweathermap.org/data/2.5"
    FORECAST_COUNT: int = 8  # 24 hours / 3 hours = 8 buckets
    HTTP_TIMEOUT_SECONDS: float = 10.0
    MAX_RETRIES: int = 3
    RETRY_DELAY_SECONDS: float = 1.0

    # Email (AWS SES)
    SENDER_EMAIL: str = ""
    RECIPIENT_EMAIL: str = ""
    AWS_REGION: str = "us-east-1"
    AWS_SES_REGION: str = ""
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None

    # Location & advice thresholds
    LATITUDE: Optional[float] = None
    LONGITUDE: Optional[float] = None
    TEMP_THRESHOLD: float = 30.0
    HIGH_TEMP_THRESHOLD: float = 35.0
    LOCAL_UTC_OFFSET_HOURS: float = 7.0  # Asia/Bangkok

    # Admin trigger endpoint
    ADMIN_API_KEY: str = ""

    # Celery
    CELERY_BROKER_URL: str = "memory://"
    CELERY_QUEUE_PREFIX: str = "weather-mailer-"
    REPORT_HOUR_UTC: int = 23
    REPORT_MINUTE_UTC: int = 0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def ses_region(self) -> str:
        return (self.AWS_SES_REGION or "").strip() or self.AWS_REGION

    def config_errors(self) -> List[str]:
        """Return every problem that would stop a report from being sent."""
        errors = []

        missing = [
            name
            for name in ("OPENWEATHER_API_KEY", "SENDER_EMAIL", "RECIPIENT_EMAIL", "LATITUDE", "LONGITUDE")
            if getattr(self, name) in (None, "")
        ]
        if missing:
            errors.append(f"Missing required environment variables: {', '.join(missing)}")

        if self.SENDER_EMAIL and not EMAIL_REGEX.match(self.SENDER_EMAIL):
            errors.append("Invalid SENDER_EMAIL format.")
        if self.RECIPIENT_EMAIL and not EMAIL_REGEX.match(self.RECIPIENT_EMAIL):
            errors.append("Invalid RECIPIENT_EMAIL format.")

        if self.LATITUDE is not None and not -90 <= self.LATITUDE <= 90:
            errors.append("Invalid LATITUDE value. Must be between -90 and 90.")
        if self.LONGITUDE is not None and not -180 <= self.LONGITUDE <= 180:
            errors.append("Invalid LONGITUDE value. Must be between -180 and 180.")
        if not -12 <= self.LOCAL_UTC_OFFSET_HOURS <= 14:
            errors.append("Invalid LOCAL_UTC_OFFSET_HOURS value. Must be between -12 and 14.")

        return errors

    def validate_for_report(self) -> None:
        """Raise ConfigurationException unless the report can be built and sent."""
        errors = self.config_errors()
        if errors:
            raise ConfigurationException("; ".join(errors))

    def analysis_config(self) -> AnalysisConfig:
        """Explicit analyzer configuration. Call validate_for_report() first."""
        return AnalysisConfig(
            latitude=self.LATITUDE,
            longitude=self.LONGITUDE,
            damp_risk_temp_threshold=self.TEMP_THRESHOLD,
            high_temp_threshold=self.HIGH_TEMP_THRESHOLD,
            utc_offset_hours=self.LOCAL_UTC_OFFSET_HOURS,
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

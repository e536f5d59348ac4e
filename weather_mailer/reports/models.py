"""Report-related models and schemas."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field

from weather_mailer.weather.models import InsufficientDataReason

ReportStatus = Literal["sent", "previewed", "failed"]


class WeatherReport(BaseModel):
    """A rendered report ready to send."""
    subject: str
    text: str
    html: str
    location: str
    forecast_count: int = 0
    insufficient_data: Optional[InsufficientDataReason] = Field(
        None, description="Set when the forecast could not support advice"
    )


class ReportResult(BaseModel):
    """Outcome of one scheduled or manual run."""
    status_code: int
    status: ReportStatus
    message: str
    location: Optional[str] = None
    message_id: Optional[str] = None
    insufficient_data: Optional[InsufficientDataReason] = None
    error: Optional[str] = None
    duration_ms: int = 0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

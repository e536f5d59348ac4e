"""Celery app bootstrap with the daily report beat schedule."""

from __future__ import annotations

import logging

from celery import Celery
from celery.schedules import crontab

from weather_mailer.core.config import get_settings


settings = get_settings()

# httpx logs full request URLs, which include the API key
logging.getLogger("httpx").setLevel(logging.WARNING)

QUEUE_PREFIX = (settings.CELERY_QUEUE_PREFIX or "weather-mailer-").strip()
DEFAULT_QUEUE = "default"

celery_app = Celery(
    "weather_mailer",
    broker=(settings.CELERY_BROKER_URL or "memory://").strip(),
    include=["weather_mailer.worker.tasks"],
)

celery_app.conf.update(
    broker_transport_options={"queue_name_prefix": QUEUE_PREFIX},
    task_default_queue=DEFAULT_QUEUE,
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_acks_late=True,
    worker_prefetch_multiplier=1,
)


# =============================================================================
# Celery Beat Schedule - Periodic Tasks
# =============================================================================

# Default 23:00 UTC = 06:00 in Bangkok (UTC+7), before the day's laundry.
celery_app.conf.beat_schedule = {
    "send-daily-weather-report": {
        "task": "weather_mailer.worker.tasks.send_daily_weather_report",
        "schedule": crontab(hour=settings.REPORT_HOUR_UTC, minute=settings.REPORT_MINUTE_UTC),
        "options": {"queue": DEFAULT_QUEUE},
    },
}

"""Celery tasks (sync)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from weather_mailer.worker.celery_app import celery_app

logger = logging.getLogger(__name__)


def _run_async(coro):
    """Run async function in sync Celery task."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@celery_app.task(name="weather_mailer.worker.tasks.send_daily_weather_report", acks_late=True)
def send_daily_weather_report(dry_run: bool = False) -> Dict[str, Any]:
    """
    Fetch today's forecast and email the laundry & umbrella report.

    Scheduled daily via Celery Beat. The run never raises for report
    failures; they come back in the result with status "failed".

    Returns:
        ReportResult as a JSON-safe dict.
    """
    from weather_mailer.reports.service import ReportService

    logger.info("Starting daily weather report")
    result = _run_async(ReportService().send_daily_report(dry_run=dry_run))

    if result.status == "failed":
        logger.error(f"Daily weather report failed: {result.error}")
    else:
        logger.info(f"Daily weather report {result.status} for {result.location} in {result.duration_ms}ms")

    return result.model_dump(mode="json")

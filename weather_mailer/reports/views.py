"""Weather report API routes."""

from fastapi import APIRouter, Depends, Query

from weather_mailer.core.dependencies import get_report_service, require_admin_api_key
from weather_mailer.reports.models import ReportResult, WeatherReport
from weather_mailer.reports.service import ReportService

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/preview", response_model=WeatherReport)
async def preview_report(
    _: str = Depends(require_admin_api_key),
    service: ReportService = Depends(get_report_service),
):
    """
    Build today's report without sending it.

    Returns the subject plus plain-text and HTML bodies.
    """
    return await service.build_report()


@router.post("/send", response_model=ReportResult)
async def send_report(
    dry_run: bool = Query(False, description="Build the report but skip the email"),
    _: str = Depends(require_admin_api_key),
    service: ReportService = Depends(get_report_service),
):
    """
    Run the daily report now.

    Failures are returned in the body (status "failed") rather than as an HTTP error,
    matching what the scheduled run records.
    """
    return await service.send_daily_report(dry_run=dry_run)

"""
Common dependencies for FastAPI routes.
"""

from fastapi import Header

from weather_mailer.core.config import get_settings
from weather_mailer.core.exceptions import ForbiddenException
from weather_mailer.reports.service import ReportService


def require_admin_api_key(x_admin_api_key: str = Header(default="", alias="X-ADMIN-API-KEY")) -> str:
    """
    Admin auth via API key header.

    If ADMIN_API_KEY is not configured, deny all admin access (fail closed).
    """
    settings = get_settings()
    expected = (settings.ADMIN_API_KEY or "").strip()
    provided = (x_admin_api_key or "").strip()

    if not expected or provided != expected:
        raise ForbiddenException("Admin access denied")
    return "admin_api_key"


def get_report_service() -> ReportService:
    """Report service bound to the current settings. Overridden in tests."""
    return ReportService(get_settings())

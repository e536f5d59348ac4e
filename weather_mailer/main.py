"""
Weather Mailer API - Main application entry point.

Daily laundry & umbrella advice by email.
"""

from fastapi import FastAPI

from weather_mailer.core.config import get_settings
from weather_mailer.reports.views import router as reports_router

settings = get_settings()
API_PREFIX = "/api/v1"


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
## Weather Mailer API

Fetches the next 24 hours of forecast for one location and emails a short report.

### Features

- 👕 **Drying Advice**: Whether laundry can go outside today
- ☔ **Umbrella Advice**: Rain or sun protection
- 🌧️ **Rain Timing**: When rain is expected today and tomorrow

    """,
    docs_url=f"{API_PREFIX}/docs",
    redoc_url=f"{API_PREFIX}/redoc",
)

app.include_router(reports_router, prefix=API_PREFIX)


@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/health", tags=["Health"])
async def health():
    """Configuration check. Lists problems without revealing values."""
    errors = get_settings().config_errors()
    return {
        "status": "healthy" if not errors else "misconfigured",
        "config_errors": errors,
    }

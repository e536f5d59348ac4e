"""
Custom application exceptions.
"""

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)

    def __str__(self) -> str:
        return str(self.detail)


class ForbiddenException(AppException):
    """Forbidden access exception."""

    def __init__(self, detail: str = "Forbidden"):
        super().__init__(detail=detail, status_code=status.HTTP_403_FORBIDDEN)


class ConfigurationException(AppException):
    """Required settings are missing or invalid."""

    def __init__(self, detail: str = "Invalid configuration"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ForecastProviderException(AppException):
    """The forecast provider failed or returned a malformed response."""

    def __init__(self, detail: str = "Failed to fetch weather data"):
        super().__init__(detail=detail, status_code=status.HTTP_502_BAD_GATEWAY)


class EmailDeliveryException(AppException):
    """The email provider rejected or failed to deliver a message."""

    def __init__(self, detail: str = "Failed to send email"):
        super().__init__(detail=detail, status_code=status.HTTP_502_BAD_GATEWAY)

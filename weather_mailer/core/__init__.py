"""Core module - config, exceptions, email."""

from weather_mailer.core.config import get_settings, Settings
from weather_mailer.core.exceptions import (
    AppException,
    ForbiddenException,
    ConfigurationException,
    ForecastProviderException,
    EmailDeliveryException,
)

__all__ = [
    "get_settings",
    "Settings",
    "AppException",
    "ForbiddenException",
    "ConfigurationException",
    "ForecastProviderException",
    "EmailDeliveryException",
]

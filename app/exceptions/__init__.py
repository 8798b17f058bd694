"""Weather service exceptions."""

from .common import (
    GENERIC_FETCH_ERROR,
    WeatherServiceException,
    ExternalAPIException,
    ProviderErrorException,
    ValidationError,
)

__all__ = [
    "GENERIC_FETCH_ERROR",
    "WeatherServiceException",
    "ExternalAPIException",
    "ProviderErrorException",
    "ValidationError",
]

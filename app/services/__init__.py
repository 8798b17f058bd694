"""
Services package initialization.
"""

from app.services.external_api import WeatherAPIClient
from app.services.presentation import bucket_for, bucket_for_hour, upcoming_hours
from app.services.weather_service import WeatherService

__all__ = [
    "WeatherAPIClient",
    "WeatherService",
    "bucket_for",
    "bucket_for_hour",
    "upcoming_hours",
]

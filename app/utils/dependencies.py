"""
FastAPI dependency injection providers.

The weather service lives on the application state for the lifetime of
the process; routes receive it through these providers so tests can swap
it with `app.dependency_overrides`.
"""

from datetime import datetime

from fastapi import Request

from app.services.weather_service import WeatherService


def get_weather_service(request: Request) -> WeatherService:
    """
    Provide the process-wide weather service.

    Args:
        request: Incoming request carrying the application state

    Returns:
        WeatherService: Service created during application startup
    """
    return request.app.state.weather_service


def get_current_time() -> datetime:
    """
    Provide the local wall-clock time used to window the hourly forecast.
    """
    return datetime.now()

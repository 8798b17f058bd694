"""
Common test fixtures and configuration.
"""

import os

# Settings refuse to load without an API key; set one before any app import.
os.environ["WEATHER_API_KEY"] = "test-key"

from unittest.mock import AsyncMock

import pytest

from app.models.weather import WeatherSnapshot


@pytest.fixture
def make_forecast_payload():
    """
    Build a weatherapi.com forecast payload.

    Each forecast day holds 24 hourly entries, 00:00 to 23:00, with a
    temperature of 10 + hour / 2 degrees.

    Returns:
        Callable: factory taking localtime, days and location name
    """

    def _make(localtime="2024-01-01 07:15", days=2, name="London"):
        forecastday = []
        for day in range(days):
            date_str = f"2024-01-{day + 1:02d}"
            forecastday.append(
                {
                    "date": date_str,
                    "hour": [
                        {
                            "time": f"{date_str} {hour:02d}:00",
                            "temp_c": 10 + hour / 2,
                            "condition": {
                                "text": "Clear",
                                "icon": "//cdn.weatherapi.com/weather/64x64/night/113.png",
                                "code": 1000,
                            },
                        }
                        for hour in range(24)
                    ],
                }
            )
        return {
            "location": {
                "name": name,
                "region": "City of London, Greater London",
                "country": "United Kingdom",
                "localtime": localtime,
            },
            "current": {
                "temp_c": 7.5,
                "humidity": 81,
                "feelslike_c": 4.4,
                "wind_kph": 15.1,
                "wind_dir": "SW",
                "condition": {
                    "text": "Partly cloudy",
                    "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
                    "code": 1003,
                },
                "uv": 1.0,
            },
            "forecast": {"forecastday": forecastday},
        }

    return _make


@pytest.fixture
def sample_snapshot(make_forecast_payload):
    """Snapshot for London at 07:15 local time with a two day forecast."""
    return WeatherSnapshot.model_validate(make_forecast_payload())


@pytest.fixture
def mock_api_client():
    """Weather API client whose fetch is an AsyncMock."""
    client = AsyncMock()
    client.fetch_weather = AsyncMock()
    return client

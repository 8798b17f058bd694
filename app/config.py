"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import List

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.

    The weather API key has no default: constructing settings without
    WEATHER_API_KEY raises a validation error at startup.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application settings
    app_name: str = "City Weather Screen"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # External API settings
    weather_api_key: SecretStr
    weather_api_base_url: str = "http://api.weatherapi.com"
    weather_api_timeout: float = 5.0

    # Forecast settings
    forecast_days: int = 2
    hourly_window_size: int = 10

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()

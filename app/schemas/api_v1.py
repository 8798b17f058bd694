"""
This module defines schemas for API version 1.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from app.definitions.backgrounds import BackgroundBucket, ScreenStatus


class SearchRequest(BaseModel):
    city: str = Field("", description="City name; blank input is ignored")


class BackgroundInfo(BaseModel):
    bucket: BackgroundBucket = Field(..., description="Time-of-day bucket")
    image: str = Field(..., description="Background image file name")


class HourlyForecastItem(BaseModel):
    """
    One entry of the hourly strip.
    """

    time: str = Field(..., description="Provider timestamp of the hour")
    time_label: str = Field(..., description="Hour label, e.g. '7:00'")
    icon_url: str = Field(..., description="Condition icon URL")
    condition: str = Field(..., description="Condition description")
    temperature: int = Field(..., description="Rounded temperature in Celsius")


class WeatherView(BaseModel):
    """
    Everything the screen renders for a loaded snapshot.
    """

    city: str = Field(..., description="City name")
    country: str = Field(..., description="Country name")
    icon_url: str = Field(..., description="Current condition icon URL")
    condition: str = Field(..., description="Current condition description")
    temperature: int = Field(..., description="Rounded temperature in Celsius")
    feels_like: int = Field(..., description="Rounded feels like temperature in Celsius")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")
    wind_kph: float = Field(..., ge=0, description="Wind speed in km/h")
    wind_dir: str = Field(..., description="Compass wind direction")
    uv: float = Field(..., ge=0, description="UV index")
    local_time: str = Field(..., description="Local time at the location")
    background: BackgroundInfo
    hourly: List[HourlyForecastItem] = Field(default_factory=list, description="Upcoming hours")


class ScreenStateResponse(BaseModel):
    status: ScreenStatus = Field(..., description="Screen status")
    error: Optional[str] = Field(None, description="Error message when the search failed")
    background: BackgroundInfo = Field(..., description="Background to draw behind the screen")
    weather: Optional[WeatherView] = Field(None, description="Rendered weather when loaded")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="API version")
    timestamp: str = Field(..., description="Current timestamp")

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrozenModel(BaseModel):
    """Provider payloads are read-only once received; unknown fields are dropped."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Condition(FrozenModel):
    text: str = Field(..., description="Condition description")
    icon: str = Field(..., description="Protocol-relative icon URL")


class Location(FrozenModel):
    name: str = Field(..., description="City name")
    country: str = Field(..., description="Country name")
    localtime: str = Field(..., description="Local time as 'YYYY-MM-DD HH:MM'")


class CurrentConditions(FrozenModel):
    temp_c: float = Field(..., description="Temperature in Celsius")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")
    feelslike_c: float = Field(..., description="Feels like temperature in Celsius")
    wind_kph: float = Field(..., ge=0, description="Wind speed in km/h")
    wind_dir: str = Field(..., description="Compass wind direction")
    condition: Condition
    uv: float = Field(..., ge=0, description="UV index")


class HourEntry(FrozenModel):
    time: str = Field(..., description="Forecast hour as 'YYYY-MM-DD HH:MM'")
    temp_c: float = Field(..., description="Temperature in Celsius")
    condition: Condition

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        datetime.fromisoformat(v)
        return v

    @property
    def hour_of_day(self) -> int:
        return datetime.fromisoformat(self.time).hour


class ForecastDay(FrozenModel):
    hour: Tuple[HourEntry, ...] = Field(default_factory=tuple)


class Forecast(FrozenModel):
    forecastday: Tuple[ForecastDay, ...] = Field(default_factory=tuple)


class WeatherSnapshot(FrozenModel):
    """
    Current conditions and hourly forecast for one location at one fetch time.
    """

    location: Location
    current: CurrentConditions
    forecast: Forecast = Field(default_factory=Forecast)


class ProviderErrorDetail(BaseModel):
    code: Optional[int] = None
    message: str

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Provider error message is blank")
        return v


class ProviderErrorResponse(BaseModel):
    error: ProviderErrorDetail

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.definitions.backgrounds import ScreenStatus
from app.models.weather import WeatherSnapshot


class ScreenState(BaseModel):
    """
    The single active state of the weather screen.

    A snapshot is present only when loaded and an error message only when
    failed. States are replaced whole, never edited.
    """

    model_config = ConfigDict(frozen=True)

    status: ScreenStatus = Field(..., description="Current screen status")
    snapshot: Optional[WeatherSnapshot] = Field(None, description="Loaded weather snapshot")
    error: Optional[str] = Field(None, description="Error message shown to the user")

    @model_validator(mode="after")
    def check_payload(self) -> "ScreenState":
        if (self.snapshot is not None) != (self.status == "loaded"):
            raise ValueError("snapshot must be set exactly when status is 'loaded'")
        if (self.error is not None) != (self.status == "failed"):
            raise ValueError("error must be set exactly when status is 'failed'")
        return self

    @classmethod
    def idle(cls) -> "ScreenState":
        return cls(status="idle")

    @classmethod
    def loading(cls) -> "ScreenState":
        return cls(status="loading")

    @classmethod
    def loaded(cls, snapshot: WeatherSnapshot) -> "ScreenState":
        return cls(status="loaded", snapshot=snapshot)

    @classmethod
    def failed(cls, message: str) -> "ScreenState":
        return cls(status="failed", error=message)

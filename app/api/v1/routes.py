"""
This module defines the routes for API version 1.
"""

from datetime import datetime, UTC

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.v1.crud import WeatherViewCRUD
from app.config import get_settings
from app.definitions.backgrounds import ApiVersion
from app.schemas.api_v1 import HealthResponse, ScreenStateResponse, SearchRequest
from app.services.weather_service import WeatherService
from app.utils.dependencies import get_current_time, get_weather_service
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

router = APIRouter(prefix=f"/{ApiVersion.V1.value}", tags=[ApiVersion.V1.value])


@router.get("/state", response_model=ScreenStateResponse)
async def get_state(
    weather_service: WeatherService = Depends(get_weather_service),
    now: datetime = Depends(get_current_time),
) -> ScreenStateResponse:
    """
    Get the current screen state with its rendered weather view.
    """
    return WeatherViewCRUD.transform_state(
        weather_service.state, now, settings.hourly_window_size
    )


@router.post("/search", response_model=ScreenStateResponse)
async def search(
    request: Request,
    body: SearchRequest,
    weather_service: WeatherService = Depends(get_weather_service),
    now: datetime = Depends(get_current_time),
) -> ScreenStateResponse:
    """
    Search weather for a city and return the resulting screen state.

    A blank city is ignored and the unchanged state is returned. Provider
    and network failures are reported in the state, not as HTTP errors.
    """
    try:
        state = await weather_service.search(body.city)
        return WeatherViewCRUD.transform_state(state, now, settings.hourly_window_size)

    except Exception as e:
        logger.error(
            "Error rendering search result",
            extra={
                "event": "api_error",
                "api_version": ApiVersion.V1.value,
                "city": body.city,
                "error": str(e),
                "error_type": type(e).__name__,
                "request_id": request.state.request_id,
            },
        )
        raise HTTPException(
            status_code=500,
            detail={
                "error": "Internal server error",
                "detail": "Failed to render weather data",
                "request_id": request.state.request_id,
            },
        ) from e


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint that returns service status.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
    )

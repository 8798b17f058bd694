from typing import Optional

import httpx

from app.config import get_settings
from app.exceptions import ExternalAPIException, ProviderErrorException
from app.models.weather import ProviderErrorResponse, WeatherSnapshot
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

FORECAST_PATH = "/v1/forecast.json"


class WeatherAPIClient:
    """
    Client for the weatherapi.com forecast endpoint.

    Issues exactly one request per call. There are no retries and no
    timeout beyond the transport's; an in-flight call is never cancelled
    by a later one.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(timeout=settings.weather_api_timeout)
        self.forecast_url = settings.weather_api_base_url.rstrip("/") + FORECAST_PATH

    async def close(self):
        await self.client.aclose()

    def _build_params(self, city: str) -> dict:
        return {
            "key": settings.weather_api_key.get_secret_value(),
            "q": city,
            "days": settings.forecast_days,
            "aqi": "no",
            "alerts": "no",
        }

    async def fetch_weather(self, city: str) -> WeatherSnapshot:
        """
        Fetch current conditions and the hourly forecast for a city.

        Raises:
            ProviderErrorException: the provider rejected the query with a message
            ExternalAPIException: transport failure or unreadable response
        """
        try:
            response = await self.client.get(self.forecast_url, params=self._build_params(city))
        except httpx.HTTPError as e:
            logger.error(
                "Weather API request failed",
                extra={"event": "api_error", "city": city, "error_type": type(e).__name__},
            )
            raise ExternalAPIException() from e

        if not response.is_success:
            raise self._error_from_response(city, response)

        try:
            snapshot = WeatherSnapshot.model_validate(response.json())
        except ValueError as e:
            logger.error(
                "Unreadable weather API response",
                extra={"event": "api_parse_error", "city": city, "error": str(e)},
            )
            raise ExternalAPIException() from e

        logger.info(
            "Weather fetched",
            extra={
                "event": "api_success",
                "city": city,
                "location": snapshot.location.name,
                "forecast_days": len(snapshot.forecast.forecastday),
            },
        )
        return snapshot

    @staticmethod
    def _error_from_response(city: str, response: httpx.Response) -> ExternalAPIException:
        try:
            body = ProviderErrorResponse.model_validate(response.json())
        except ValueError:
            logger.error(
                "Weather API returned an error without a message",
                extra={"event": "api_error", "city": city, "status_code": response.status_code},
            )
            return ExternalAPIException()

        logger.warning(
            "Weather API rejected query",
            extra={
                "event": "provider_error",
                "city": city,
                "status_code": response.status_code,
                "provider_code": body.error.code,
                "error": body.error.message,
            },
        )
        return ProviderErrorException(body.error.message, response.status_code)

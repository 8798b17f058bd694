"""
This module provides the search flow behind the weather screen.
"""

import asyncio

from app.exceptions import GENERIC_FETCH_ERROR, ExternalAPIException
from app.models.screen import ScreenState
from app.services.external_api import WeatherAPIClient
from app.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherService:
    """
    Holds the screen state and drives it through a city search.

    Transitions: Idle/Loaded/Failed -> Loading on a non-blank search, then
    Loading -> Loaded or Failed when the fetch settles or is cancelled. Each transition
    replaces the whole state object.
    """

    def __init__(self, api_client: WeatherAPIClient):
        """
        Initialize weather service with its provider client.
        """
        self.api_client = api_client
        self._state = ScreenState.idle()

    @property
    def state(self) -> ScreenState:
        return self._state

    async def search(self, city: str) -> ScreenState:
        """
        Fetch weather for a city and return the resulting screen state.

        Blank input is ignored: no request is made and the state is
        returned unchanged.
        """
        query = city.strip()
        if not query:
            logger.debug("Blank search ignored", extra={"event": "search_ignored"})
            return self._state

        self._state = ScreenState.loading()
        logger.info("Searching weather", extra={"event": "search_started", "city": query})

        try:
            snapshot = await self.api_client.fetch_weather(query)
        except asyncio.CancelledError:
            self._state = ScreenState.failed(GENERIC_FETCH_ERROR)
            logger.warning(
                "Search cancelled",
                extra={"event": "search_cancelled", "city": query},
            )
            raise
        except ExternalAPIException as e:
            self._state = ScreenState.failed(e.message)
            logger.warning(
                "Search failed",
                extra={
                    "event": "search_failed",
                    "city": query,
                    "error": e.message,
                    "error_type": type(e).__name__,
                },
            )
            return self._state
        except Exception as e:
            self._state = ScreenState.failed(GENERIC_FETCH_ERROR)
            logger.error(
                "Unexpected error during search",
                extra={
                    "event": "search_error",
                    "city": query,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            return self._state

        self._state = ScreenState.loaded(snapshot)
        logger.info(
            "Search succeeded",
            extra={"event": "search_succeeded", "city": query, "location": snapshot.location.name},
        )
        return self._state

from datetime import datetime

from app.definitions.backgrounds import BACKGROUND_IMAGES, DEFAULT_BUCKET, BackgroundBucket
from app.exceptions import ValidationError
from app.models.screen import ScreenState
from app.models.weather import HourEntry, WeatherSnapshot
from app.schemas.api_v1 import (
    BackgroundInfo,
    HourlyForecastItem,
    ScreenStateResponse,
    WeatherView,
)
from app.services.presentation import (
    DEFAULT_WINDOW_SIZE,
    bucket_for,
    icon_url,
    round_half_up,
    upcoming_hours,
)
from app.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeatherViewCRUD:
    """
    Transforms screen state and weather snapshots into the rendered view.
    """

    @staticmethod
    def background_for(snapshot: WeatherSnapshot) -> BackgroundInfo:
        """
        Background for a snapshot; malformed local time falls back to night.
        """
        try:
            bucket = bucket_for(snapshot.location.localtime)
        except ValidationError as e:
            logger.warning(
                "Unreadable local time, using default background",
                extra={
                    "event": "background_fallback",
                    "localtime": snapshot.location.localtime,
                    "error": e.message,
                },
            )
            bucket = DEFAULT_BUCKET
        return WeatherViewCRUD.background(bucket)

    @staticmethod
    def background(bucket: BackgroundBucket) -> BackgroundInfo:
        return BackgroundInfo(bucket=bucket, image=BACKGROUND_IMAGES[bucket])

    @staticmethod
    def transform_hour(entry: HourEntry) -> HourlyForecastItem:
        return HourlyForecastItem(
            time=entry.time,
            time_label=f"{entry.hour_of_day}:00",
            icon_url=icon_url(entry.condition.icon),
            condition=entry.condition.text,
            temperature=round_half_up(entry.temp_c),
        )

    @staticmethod
    def transform_snapshot(
        snapshot: WeatherSnapshot, now: datetime, window_size: int = DEFAULT_WINDOW_SIZE
    ) -> WeatherView:
        """
        Transform a snapshot into the view rendered by the screen.
        """
        current = snapshot.current
        hourly = [
            WeatherViewCRUD.transform_hour(entry)
            for entry in upcoming_hours(snapshot, now, window_size)
        ]

        return WeatherView(
            city=snapshot.location.name,
            country=snapshot.location.country,
            icon_url=icon_url(current.condition.icon),
            condition=current.condition.text,
            temperature=round_half_up(current.temp_c),
            feels_like=round_half_up(current.feelslike_c),
            humidity=current.humidity,
            wind_kph=current.wind_kph,
            wind_dir=current.wind_dir,
            uv=current.uv,
            local_time=snapshot.location.localtime,
            background=WeatherViewCRUD.background_for(snapshot),
            hourly=hourly,
        )

    @staticmethod
    def transform_state(
        state: ScreenState, now: datetime, window_size: int = DEFAULT_WINDOW_SIZE
    ) -> ScreenStateResponse:
        """
        Transform the screen state into its API response.

        The night background is used whenever no snapshot is loaded.
        """
        weather = None
        background = WeatherViewCRUD.background(DEFAULT_BUCKET)
        if state.snapshot is not None:
            weather = WeatherViewCRUD.transform_snapshot(state.snapshot, now, window_size)
            background = weather.background

        return ScreenStateResponse(
            status=state.status,
            error=state.error,
            background=background,
            weather=weather,
        )

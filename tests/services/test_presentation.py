"""
Tests for the presentation module.
"""

from datetime import datetime

import pytest

from app.definitions.backgrounds import BackgroundBucket
from app.exceptions import ValidationError
from app.models.weather import WeatherSnapshot
from app.services.presentation import (
    bucket_for,
    bucket_for_hour,
    icon_url,
    parse_local_hour,
    round_half_up,
    upcoming_hours,
)

EXPECTED_BUCKETS = {
    **{h: BackgroundBucket.NIGHT for h in range(0, 6)},
    **{h: BackgroundBucket.EARLY_MORNING for h in range(6, 9)},
    **{h: BackgroundBucket.MORNING for h in range(9, 12)},
    **{h: BackgroundBucket.AFTERNOON for h in range(12, 17)},
    **{h: BackgroundBucket.EVENING for h in range(17, 20)},
    **{h: BackgroundBucket.NIGHT for h in range(20, 24)},
}


class TestBucketSelection:
    """Test suite for time-of-day background selection."""

    def test_every_hour_has_exactly_one_bucket(self):
        """Hours 0-23 are all covered by the six ranges, with no gaps."""
        assert len(EXPECTED_BUCKETS) == 24
        for hour in range(24):
            assert bucket_for_hour(hour) == EXPECTED_BUCKETS[hour]

    @pytest.mark.parametrize(
        "localtime,expected",
        [
            ("2024-01-01 07:15", BackgroundBucket.EARLY_MORNING),
            ("2024-01-01 23:59", BackgroundBucket.NIGHT),
            ("2024-01-01 0:05", BackgroundBucket.NIGHT),
            ("2024-01-01 5:59", BackgroundBucket.NIGHT),
            ("2024-01-01 6:00", BackgroundBucket.EARLY_MORNING),
            ("2024-01-01 9:00", BackgroundBucket.MORNING),
            ("2024-01-01 11:59", BackgroundBucket.MORNING),
            ("2024-01-01 12:00", BackgroundBucket.AFTERNOON),
            ("2024-01-01 16:59", BackgroundBucket.AFTERNOON),
            ("2024-01-01 17:00", BackgroundBucket.EVENING),
            ("2024-01-01 19:59", BackgroundBucket.EVENING),
            ("2024-01-01 20:00", BackgroundBucket.NIGHT),
        ],
    )
    def test_bucket_boundaries(self, localtime, expected):
        """Interval bounds are half-open: the lower bound belongs to the bucket."""
        assert bucket_for(localtime) == expected

    def test_provider_unpadded_hours(self):
        """weatherapi.com sends single-digit hours without padding."""
        assert parse_local_hour("2024-01-01 7:05") == 7
        assert parse_local_hour("2024-01-01 07:05") == 7

    @pytest.mark.parametrize(
        "localtime",
        [
            "",
            "2024-01-01",
            "2024-01-01 xx:15",
            "2024-01-01 :15",
            "2024-01-01 24:00",
            "2024-01-01 ²:15",
            "2024-01-01 +7:15",
        ],
    )
    def test_malformed_localtime_raises(self, localtime):
        with pytest.raises(ValidationError):
            bucket_for(localtime)

    @pytest.mark.parametrize("hour", [-1, 24])
    def test_hour_out_of_range_raises(self, hour):
        with pytest.raises(ValidationError):
            bucket_for_hour(hour)


class TestUpcomingHours:
    """Test suite for the hourly forecast window."""

    def test_window_starts_at_current_hour(self, sample_snapshot):
        hours = upcoming_hours(sample_snapshot, datetime(2024, 1, 1, 7, 45))

        assert len(hours) == 10
        assert [h.time for h in hours] == [f"2024-01-01 {h:02d}:00" for h in range(7, 17)]

    def test_window_never_exceeds_limit(self, sample_snapshot):
        for hour in range(24):
            assert len(upcoming_hours(sample_snapshot, datetime(2024, 1, 1, hour))) <= 10

    def test_custom_limit(self, sample_snapshot):
        assert len(upcoming_hours(sample_snapshot, datetime(2024, 1, 1, 0), limit=3)) == 3

    def test_source_order_preserved(self, sample_snapshot):
        source = [entry for day in sample_snapshot.forecast.forecastday for entry in day.hour]
        for hour in range(24):
            hours = upcoming_hours(sample_snapshot, datetime(2024, 1, 1, hour))
            positions = [source.index(entry) for entry in hours]
            assert positions == sorted(positions)

    def test_filter_ignores_calendar_date(self, sample_snapshot):
        """
        Late in the day the window continues with the next day's entries at
        or after the same hour, skipping that day's early hours.
        """
        hours = upcoming_hours(sample_snapshot, datetime(2024, 1, 1, 21, 10))

        assert [h.time for h in hours] == [
            "2024-01-01 21:00",
            "2024-01-01 22:00",
            "2024-01-01 23:00",
            "2024-01-02 21:00",
            "2024-01-02 22:00",
            "2024-01-02 23:00",
        ]

    def test_empty_forecast(self, make_forecast_payload):
        snapshot = WeatherSnapshot.model_validate(make_forecast_payload(days=0))

        assert upcoming_hours(snapshot, datetime(2024, 1, 1, 7)) == []


class TestFormatting:
    """Test suite for display formatting helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [(7.5, 8), (7.4, 7), (-7.5, -7), (-7.6, -8), (0.0, 0), (13.49, 13)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_icon_url_adds_scheme(self):
        assert (
            icon_url("//cdn.weatherapi.com/weather/64x64/day/116.png")
            == "https://cdn.weatherapi.com/weather/64x64/day/116.png"
        )

    def test_icon_url_keeps_absolute_url(self):
        assert icon_url("https://example.com/a.png") == "https://example.com/a.png"

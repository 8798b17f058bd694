"""
This module derives display data from a weather snapshot.
"""

import math
from datetime import datetime
from itertools import chain, islice
from typing import List

from app.definitions.backgrounds import BUCKET_HOUR_BOUNDS, BackgroundBucket
from app.exceptions import ValidationError
from app.models.weather import HourEntry, WeatherSnapshot

DEFAULT_WINDOW_SIZE = 10


def bucket_for_hour(hour: int) -> BackgroundBucket:
    """
    Map a local hour (0-23) to its background bucket.
    """
    if not 0 <= hour <= 23:
        raise ValidationError(f"Hour out of range: {hour}")
    for upper_bound, bucket in BUCKET_HOUR_BOUNDS:
        if hour < upper_bound:
            return bucket
    return BackgroundBucket.NIGHT


def parse_local_hour(localtime: str) -> int:
    """
    Extract the hour from the 'HH:MM' token of a 'YYYY-MM-DD HH:MM' string.
    """
    tokens = localtime.split()
    if len(tokens) < 2:
        raise ValidationError(f"Local time has no clock value: {localtime!r}")
    hour_text = tokens[1].split(":")[0]
    # ASCII only: str.isdigit() also accepts superscripts that int() rejects.
    if not (hour_text.isascii() and hour_text.isdigit()):
        raise ValidationError(f"Local time has no parseable hour: {localtime!r}")
    return int(hour_text)


def bucket_for(localtime: str) -> BackgroundBucket:
    """
    Select the background bucket for a location's local time.

    Raises:
        ValidationError: if no hour in 0-23 can be read from localtime
    """
    return bucket_for_hour(parse_local_hour(localtime))


def upcoming_hours(
    snapshot: WeatherSnapshot, now: datetime, limit: int = DEFAULT_WINDOW_SIZE
) -> List[HourEntry]:
    """
    Return up to `limit` forecast hours from the current hour onward.

    Hours of all forecast days are flattened in order and filtered on
    hour-of-day only. Calendar date is not compared, so a later day's entry
    whose hour is >= now.hour is kept even when earlier hours were skipped.
    """
    all_hours = chain.from_iterable(day.hour for day in snapshot.forecast.forecastday)
    upcoming = (entry for entry in all_hours if entry.hour_of_day >= now.hour)
    return list(islice(upcoming, limit))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def icon_url(icon: str) -> str:
    """The provider returns protocol-relative icon URLs ('//cdn...')."""
    if icon.startswith("//"):
        return f"https:{icon}"
    return icon

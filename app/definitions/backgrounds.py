"""
This module defines the display constants for the weather screen.
"""

from enum import Enum
from typing import Dict, Literal


class ApiVersion(Enum):
    V1 = "v1"


ScreenStatus = Literal["idle", "loading", "loaded", "failed"]


class BackgroundBucket(str, Enum):
    """Time-of-day categories driving the background image."""

    EARLY_MORNING = "early_morning"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


# Upper bounds (exclusive) on the local hour, checked in order.
# Hours at or past the last bound fall through to NIGHT.
BUCKET_HOUR_BOUNDS = [
    (6, BackgroundBucket.NIGHT),
    (9, BackgroundBucket.EARLY_MORNING),
    (12, BackgroundBucket.MORNING),
    (17, BackgroundBucket.AFTERNOON),
    (20, BackgroundBucket.EVENING),
]

DEFAULT_BUCKET = BackgroundBucket.NIGHT

BACKGROUND_IMAGES: Dict[BackgroundBucket, str] = {
    BackgroundBucket.EARLY_MORNING: "1.jpg",
    BackgroundBucket.MORNING: "2.jpg",
    BackgroundBucket.AFTERNOON: "3.jpg",
    BackgroundBucket.EVENING: "4.jpg",
    BackgroundBucket.NIGHT: "5.jpg",
}

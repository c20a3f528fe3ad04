"""Display formatting for activity metrics."""

import math
from datetime import datetime
from typing import Any, Optional

NOT_AVAILABLE = "N/A"


def format_duration(seconds: Optional[float]) -> str:
    """Format seconds as "1h 2m 3s", dropping the hour part when it is zero."""
    if seconds is None:
        return NOT_AVAILABLE
    seconds = int(seconds)
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    prefix = f"{h}h " if h > 0 else ""
    return f"{prefix}{m}m {s}s"


def calc_speed(distance: Optional[float], moving_time: Optional[float]) -> Optional[float]:
    """Average speed in km/h, or None when either operand is missing or zero."""
    if not distance or not moving_time:
        return None
    return (distance / 1000) / (moving_time / 3600)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def day_suffix(day: int) -> str:
    if 3 < day < 21:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_date(date_str: Optional[str]) -> str:
    """Format an ISO-8601 timestamp as "3rd April 2025"."""
    if not date_str:
        return ""
    try:
        date = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
    except ValueError:
        return date_str
    return f"{date.day}{day_suffix(date.day)} {date.strftime('%B')} {date.year}"


class ActivityFormatter:
    """Formats activity metrics, memoising the repeated conversions.

    Each renderer owns its own formatter so caches never leak between
    views or tests.
    """

    def __init__(self):
        self._durations: dict[int, str] = {}
        self._dates: dict[str, str] = {}
        self._speeds: dict[tuple[float, float], str] = {}

    def duration(self, seconds: Optional[float]) -> str:
        if seconds is None:
            return NOT_AVAILABLE
        key = int(seconds)
        if key not in self._durations:
            self._durations[key] = format_duration(key)
        return self._durations[key]

    def date(self, date_str: Optional[str]) -> str:
        if not date_str:
            return ""
        if date_str not in self._dates:
            self._dates[date_str] = format_date(date_str)
        return self._dates[date_str]

    def speed(self, distance: Optional[float], moving_time: Optional[float]) -> str:
        if not distance or not moving_time:
            return NOT_AVAILABLE
        key = (distance, moving_time)
        if key not in self._speeds:
            self._speeds[key] = f"{calc_speed(distance, moving_time):.2f} km/h"
        return self._speeds[key]

    def distance(self, meters: Optional[float]) -> str:
        return f"{meters / 1000:.2f} km" if meters else NOT_AVAILABLE

    def elevation(self, meters: Optional[float]) -> str:
        return f"{round_half_up(meters)} m" if meters else NOT_AVAILABLE

    def meta(self, activity: dict[str, Any]) -> dict[str, str]:
        """Display strings for distance, time, speed and elevation."""
        distance = activity.get("distance")
        moving_time = activity.get("moving_time")
        return {
            "distance": self.distance(distance),
            "time": self.duration(moving_time) if moving_time else NOT_AVAILABLE,
            "speed": self.speed(distance, moving_time),
            "elevation": self.elevation(activity.get("total_elevation_gain")),
        }

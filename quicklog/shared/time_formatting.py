"""Human-readable duration and time-of-day formatting."""

from __future__ import annotations

from quicklog.domain.clock import round_half_up, split_hours_minutes


def format_hours_minutes(hours: int, minutes: int) -> str:
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}m"


def format_duration(seconds: int) -> str:
    """``5400 -> "1h 30m"``, ``3600 -> "1h"``, ``90 -> "2m"``."""
    hours, minutes = split_hours_minutes(round_half_up(seconds / 60))
    return format_hours_minutes(hours, minutes)


def format_duration_detailed(seconds: int) -> str:
    return f"{seconds / 3600:.2f}h ({round_half_up(seconds / 60)}m)"


def to_twelve_hour(hour: int) -> tuple[int, str]:
    period = "PM" if hour >= 12 else "AM"
    if hour == 0:
        return 12, period
    if hour > 12:
        return hour - 12, period
    return hour, period


def format_time_of_day(value: str | None) -> str:
    """``"14:05:00" -> "2:05 PM"``; empty or unreadable input gives ``""``."""
    if not value:
        return ""
    hour_text, _, rest = value.partition(":")
    try:
        hour = int(hour_text)
    except ValueError:
        return ""
    minute = rest.split(":")[0]
    display_hour, period = to_twelve_hour(hour)
    return f"{display_hour}:{minute} {period}"


__all__ = [
    "format_duration",
    "format_duration_detailed",
    "format_hours_minutes",
    "format_time_of_day",
    "to_twelve_hour",
]

"""Wall-clock arithmetic for single-day schedules.

Times are ``HH:MM`` or ``HH:MM:SS`` strings. Callers must pass well-formed
values; nothing here guards against non-numeric components.

Minutes are never wrapped at midnight: ``23:30`` plus two hours renders as
``25:30`` so that ordering and overlap arithmetic stay linear within a day.
"""

from __future__ import annotations

import math
import re

TIME_OF_DAY_RE = re.compile(r"^\d{1,2}:\d{2}(?::\d{2})?$")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_time_of_day(value: str | None) -> bool:
    """``HH:MM`` or ``HH:MM:SS``, the shape every other helper here expects."""
    return bool(value and TIME_OF_DAY_RE.match(value))


def time_to_minutes(value: str) -> float:
    parts = value.split(":")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) > 2 and parts[2] else 0
    return hours * 60 + minutes + seconds / 60


def minutes_to_time(minutes: float) -> str:
    hours = int(math.floor(minutes / 60))
    mins = int(math.floor(minutes % 60))
    return f"{hours:02d}:{mins:02d}"


def split_hours_minutes(total_minutes: int) -> tuple[int, int]:
    return total_minutes // 60, total_minutes % 60


__all__ = ["is_time_of_day", "minutes_to_time", "round_half_up", "split_hours_minutes", "time_to_minutes"]

"""Quarter-hour rounding for timer and quick-log durations."""

from __future__ import annotations

import math

from quicklog.domain.clock import round_half_up
from quicklog.domain.constants import ROUNDING_INTERVAL_SECONDS
from quicklog.domain.enums import RoundingMode


def apply_rounding(seconds: int, mode: RoundingMode | str | None) -> int:
    try:
        resolved = RoundingMode(mode) if mode is not None else RoundingMode.NONE
    except ValueError:
        return seconds

    interval = ROUNDING_INTERVAL_SECONDS
    if resolved == RoundingMode.UP_15:
        return math.ceil(seconds / interval) * interval
    if resolved == RoundingMode.DOWN_15:
        return math.floor(seconds / interval) * interval
    if resolved == RoundingMode.NEAREST_15:
        return round_half_up(seconds / interval) * interval
    return seconds


__all__ = ["apply_rounding"]

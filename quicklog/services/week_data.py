"""Week bucketing for backfill views."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from quicklog.domain.enums import TimePeriod
from quicklog.domain.models import TempoWorklog, WeekDay

_WEEK_OFFSET_WEEKS = {
    TimePeriod.THIS: 0,
    TimePeriod.LAST: 1,
    TimePeriod.TWO_WEEKS_AGO: 2,
}


def calculate_week_days(period: TimePeriod | str, today: dt.date) -> list[WeekDay]:
    """Monday-to-Sunday dates of the week ``period`` weeks before ``today``'s."""
    try:
        offset = _WEEK_OFFSET_WEEKS[TimePeriod(period)]
    except ValueError:
        offset = 0
    target = today - dt.timedelta(weeks=offset)
    monday = target - dt.timedelta(days=target.weekday())
    return [WeekDay(date=(monday + dt.timedelta(days=i)).isoformat()) for i in range(7)]


def group_logs_by_date(logs: Iterable[TempoWorklog]) -> dict[str, list[TempoWorklog]]:
    grouped: dict[str, list[TempoWorklog]] = {}
    for log in logs:
        grouped.setdefault(log.start_date, []).append(log)
    return grouped


def total_seconds(logs: Iterable[TempoWorklog]) -> int:
    return sum(log.time_spent_seconds or 0 for log in logs)


__all__ = ["calculate_week_days", "group_logs_by_date", "total_seconds"]

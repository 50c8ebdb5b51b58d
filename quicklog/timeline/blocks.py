"""Time blocks for one calendar day."""

from __future__ import annotations

from collections.abc import Iterable

from quicklog.domain.clock import minutes_to_time, time_to_minutes
from quicklog.domain.constants import DEFAULT_START_TIME, PLANNED_ISSUE_PLACEHOLDER
from quicklog.domain.models import TempoWorklog, TimeBlock


def calculate_end_time(start_time: str, duration_seconds: int) -> str:
    """``("09:00:00", 1800) -> "09:30"``; hours past 24 are not wrapped."""
    return minutes_to_time(time_to_minutes(start_time) + duration_seconds / 60)


def worklog_issue_label(worklog: TempoWorklog) -> str:
    return worklog.issue.key or f"#{worklog.issue.id}"


def worklogs_to_time_blocks(worklogs: Iterable[TempoWorklog]) -> list[TimeBlock]:
    blocks: list[TimeBlock] = []
    for log in worklogs:
        start_time = log.start_time or DEFAULT_START_TIME
        blocks.append(
            TimeBlock(
                start_time=start_time,
                end_time=calculate_end_time(start_time, log.time_spent_seconds),
                duration_seconds=log.time_spent_seconds,
                issue_key=worklog_issue_label(log),
                description=log.description,
                is_planned=False,
            )
        )
    return blocks


def build_planned_block(start_time: str, duration_seconds: int, issue_key: str | None = None) -> TimeBlock:
    return TimeBlock(
        start_time=start_time,
        end_time=calculate_end_time(start_time, duration_seconds),
        duration_seconds=duration_seconds,
        issue_key=issue_key or PLANNED_ISSUE_PLACEHOLDER,
        is_planned=True,
    )


def block_bounds(block: TimeBlock) -> tuple[float, float]:
    return time_to_minutes(block.start_time), time_to_minutes(block.end_time)


def sort_blocks(blocks: list[TimeBlock], planned_block: TimeBlock | None = None) -> list[TimeBlock]:
    """Stable ascending order by start; the planned block goes last among equal starts."""
    combined = [*blocks, planned_block] if planned_block is not None else list(blocks)
    return sorted(combined, key=lambda block: time_to_minutes(block.start_time))


__all__ = [
    "block_bounds",
    "build_planned_block",
    "calculate_end_time",
    "sort_blocks",
    "worklog_issue_label",
    "worklogs_to_time_blocks",
]

"""Day timeline view: logged worklogs plus the entry being planned."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from quicklog.domain.models import DayTimeline, TempoWorklog
from quicklog.infrastructure.logging import StructuredLogger, get_logger
from quicklog.timeline.blocks import build_planned_block, worklogs_to_time_blocks
from quicklog.timeline.conflicts import detect_conflicts, generate_conflict_summary
from quicklog.timeline.render import generate_simple_timeline, generate_visual_timeline


def build_day_timeline(
    worklogs: Iterable[TempoWorklog],
    planned_start: str,
    planned_duration_seconds: int,
    issue_key: str | None = None,
    *,
    visual: bool = False,
    logger: Optional[StructuredLogger] = None,
) -> DayTimeline:
    log = logger or get_logger()
    log.step_start("day_timeline")

    blocks = worklogs_to_time_blocks(worklogs)
    planned = build_planned_block(planned_start, planned_duration_seconds, issue_key)
    conflicts = detect_conflicts([*blocks, planned])
    render = generate_visual_timeline if visual else generate_simple_timeline

    log.step_end("day_timeline", blocks=len(blocks) + 1, conflicts=len(conflicts))
    return DayTimeline(
        blocks=blocks,
        planned_block=planned,
        conflicts=conflicts,
        timeline=render(blocks, planned),
        conflict_summary=generate_conflict_summary(conflicts),
    )


__all__ = ["build_day_timeline"]

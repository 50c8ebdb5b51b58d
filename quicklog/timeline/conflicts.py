"""Pairwise overlap detection across a day's blocks."""

from __future__ import annotations

from quicklog.domain.clock import round_half_up
from quicklog.domain.constants import OVERLAP_MARKER
from quicklog.domain.models import TimeBlock, TimelineConflict
from quicklog.timeline.blocks import block_bounds

NO_CONFLICTS_MESSAGE = "✅ No time conflicts detected"


def detect_conflicts(blocks: list[TimeBlock]) -> list[TimelineConflict]:
    """Every overlapping pair (i < j) in input order; touching blocks do not conflict."""
    conflicts: list[TimelineConflict] = []
    bounds = [block_bounds(block) for block in blocks]
    for i in range(len(blocks)):
        start1, end1 = bounds[i]
        for j in range(i + 1, len(blocks)):
            start2, end2 = bounds[j]
            overlap_start = max(start1, start2)
            overlap_end = min(end1, end2)
            if overlap_start < overlap_end:
                conflicts.append(
                    TimelineConflict(
                        block1=blocks[i],
                        block2=blocks[j],
                        overlap_minutes=overlap_end - overlap_start,
                    )
                )
    return conflicts


def format_overlap(overlap_minutes: float) -> str:
    if overlap_minutes >= 60:
        return f"{overlap_minutes / 60:.1f}h"
    return f"{round_half_up(overlap_minutes)}m"


def generate_conflict_summary(conflicts: list[TimelineConflict]) -> str:
    if not conflicts:
        return NO_CONFLICTS_MESSAGE

    plural = "s" if len(conflicts) > 1 else ""
    lines = [f"{OVERLAP_MARKER}  **{len(conflicts)} conflict{plural} detected:**", ""]
    for conflict in conflicts:
        first, second = conflict.block1, conflict.block2
        lines.append(
            f"• {first.issue_key} ({first.start_time}) overlaps with "
            f"{second.issue_key} ({second.start_time}) by {format_overlap(conflict.overlap_minutes)}"
        )
    return "\n".join(lines) + "\n"


__all__ = ["NO_CONFLICTS_MESSAGE", "detect_conflicts", "format_overlap", "generate_conflict_summary"]

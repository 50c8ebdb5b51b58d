"""Text renderings of a day's schedule."""

from __future__ import annotations

from quicklog.domain.clock import minutes_to_time, round_half_up, split_hours_minutes
from quicklog.domain.constants import (
    DESCRIPTION_PREVIEW_CHARS,
    EXISTING_BLOCK_MARKER,
    OVERLAP_MARKER,
    PLANNED_BLOCK_MARKER,
    VISUAL_END_HOUR,
    VISUAL_SLOT_MINUTES,
    VISUAL_START_HOUR,
)
from quicklog.domain.models import TimeBlock
from quicklog.timeline.blocks import block_bounds, sort_blocks


def _marker(block: TimeBlock) -> str:
    return PLANNED_BLOCK_MARKER if block.is_planned else EXISTING_BLOCK_MARKER


def _preview(description: str) -> str:
    if len(description) > DESCRIPTION_PREVIEW_CHARS:
        return description[:DESCRIPTION_PREVIEW_CHARS] + "..."
    return description


def format_block_duration(duration_seconds: int) -> str:
    hours, minutes = split_hours_minutes(round_half_up(duration_seconds / 60))
    return f"{hours}h {minutes}m" if hours > 0 else f"{minutes}m"


def generate_simple_timeline(blocks: list[TimeBlock], planned_block: TimeBlock | None = None) -> str:
    lines: list[str] = ["**Today's Schedule:**", ""]
    for block in sort_blocks(blocks, planned_block):
        lines.append(
            f"{_marker(block)} {block.start_time} - {block.end_time} "
            f"({format_block_duration(block.duration_seconds)})"
        )
        label = f"   {block.issue_key}"
        if block.description:
            label += f" - {_preview(block.description)}"
        lines.append(label)
        lines.append("")
    return "\n".join(lines) + "\n"


def generate_visual_timeline(blocks: list[TimeBlock], planned_block: TimeBlock | None = None) -> str:
    """Half-hour grid from 06:00 to 20:00 listing the blocks touching each slot."""
    ordered = sort_blocks(blocks, planned_block)
    bounds = [block_bounds(block) for block in ordered]

    lines: list[str] = [f"**Day Timeline** ({VISUAL_START_HOUR}am - {VISUAL_END_HOUR - 12}pm)", ""]
    slot_start = VISUAL_START_HOUR * 60
    while slot_start < VISUAL_END_HOUR * 60:
        slot_end = slot_start + VISUAL_SLOT_MINUTES
        inside = [
            block
            for block, (start, end) in zip(ordered, bounds)
            if start < slot_end and end > slot_start
        ]
        slot_label = minutes_to_time(slot_start)
        if not inside:
            lines.append(f"{slot_label} │")
        else:
            symbols = "".join(_marker(block) for block in inside)
            labels = ", ".join(
                f"{block.issue_key} ({round_half_up(block.duration_seconds / 60)}m)" for block in inside
            )
            indicator = f"{OVERLAP_MARKER} " if len(inside) > 1 else ""
            lines.append(f"{slot_label} │ {indicator}{symbols} {labels}")
        slot_start = slot_end

    lines.extend(
        [
            "",
            "**Legend:**",
            f"{EXISTING_BLOCK_MARKER} Existing worklogs",
            f"{PLANNED_BLOCK_MARKER} New entry (planned)",
            f"{OVERLAP_MARKER}  Overlap detected",
        ]
    )
    return "\n".join(lines) + "\n"


__all__ = ["format_block_duration", "generate_simple_timeline", "generate_visual_timeline"]

"""Day timeline construction, conflict detection and rendering."""

from quicklog.timeline.blocks import build_planned_block, calculate_end_time, worklogs_to_time_blocks
from quicklog.timeline.conflicts import detect_conflicts, generate_conflict_summary
from quicklog.timeline.render import generate_simple_timeline, generate_visual_timeline

__all__ = [
    "build_planned_block",
    "calculate_end_time",
    "detect_conflicts",
    "generate_conflict_summary",
    "generate_simple_timeline",
    "generate_visual_timeline",
    "worklogs_to_time_blocks",
]

"""Application services composing the parser, timeline and stores."""

from quicklog.services.quick_log import preview_quick_log, require_valid_entry
from quicklog.services.rounding import apply_rounding
from quicklog.services.timeline_service import build_day_timeline
from quicklog.services.timer import TimerNotifier, TimerService, parse_notify_hours, timer_status

__all__ = [
    "TimerNotifier",
    "TimerService",
    "apply_rounding",
    "build_day_timeline",
    "parse_notify_hours",
    "preview_quick_log",
    "require_valid_entry",
    "timer_status",
]

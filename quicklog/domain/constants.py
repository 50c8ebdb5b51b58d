"""Domain constants shared by deterministic logic."""

ISSUE_KEY_PATTERN = r"^[A-Z][A-Z0-9]+-\d+$"

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
MINUTES_PER_DAY = 24 * 60
MAX_ENTRY_SECONDS = 24 * SECONDS_PER_HOUR

DEFAULT_START_TIME = "09:00:00"
PLANNED_ISSUE_PLACEHOLDER = "(Select issue)"
DESCRIPTION_PREVIEW_CHARS = 40

ROUNDING_INTERVAL_SECONDS = 900

EXISTING_BLOCK_MARKER = "\U0001f7e9"
PLANNED_BLOCK_MARKER = "\U0001f7e6"
OVERLAP_MARKER = "⚠️"

VISUAL_START_HOUR = 6
VISUAL_END_HOUR = 20
VISUAL_SLOT_MINUTES = 30

GETTING_LONG_TIMER_HOURS = 2.0
LONG_TIMER_HOURS = 4.0
VERY_LONG_TIMER_HOURS = 8.0
DEFAULT_TIMER_NOTIFY_AT = "1,4,8"
TIMER_NOTIFY_COOLDOWN_SECONDS = 60.0

"""Natural-language time entries: ``ABC-123 2h30m @ 2pm standup``."""

from __future__ import annotations

import re

from quicklog.domain.constants import ISSUE_KEY_PATTERN, MAX_ENTRY_SECONDS
from quicklog.domain.models import ParsedTimeEntry
from quicklog.parsing.regex_extractors import (
    extract_description,
    extract_duration,
    extract_issue_key,
    extract_start_time,
)
from quicklog.shared.time_formatting import format_hours_minutes, to_twelve_hour

_STRICT_ISSUE_KEY_RE = re.compile(ISSUE_KEY_PATTERN, re.IGNORECASE)

PARSE_HINT = "Could not parse input. Format: ISSUE-123 2h description or ISSUE-123 30m @ 9am description"
INVALID_ISSUE_KEY = "Invalid issue key format. Expected: ABC-123"
INVALID_DURATION = "Invalid duration. Use formats like: 2h, 30m, 2h30m, 1.5h"
DURATION_TOO_LONG = "Duration cannot exceed 24 hours"


def parse_time_entry(text: str | None) -> ParsedTimeEntry | None:
    """Parse one line of free text; ``None`` means "keep typing", not an error."""
    if not text or not text.strip():
        return None

    issue_key = extract_issue_key(text)
    if not issue_key:
        return None

    duration_seconds = extract_duration(text)
    if not duration_seconds or duration_seconds <= 0:
        return None

    return ParsedTimeEntry(
        issue_key=issue_key,
        duration_seconds=duration_seconds,
        start_time=extract_start_time(text),
        description=extract_description(text) or None,
    )


def validate_parsed_entry(entry: ParsedTimeEntry | None) -> str | None:
    if entry is None:
        return PARSE_HINT
    if not entry.issue_key or not _STRICT_ISSUE_KEY_RE.match(entry.issue_key):
        return INVALID_ISSUE_KEY
    if not entry.duration_seconds or entry.duration_seconds <= 0:
        return INVALID_DURATION
    if entry.duration_seconds > MAX_ENTRY_SECONDS:
        return DURATION_TOO_LONG
    return None


def format_parsed_entry(entry: ParsedTimeEntry) -> str:
    hours = entry.duration_seconds // 3600
    minutes = (entry.duration_seconds % 3600) // 60
    line = f"{entry.issue_key}: {format_hours_minutes(hours, minutes)}"

    if entry.start_time:
        hour_text, minute_text = entry.start_time.split(":")[:2]
        display_hour, period = to_twelve_hour(int(hour_text))
        line += f" @ {display_hour}:{minute_text} {period}"

    if entry.description:
        line += f" - {entry.description}"
    return line


__all__ = [
    "DURATION_TOO_LONG",
    "INVALID_DURATION",
    "INVALID_ISSUE_KEY",
    "PARSE_HINT",
    "format_parsed_entry",
    "parse_time_entry",
    "validate_parsed_entry",
]

"""Regex extraction rules for free-text time entries.

Each rule is a pure function over the raw input so it can be exercised on its
own. ``parse_time_entry`` in ``quicklog.parsing.time_entry`` composes them.
"""

from __future__ import annotations

import re

from quicklog.domain.clock import round_half_up
from quicklog.domain.constants import MAX_ENTRY_SECONDS

# ── token patterns ────────────────────────────

ISSUE_KEY_RE = re.compile(r"\b([A-Z][A-Z0-9]+-\d+)\b", re.IGNORECASE)
AT_TIME_RE = re.compile(r"@\s*(\d{1,2})(?::(\d{2}))?(?:\s*(am|pm)\b)?", re.IGNORECASE)

# A unit must not run into another letter, so "2h meeting" is "2h" and not "2h m".
_HOURS_UNIT = r"h(?:ours?|rs?)?(?![a-z])"
_MINUTES_UNIT = r"m(?:in(?:ute)?s?)?(?![a-z])"

HOURS_MINUTES_RE = re.compile(
    rf"(\d+(?:\.\d+)?)\s*h(?:ours?|rs?)?\s*(\d+)?\s*{_MINUTES_UNIT}", re.IGNORECASE
)
HOURS_ONLY_RE = re.compile(rf"(\d+(?:\.\d+)?)\s*{_HOURS_UNIT}", re.IGNORECASE)
MINUTES_ONLY_RE = re.compile(rf"(\d+)\s*{_MINUTES_UNIT}", re.IGNORECASE)

OVERSIZED_DURATION_SECONDS = MAX_ENTRY_SECONDS + 1

_LEADING_SEPARATOR_RE = re.compile(r"^[-–—,;:.]\s*")


def strip_issue_keys(text: str) -> str:
    return ISSUE_KEY_RE.sub("", text)


def strip_at_time(text: str) -> str:
    return AT_TIME_RE.sub("", text)


def extract_issue_key(text: str) -> str | None:
    """Return the first issue-key-shaped token, uppercased."""
    m = ISSUE_KEY_RE.search(text)
    return m.group(1).upper() if m else None


def extract_duration(text: str) -> int | None:
    """Return the duration in seconds, or ``None`` when no duration token exists.

    Issue keys and the ``@time`` token are removed first so their digits are
    never read as hours or minutes. Combined ``2h30m`` wins over hours-only,
    which wins over minutes-only. A number too large to convert reads as
    just over one day, so validation reports it as too long.
    """
    cleaned = strip_at_time(strip_issue_keys(text))
    try:
        return _read_duration(cleaned)
    except (OverflowError, ValueError):
        return OVERSIZED_DURATION_SECONDS


def _read_duration(cleaned: str) -> int | None:
    m = HOURS_MINUTES_RE.search(cleaned)
    if m:
        hours = float(m.group(1))
        minutes = int(m.group(2)) if m.group(2) else 0
        return round_half_up(hours * 3600 + minutes * 60)

    m = HOURS_ONLY_RE.search(cleaned)
    if m:
        return round_half_up(float(m.group(1)) * 3600)

    m = MINUTES_ONLY_RE.search(cleaned)
    if m:
        return int(m.group(1)) * 60

    return None


def extract_start_time(text: str) -> str | None:
    """Read ``@ H[:MM] [am|pm]`` into ``HH:MM:00``; out-of-range values give ``None``."""
    m = AT_TIME_RE.search(text)
    if not m:
        return None

    hours = int(m.group(1))
    minutes = int(m.group(2)) if m.group(2) else 0
    meridiem = (m.group(3) or "").lower()

    if meridiem == "pm" and hours < 12:
        hours += 12
    elif meridiem == "am" and hours == 12:
        hours = 0

    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return f"{hours:02d}:{minutes:02d}:00"


def extract_description(text: str) -> str:
    """Whatever remains once keys, durations and the start time are removed."""
    remaining = strip_issue_keys(text)
    remaining = HOURS_MINUTES_RE.sub("", remaining)
    remaining = HOURS_ONLY_RE.sub("", remaining)
    remaining = MINUTES_ONLY_RE.sub("", remaining)
    remaining = strip_at_time(remaining)
    remaining = remaining.strip()
    return _LEADING_SEPARATOR_RE.sub("", remaining, count=1)


__all__ = [
    "AT_TIME_RE",
    "ISSUE_KEY_RE",
    "extract_description",
    "extract_duration",
    "extract_issue_key",
    "extract_start_time",
    "strip_at_time",
    "strip_issue_keys",
]

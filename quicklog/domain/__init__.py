"""Domain package exports."""

from quicklog.domain.constants import (
    DEFAULT_START_TIME,
    DESCRIPTION_PREVIEW_CHARS,
    ISSUE_KEY_PATTERN,
    MAX_ENTRY_SECONDS,
    PLANNED_ISSUE_PLACEHOLDER,
    ROUNDING_INTERVAL_SECONDS,
)
from quicklog.domain.enums import Confidence, ReferenceSource, RoundingMode, Severity, TimePeriod, TimerStatus
from quicklog.domain.exceptions import DomainError, InvalidTimeEntry, InvalidWorklogData, TimerAlreadyRunning
from quicklog.domain.models import (
    DayTimeline,
    GitHubCommit,
    GitHubPullRequest,
    IssueWorkStats,
    JiraIssueReference,
    ParsedTimeEntry,
    QuickLogPreview,
    TempoWorklog,
    TimeBlock,
    TimelineConflict,
    TimerEntry,
    ValidationIssue,
    WeekDay,
    WorklogIssue,
    WorklogPattern,
)

__all__ = [
    "DayTimeline",
    "DomainError",
    "GitHubCommit",
    "GitHubPullRequest",
    "InvalidTimeEntry",
    "InvalidWorklogData",
    "IssueWorkStats",
    "JiraIssueReference",
    "ParsedTimeEntry",
    "QuickLogPreview",
    "TempoWorklog",
    "TimeBlock",
    "TimelineConflict",
    "TimerAlreadyRunning",
    "TimerEntry",
    "ValidationIssue",
    "WeekDay",
    "WorklogIssue",
    "WorklogPattern",
    "Confidence",
    "ReferenceSource",
    "RoundingMode",
    "Severity",
    "TimePeriod",
    "TimerStatus",
    "DEFAULT_START_TIME",
    "DESCRIPTION_PREVIEW_CHARS",
    "ISSUE_KEY_PATTERN",
    "MAX_ENTRY_SECONDS",
    "PLANNED_ISSUE_PLACEHOLDER",
    "ROUNDING_INTERVAL_SECONDS",
]

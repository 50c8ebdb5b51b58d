"""Domain enums."""

from enum import Enum


class RoundingMode(str, Enum):
    NONE = "none"
    UP_15 = "up15"
    DOWN_15 = "down15"
    NEAREST_15 = "nearest15"


class ReferenceSource(str, Enum):
    PR_TITLE = "pr-title"
    PR_BODY = "pr-body"
    PR_BRANCH = "pr-branch"
    COMMIT_MESSAGE = "commit-message"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TimePeriod(str, Enum):
    THIS = "this"
    LAST = "last"
    TWO_WEEKS_AGO = "twoWeeksAgo"


class TimerStatus(str, Enum):
    ACTIVE = "active"
    GETTING_LONG = "getting_long"
    LONG = "long"
    VERY_LONG = "very_long"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

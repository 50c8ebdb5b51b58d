"""Issue-key validator shared by every entry path."""

from __future__ import annotations

import re

from quicklog.domain.constants import ISSUE_KEY_PATTERN
from quicklog.domain.enums import Severity
from quicklog.domain.models import ValidationIssue

_ISSUE_KEY_RE = re.compile(ISSUE_KEY_PATTERN, re.IGNORECASE)


def validate_issue_key(key: str) -> bool:
    return bool(_ISSUE_KEY_RE.match(key.strip()))


def get_issue_key_error(key: str) -> str | None:
    if not key.strip():
        return "Issue key is required"
    if not validate_issue_key(key):
        return "Invalid issue key format (expected: ABC-123)"
    return None


def check_issue_key(key: str) -> list[ValidationIssue]:
    if not key.strip():
        return [ValidationIssue(code="ISSUE_KEY_MISSING", severity=Severity.HIGH, message="Issue key is required")]
    if not validate_issue_key(key):
        return [
            ValidationIssue(
                code="ISSUE_KEY_INVALID",
                severity=Severity.HIGH,
                message=f"{key.strip()} is not an issue key (expected: ABC-123)",
            )
        ]
    return []

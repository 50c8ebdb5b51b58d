"""Validator orchestration."""

from __future__ import annotations

from quicklog.domain.models import ValidationIssue
from quicklog.validators.duration_validator import check_duration, validate_duration
from quicklog.validators.issue_key_validator import check_issue_key, get_issue_key_error, validate_issue_key


def run_entry_validators(issue_key: str, duration_seconds: int) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    issues.extend(check_issue_key(issue_key))
    issues.extend(check_duration(duration_seconds))
    return issues


__all__ = [
    "check_duration",
    "check_issue_key",
    "get_issue_key_error",
    "run_entry_validators",
    "validate_duration",
    "validate_issue_key",
]

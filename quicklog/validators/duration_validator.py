"""Duration validator: positive and no longer than one day."""

from __future__ import annotations

from quicklog.domain.constants import MAX_ENTRY_SECONDS
from quicklog.domain.enums import Severity
from quicklog.domain.models import ValidationIssue


def validate_duration(seconds: int) -> str | None:
    if seconds <= 0:
        return "Duration must be greater than 0"
    if seconds > MAX_ENTRY_SECONDS:
        return "Duration cannot exceed 24 hours"
    return None


def check_duration(seconds: int) -> list[ValidationIssue]:
    if seconds <= 0:
        return [
            ValidationIssue(
                code="DURATION_NOT_POSITIVE",
                severity=Severity.HIGH,
                message="Duration must be greater than 0",
            )
        ]
    if seconds > MAX_ENTRY_SECONDS:
        return [
            ValidationIssue(
                code="DURATION_TOO_LONG",
                severity=Severity.HIGH,
                message=f"Duration {seconds / 3600:.1f}h exceeds limit 24.0h",
            )
        ]
    return []

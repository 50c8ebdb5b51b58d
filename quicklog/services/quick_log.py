"""Quick-log preview: what the entry box shows while the user types."""

from __future__ import annotations

from typing import Optional

from quicklog.domain.enums import RoundingMode
from quicklog.domain.exceptions import InvalidTimeEntry
from quicklog.domain.models import ParsedTimeEntry, QuickLogPreview
from quicklog.infrastructure.logging import StructuredLogger, get_logger
from quicklog.parsing.time_entry import format_parsed_entry, parse_time_entry, validate_parsed_entry
from quicklog.services.rounding import apply_rounding


def preview_quick_log(
    text: str,
    *,
    rounding_mode: RoundingMode | str | None = None,
    logger: Optional[StructuredLogger] = None,
) -> QuickLogPreview:
    log = logger or get_logger()
    entry = parse_time_entry(text)
    if entry is not None and rounding_mode:
        rounded = apply_rounding(entry.duration_seconds, rounding_mode)
        if rounded > 0 and rounded != entry.duration_seconds:
            entry = entry.model_copy(update={"duration_seconds": rounded})

    error = validate_parsed_entry(entry)
    display = format_parsed_entry(entry) if entry is not None else ""
    log.event(
        "quick_log_preview",
        parsed=entry is not None,
        valid=error is None,
        issue_key=entry.issue_key if entry else None,
        duration_seconds=entry.duration_seconds if entry else None,
    )
    return QuickLogPreview(text=text, entry=entry, error=error, display=display)


def require_valid_entry(text: str, *, rounding_mode: RoundingMode | str | None = None) -> ParsedTimeEntry:
    """Submit path: the parsed entry, or ``InvalidTimeEntry`` carrying the validation message."""
    preview = preview_quick_log(text, rounding_mode=rounding_mode)
    if preview.entry is None or preview.error is not None:
        raise InvalidTimeEntry(preview.error or "Could not parse input")
    return preview.entry


__all__ = ["preview_quick_log", "require_valid_entry"]

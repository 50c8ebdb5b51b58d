"""Work-pattern statistics over past weeks of worklogs.

Used to suggest which issues to backfill when no AI provider is configured.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from quicklog.domain.enums import Confidence
from quicklog.domain.models import IssueWorkStats, TempoWorklog, WorklogPattern


def summarize_issue_stats(
    past_weeks: Iterable[Iterable[TempoWorklog]],
    *,
    issue_keys_by_id: Mapping[int, str] | None = None,
) -> list[IssueWorkStats]:
    """Per-issue counts, most frequently worked first.

    Worklogs without an issue key are resolved through ``issue_keys_by_id``
    and skipped when the id is unknown.
    """
    known = dict(issue_keys_by_id or {})
    stats: dict[str, IssueWorkStats] = {}
    for week in past_weeks:
        for log in week:
            key = log.issue.key or known.get(log.issue.id)
            if not key:
                continue
            current = stats.get(key)
            if current is None:
                current = IssueWorkStats(issue_key=key, last_date=log.start_date)
                stats[key] = current
            current.count += 1
            current.total_seconds += log.time_spent_seconds or 0
            if log.description:
                current.descriptions.append(log.description)
            if log.start_date > current.last_date:
                current.last_date = log.start_date
    return sorted(stats.values(), key=lambda row: row.count, reverse=True)


def fallback_patterns(
    stats: list[IssueWorkStats],
    *,
    weeks: int,
    limit: int = 5,
    summaries: Mapping[str, str] | None = None,
) -> list[WorklogPattern]:
    summaries = summaries or {}
    patterns: list[WorklogPattern] = []
    for row in stats[:limit]:
        patterns.append(
            WorklogPattern(
                issue_key=row.issue_key,
                summary=summaries.get(row.issue_key, row.issue_key),
                typical_duration=row.average_seconds,
                frequency=row.count,
                last_worked=row.last_date,
                confidence=Confidence.MEDIUM,
                reasoning=f"Worked on {row.count} times in past {weeks} weeks",
            )
        )
    return patterns


__all__ = ["fallback_patterns", "summarize_issue_stats"]

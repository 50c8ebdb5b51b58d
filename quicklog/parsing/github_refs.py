"""Jira issue references mined from GitHub pull requests and commits."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Optional

from quicklog.domain.enums import ReferenceSource
from quicklog.domain.models import GitHubCommit, GitHubPullRequest, JiraIssueReference

# Stricter than the entry parser: uppercase project keys of two or more letters.
JIRA_KEY_RE = re.compile(r"\b[A-Z]{2,}-\d+\b")

_RELEVANCE_ORDER = (
    ReferenceSource.PR_TITLE,
    ReferenceSource.PR_BRANCH,
    ReferenceSource.PR_BODY,
    ReferenceSource.COMMIT_MESSAGE,
)


def extract_jira_keys(text: str | None) -> list[str]:
    """Unique issue keys in first-seen order."""
    if not text:
        return []
    return list(dict.fromkeys(JIRA_KEY_RE.findall(text)))


def _pr_reference(pr: GitHubPullRequest, key: str, source: ReferenceSource) -> JiraIssueReference:
    return JiraIssueReference(
        issue_key=key,
        source=source,
        pr_number=pr.number,
        pr_title=pr.title,
        pr_url=pr.html_url,
        date=pr.merged_at or pr.created_at,
    )


def extract_jira_from_pr(pr: GitHubPullRequest) -> list[JiraIssueReference]:
    references: list[JiraIssueReference] = []
    seen: set[str] = set()

    for source, text in (
        (ReferenceSource.PR_TITLE, pr.title),
        (ReferenceSource.PR_BODY, pr.body),
        (ReferenceSource.PR_BRANCH, pr.head.ref),
    ):
        for key in extract_jira_keys(text):
            if key in seen:
                continue
            seen.add(key)
            references.append(_pr_reference(pr, key, source))
    return references


def extract_jira_from_commits(commits: Iterable[GitHubCommit]) -> list[JiraIssueReference]:
    references: list[JiraIssueReference] = []
    for commit in commits:
        for key in extract_jira_keys(commit.commit.message):
            references.append(
                JiraIssueReference(
                    issue_key=key,
                    source=ReferenceSource.COMMIT_MESSAGE,
                    commit_sha=commit.sha,
                    commit_message=commit.commit.message,
                    date=commit.commit.author.date,
                )
            )
    return references


def group_jira_references(references: Iterable[JiraIssueReference]) -> dict[str, list[JiraIssueReference]]:
    grouped: dict[str, list[JiraIssueReference]] = {}
    for ref in references:
        grouped.setdefault(ref.issue_key, []).append(ref)
    return grouped


def get_most_relevant_reference(references: list[JiraIssueReference]) -> Optional[JiraIssueReference]:
    if not references:
        return None
    for source in _RELEVANCE_ORDER:
        for ref in references:
            if ref.source == source:
                return ref
    return references[0]


def format_jira_reference(ref: JiraIssueReference) -> str:
    if ref.source == ReferenceSource.PR_TITLE:
        return f"{ref.issue_key} from PR #{ref.pr_number}: {ref.pr_title}"
    if ref.source == ReferenceSource.PR_BRANCH:
        return f"{ref.issue_key} from PR #{ref.pr_number} branch"
    if ref.source == ReferenceSource.PR_BODY:
        return f"{ref.issue_key} mentioned in PR #{ref.pr_number}"
    if ref.source == ReferenceSource.COMMIT_MESSAGE:
        return f"{ref.issue_key} from commit {(ref.commit_sha or '')[:7]}"
    return ref.issue_key


__all__ = [
    "extract_jira_from_commits",
    "extract_jira_from_pr",
    "extract_jira_keys",
    "format_jira_reference",
    "get_most_relevant_reference",
    "group_jira_references",
]

"""Deterministic parsing helpers."""

from quicklog.parsing.github_refs import (
    extract_jira_from_commits,
    extract_jira_from_pr,
    extract_jira_keys,
    format_jira_reference,
    get_most_relevant_reference,
    group_jira_references,
)
from quicklog.parsing.time_entry import format_parsed_entry, parse_time_entry, validate_parsed_entry

__all__ = [
    "parse_time_entry",
    "validate_parsed_entry",
    "format_parsed_entry",
    "extract_jira_keys",
    "extract_jira_from_pr",
    "extract_jira_from_commits",
    "group_jira_references",
    "get_most_relevant_reference",
    "format_jira_reference",
]

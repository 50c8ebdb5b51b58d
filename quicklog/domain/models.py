"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from quicklog.domain.enums import Confidence, ReferenceSource, Severity


class ParsedTimeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    issue_key: str
    duration_seconds: int = Field(gt=0)
    start_time: Optional[str] = None
    description: Optional[str] = None


class WorklogIssue(BaseModel):
    id: int
    key: Optional[str] = None


class TempoWorklog(BaseModel):
    """A worklog as returned by the Tempo API (camelCase aliases accepted)."""

    model_config = ConfigDict(populate_by_name=True)

    tempo_worklog_id: Optional[int] = Field(default=None, alias="tempoWorklogId")
    issue: WorklogIssue
    time_spent_seconds: int = Field(default=0, alias="timeSpentSeconds")
    start_date: str = Field(default="", alias="startDate")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    description: Optional[str] = None


class TimeBlock(BaseModel):
    start_time: str
    end_time: str
    duration_seconds: int = Field(default=0, ge=0)
    issue_key: str
    description: Optional[str] = None
    is_planned: bool = False


class TimelineConflict(BaseModel):
    block1: TimeBlock
    block2: TimeBlock
    overlap_minutes: float = Field(gt=0)


class DayTimeline(BaseModel):
    blocks: list[TimeBlock] = Field(default_factory=list)
    planned_block: Optional[TimeBlock] = None
    conflicts: list[TimelineConflict] = Field(default_factory=list)
    timeline: str = ""
    conflict_summary: str = ""

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


class QuickLogPreview(BaseModel):
    text: str = ""
    entry: Optional[ParsedTimeEntry] = None
    error: Optional[str] = None
    display: str = ""

    @property
    def is_valid(self) -> bool:
        return self.entry is not None and self.error is None


class ValidationIssue(BaseModel):
    code: str
    severity: Severity = Severity.MEDIUM
    message: str = ""


class TimerEntry(BaseModel):
    issue_key: str
    issue_id: str
    description: Optional[str] = None
    start: str
    work_type_value: str = ""


class GitHubBranch(BaseModel):
    ref: str = ""


class GitHubPullRequest(BaseModel):
    number: int
    title: str = ""
    body: Optional[str] = None
    html_url: str = ""
    created_at: str = ""
    merged_at: Optional[str] = None
    head: GitHubBranch = Field(default_factory=GitHubBranch)


class GitHubCommitAuthor(BaseModel):
    date: str = ""


class GitHubCommitDetail(BaseModel):
    message: str = ""
    author: GitHubCommitAuthor = Field(default_factory=GitHubCommitAuthor)


class GitHubCommit(BaseModel):
    sha: str
    commit: GitHubCommitDetail = Field(default_factory=GitHubCommitDetail)


class JiraIssueReference(BaseModel):
    issue_key: str
    source: ReferenceSource
    pr_number: Optional[int] = None
    pr_title: Optional[str] = None
    pr_url: Optional[str] = None
    commit_sha: Optional[str] = None
    commit_message: Optional[str] = None
    date: Optional[str] = None


class IssueWorkStats(BaseModel):
    issue_key: str
    count: int = 0
    total_seconds: int = 0
    last_date: str = ""
    descriptions: list[str] = Field(default_factory=list)

    @property
    def average_seconds(self) -> int:
        if self.count == 0:
            return 0
        return int(self.total_seconds / self.count + 0.5)


class WorklogPattern(BaseModel):
    issue_key: str
    summary: str = ""
    typical_duration: int = 3600
    frequency: int = 1
    last_worked: str = ""
    confidence: Confidence = Confidence.MEDIUM
    reasoning: str = ""


class WeekDay(BaseModel):
    date: str

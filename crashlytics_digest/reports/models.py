"""Pydantic models for crash report rows and generated reports.

The CSV exports come from the Crashlytics issue sheet. Two layouts exist:
the "new" sheet carries the console URL of each issue, the "old" sheet
does not.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IssueRecord(BaseModel):
    """One crash issue as written to the daily JSON report.

    Field aliases are the camelCase keys consumed by the monitoring dashboard.
    """

    model_config = ConfigDict(populate_by_name=True)

    issue_id: str = Field(
        "", alias="issueId", description="Issue id taken from the /issues/ URL path"
    )
    url: str = Field("", description="Console URL without its query string")
    title: str = Field(..., description="Crash event title (required)")
    sub_title: str = Field("", alias="subTitle", description="Always empty")
    description: str = Field("", description="Free text, may span several lines")
    jira_link: str = Field(
        "", alias="jiraLink", description="Ticket URL, or empty if no ticket"
    )
    min_version: str | None = Field(
        None, alias="minVersion", description="Not tracked by the sheet"
    )
    latest_version: str = Field(
        "", alias="latestVersion", description="Version expected to fix the crash"
    )
    event_count_in_24: int = Field(0, alias="eventCountIn24")
    user_count_in_24: int = Field(0, alias="userCountIn24")
    event_count_in_90_days: int = Field(0, alias="eventCountIn90Days")
    user_count_in_90_days: int = Field(0, alias="userCountIn90Days")


class OldIssueRow(BaseModel):
    """Row of the "old" sheet (8 columns, no URL)."""

    row_index: int = Field(..., description="0-based CSV row position, header is 0")
    title: str
    description: str
    users_24h: str
    events_24h: str
    users_90d: str
    events_90d: str
    resolution_version: str
    jira_ticket: str


class NewIssueRow(OldIssueRow):
    """Row of the "new" sheet (9 columns, URL in second position)."""

    url: str


class ReportKind(str, Enum):
    """Kind of generated report, doubles as the file suffix."""

    TEXT = "txt"
    JSON = "json"


class WriteMode(str, Enum):
    """How a report is written when today's file already exists."""

    REPLACE = "replace"
    APPEND = "append"


class ReportStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class ReportResult(BaseModel):
    """Outcome of a single report generation."""

    kind: ReportKind
    status: ReportStatus
    path: Path | None = Field(None, description="Written file, if any")
    entry_count: int = Field(0, description="Blocks or records written")
    error: str | None = Field(None, description="Failure reason")

    @property
    def ok(self) -> bool:
        return self.status == ReportStatus.SUCCESS

    @classmethod
    def success(cls, kind: ReportKind, path: Path, entry_count: int) -> "ReportResult":
        return cls(
            kind=kind, status=ReportStatus.SUCCESS, path=path, entry_count=entry_count
        )

    @classmethod
    def failure(cls, kind: ReportKind, error: str) -> "ReportResult":
        return cls(kind=kind, status=ReportStatus.FAILURE, error=error)

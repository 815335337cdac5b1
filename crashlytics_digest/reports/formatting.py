"""Formatting of crash rows into digest text and JSON records."""

import re

from .models import IssueRecord, NewIssueRow, OldIssueRow

DEFAULT_JIRA_BASE_URL = "https://balso.atlassian.net/browse/"

NEW_SECTION_HEADING = "New reports (last 24 hours):\n"
OLD_SECTION_HEADING = "\nExisting reports (last 24 hours):\n"
BLOCK_SEPARATOR = "\r\n"

_ISSUE_ID_PATTERN = re.compile(r"/issues/([^?]+)")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def strip_query(url: str) -> str:
    """Return the URL without its query string."""
    return url.split("?", 1)[0]


def extract_issue_id(url: str) -> str:
    """Return the path segment after ``/issues/``, or an empty string."""
    match = _ISSUE_ID_PATTERN.search(url)
    return match.group(1) if match else ""


def jira_link(ticket: str, base_url: str = DEFAULT_JIRA_BASE_URL) -> str:
    """Build the ticket URL for a ticket id, empty if there is no ticket."""
    if not ticket.strip():
        return ""
    return f"{base_url}{ticket}"


def parse_count(value: str) -> int:
    """Parse a count cell, falling back to 0 for anything but a plain integer."""
    if not _INTEGER_PATTERN.fullmatch(value):
        return 0
    return int(value)


def format_text_block(
    row: OldIssueRow, jira_base_url: str = DEFAULT_JIRA_BASE_URL
) -> str:
    """Render one row as a digest block.

    Example::

        3.NullPointerException in Foo (v2.3.0)
        https://balso.atlassian.net/browse/PROJ-42
        users: 12, events: 30
        90-day users: 120, events: 400
    """
    heading = f"{row.row_index}.{row.title}"
    if row.resolution_version.strip():
        heading += f" (v{row.resolution_version})"

    lines = [heading]
    if row.jira_ticket.strip():
        lines.append(jira_link(row.jira_ticket, jira_base_url))
    elif "\n" in row.description:
        lines.append(f"symptom:\n{row.description}")
    else:
        lines.append(f"symptom : {row.description}")
    lines.append(f"users: {row.users_24h}, events: {row.events_24h}")
    lines.append(f"90-day users: {row.users_90d}, events: {row.events_90d}")

    return "\n".join(lines) + "\n"


def to_issue_record(
    row: NewIssueRow, jira_base_url: str = DEFAULT_JIRA_BASE_URL
) -> IssueRecord:
    """Map a "new" sheet row to its JSON record."""
    return IssueRecord(
        issue_id=extract_issue_id(row.url),
        url=strip_query(row.url),
        title=row.title,
        sub_title="",
        description=row.description,
        jira_link=jira_link(row.jira_ticket, jira_base_url),
        min_version=None,
        latest_version=row.resolution_version,
        event_count_in_24=parse_count(row.events_24h),
        user_count_in_24=parse_count(row.users_24h),
        event_count_in_90_days=parse_count(row.events_90d),
        user_count_in_90_days=parse_count(row.users_90d),
    )

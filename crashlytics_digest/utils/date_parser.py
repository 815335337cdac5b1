"""Date helpers for naming daily report files."""

from datetime import date, datetime, timedelta

import typer

REPORT_DATE_FORMAT = "%Y_%m_%d"


def parse_date_input(date_str: str) -> date:
    """Parse a report date given on the command line.

    Supports:
    - Keywords: today, yesterday
    - Report stamps: 2024_01_15
    - ISO dates: 2024-01-15
    - Common formats: January 15, 2024, Jan 15 2024, 2024/01/15

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date object

    Raises:
        ValueError: If date format is not recognized
    """
    value = date_str.strip()
    keyword = value.lower()
    if keyword == "today":
        return date.today()
    if keyword == "yesterday":
        return date.today() - timedelta(days=1)

    formats = [
        REPORT_DATE_FORMAT,  # 2024_01_15
        "%Y-%m-%d",  # 2024-01-15
        "%B %d, %Y",  # January 15, 2024
        "%b %d, %Y",  # Jan 15, 2024
        "%B %d %Y",  # January 15 2024
        "%b %d %Y",  # Jan 15 2024
        "%Y/%m/%d",  # 2024/01/15
    ]

    for fmt in formats:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    raise ValueError(
        f"Unable to parse date '{date_str}'. "
        f"Supported formats include: today, yesterday, YYYY-MM-DD, YYYY_MM_DD, "
        f"'January 1, 2024', 'Jan 1 2024', YYYY/MM/DD"
    )


def validate_report_date(day: date) -> None:
    """Warn about report dates in the future.

    Args:
        day: Date the report is filed under
    """
    if day > date.today():
        typer.echo(
            f"Warning: Report date {day.isoformat()} is in the future",
            err=True,
        )


def format_report_date(day: date) -> str:
    """Format a date as the report file stem.

    Args:
        day: Date to format

    Returns:
        Zero padded stamp such as 2024_01_05
    """
    return day.strftime(REPORT_DATE_FORMAT)

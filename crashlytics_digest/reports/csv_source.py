"""Read crash report CSV exports into typed rows."""

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from .errors import CsvSchemaError
from .models import NewIssueRow, OldIssueRow

logger = logging.getLogger(__name__)

# Column order of each sheet, as exported
OLD_COLUMNS = (
    "title",
    "description",
    "users_24h",
    "events_24h",
    "users_90d",
    "events_90d",
    "resolution_version",
    "jira_ticket",
)
NEW_COLUMNS = (
    "title",
    "url",
    "description",
    "users_24h",
    "events_24h",
    "users_90d",
    "events_90d",
    "resolution_version",
    "jira_ticket",
)


def read_rows(path: Path) -> list[list[str]]:
    """Read every CSV row of a file, header included.

    Args:
        path: CSV file to read

    Returns:
        List of rows, each a list of cell strings
    """
    # utf-8-sig drops the BOM spreadsheet exports tend to add
    with open(path, encoding="utf-8-sig", newline="") as f:
        return list(csv.reader(f))


def _bind_rows(
    path: Path, columns: tuple[str, ...]
) -> Iterator[tuple[int, dict[str, str]]]:
    """Yield (row_index, named cells) for each data row worth reporting.

    The header row is logged and skipped, as are rows with a blank title.

    Raises:
        CsvSchemaError: If a titled row has fewer cells than the layout needs
    """
    rows = read_rows(path)
    for row_index, row in enumerate(rows):
        if row_index == 0:
            for column in row:
                logger.debug("[Column] %s", column)
            continue

        title = row[0] if row else ""
        if not title.strip():
            continue

        if len(row) < len(columns):
            raise CsvSchemaError(path, row_index, len(columns), len(row))

        yield row_index, dict(zip(columns, row))


def iter_old_rows(path: Path) -> Iterator[OldIssueRow]:
    """Iterate rows of an "old" sheet export."""
    for row_index, cells in _bind_rows(path, OLD_COLUMNS):
        yield OldIssueRow(row_index=row_index, **cells)


def iter_new_rows(path: Path) -> Iterator[NewIssueRow]:
    """Iterate rows of a "new" sheet export."""
    for row_index, cells in _bind_rows(path, NEW_COLUMNS):
        yield NewIssueRow(row_index=row_index, **cells)

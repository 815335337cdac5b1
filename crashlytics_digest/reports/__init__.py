"""Report models, CSV binding and formatting for the daily crash digest."""

from .errors import CsvSchemaError, DigestError, ReportFormatError
from .models import (
    IssueRecord,
    NewIssueRow,
    OldIssueRow,
    ReportKind,
    ReportResult,
    ReportStatus,
    WriteMode,
)

__all__ = [
    # Models
    "IssueRecord",
    "NewIssueRow",
    "OldIssueRow",
    "ReportKind",
    "ReportResult",
    "ReportStatus",
    "WriteMode",
    # Errors
    "DigestError",
    "CsvSchemaError",
    "ReportFormatError",
]

"""Exceptions raised while building reports."""

from pathlib import Path


class DigestError(Exception):
    """Base error for report generation."""


class CsvSchemaError(DigestError):
    """A data row does not fit the column layout of its sheet."""

    def __init__(self, source: Path, row_index: int, expected: int, actual: int):
        self.source = source
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{source.name}: row {row_index} has {actual} columns, "
            f"expected at least {expected}"
        )


class ReportFormatError(DigestError):
    """An existing report file cannot be merged with new content."""

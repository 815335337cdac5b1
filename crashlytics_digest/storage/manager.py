"""Storage manager for generated daily reports."""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from ..reports.errors import ReportFormatError
from ..reports.models import ReportKind, WriteMode
from ..utils.date_parser import format_report_date

logger = logging.getLogger(__name__)

REPORT_DIR_NAME = "Daily_Monitoring"


class ReportStorage:
    """Manages the dated report files under the monitoring directory."""

    def __init__(self, base_path: str | Path = "data"):
        """Initialize report storage.

        Args:
            base_path: Private data directory the monitoring folder lives in
        """
        self.base_path = Path(base_path)
        self.report_dir = self.base_path / REPORT_DIR_NAME
        self.report_dir.mkdir(parents=True, exist_ok=True)

    def _generate_filename(self, kind: ReportKind, day: date) -> str:
        """Generate filename for a report.

        Args:
            kind: Report kind, used as the suffix
            day: Date the report is filed under

        Returns:
            Filename string
        """
        return f"{format_report_date(day)}.{kind.value}"

    def report_path(self, kind: ReportKind, day: date) -> Path:
        """Get full file path for a report.

        Args:
            kind: Report kind
            day: Date the report is filed under

        Returns:
            Path object for the report file
        """
        return self.report_dir / self._generate_filename(kind, day)

    def write_text(
        self,
        kind: ReportKind,
        content: str,
        day: date,
        mode: WriteMode = WriteMode.REPLACE,
    ) -> Path:
        """Write report content to its dated file.

        Args:
            kind: Report kind
            content: Complete content to write
            day: Date the report is filed under
            mode: Replace today's file or append to it

        Returns:
            Path to the written file
        """
        file_path = self.report_path(kind, day)
        # The directory may have been removed since init
        file_path.parent.mkdir(parents=True, exist_ok=True)

        open_mode = "a" if mode == WriteMode.APPEND else "w"
        # newline="" keeps the \r\n block separators as written
        with open(file_path, open_mode, encoding="utf-8", newline="") as f:
            f.write(content)

        logger.info("Saved %s report to %s", kind.name.lower(), file_path)
        return file_path

    def write_json_report(
        self,
        records: list[dict[str, Any]],
        day: date,
        mode: WriteMode = WriteMode.REPLACE,
    ) -> Path:
        """Write records as a pretty-printed JSON array.

        In append mode the records are added to the array already stored for
        the day, so the file remains a single JSON document.

        Args:
            records: Serialized issue records
            day: Date the report is filed under
            mode: Replace today's file or merge into it

        Returns:
            Path to the written file

        Raises:
            ReportFormatError: If the existing file is not a JSON array
        """
        if mode == WriteMode.APPEND:
            existing = self.load_json_report(day)
            if existing is not None:
                records = existing + records

        content = json.dumps(records, indent=2, ensure_ascii=False)
        return self.write_text(ReportKind.JSON, content, day, WriteMode.REPLACE)

    def load_json_report(self, day: date) -> list[dict[str, Any]] | None:
        """Load the JSON report of a day.

        Args:
            day: Date the report is filed under

        Returns:
            List of record dicts, or None if no report exists

        Raises:
            ReportFormatError: If the file does not hold a JSON array
        """
        file_path = self.report_path(ReportKind.JSON, day)

        if not file_path.exists():
            return None

        try:
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ReportFormatError(f"{file_path.name} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise ReportFormatError(f"{file_path.name} does not hold a JSON array")
        return data

    def list_reports(self, kind: ReportKind | None = None) -> list[str]:
        """List generated report filenames, oldest first.

        Args:
            kind: Filter by report kind (optional)

        Returns:
            List of report filenames
        """
        pattern = f"*.{kind.value}" if kind else "*.*"
        return sorted(f.name for f in self.report_dir.glob(pattern) if f.is_file())

    def get_storage_stats(self) -> dict[str, Any]:
        """Get statistics about generated reports.

        Returns:
            Dictionary with storage statistics
        """
        all_files = [f for f in self.report_dir.glob("*.*") if f.is_file()]

        total_size = sum(f.stat().st_size for f in all_files)

        kind_counts: dict[str, int] = {}
        for f in all_files:
            suffix = f.suffix.lstrip(".")
            kind_counts[suffix] = kind_counts.get(suffix, 0) + 1

        days = sorted({f.stem for f in all_files})

        return {
            "total_reports": len(all_files),
            "total_size_bytes": total_size,
            "total_size_mb": round(total_size / (1024 * 1024), 2),
            "kinds": kind_counts,
            "latest_day": days[-1] if days else None,
            "storage_path": str(self.report_dir.absolute()),
        }

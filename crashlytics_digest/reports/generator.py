"""Daily crash digest generation from the Crashlytics CSV exports."""

import asyncio
import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from ..config import DigestConfig
from ..storage.manager import ReportStorage
from .csv_source import iter_new_rows, iter_old_rows
from .formatting import (
    BLOCK_SEPARATOR,
    NEW_SECTION_HEADING,
    OLD_SECTION_HEADING,
    format_text_block,
    to_issue_record,
)
from .models import OldIssueRow, ReportKind, ReportResult, WriteMode

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Builds the daily text digest and JSON report.

    Each operation reads its CSV sources, renders the complete output in
    memory and writes it in one go. Failures never propagate: they are logged
    and returned as a failed ``ReportResult``.
    """

    def __init__(
        self,
        config: DigestConfig | None = None,
        storage: ReportStorage | None = None,
        today: date | None = None,
        mode: WriteMode | None = None,
    ):
        """Initialize the generator.

        Args:
            config: Digest configuration (defaults to the environment)
            storage: Report storage (defaults to the configured output dir)
            today: Date to file reports under (defaults to the current date
                at generation time)
            mode: Write mode (defaults to the configured mode)
        """
        self.config = config or DigestConfig()
        self.storage = storage
        self.today = today
        self.mode = mode or self.config.mode

    def _get_storage(self) -> ReportStorage:
        # Created lazily so a failing output dir is reported per operation
        if self.storage is None:
            self.storage = ReportStorage(self.config.output_dir)
        return self.storage

    def _report_day(self) -> date:
        return self.today or date.today()

    def _render_section(
        self, heading: str, rows: Iterable[OldIssueRow]
    ) -> tuple[str, int]:
        parts = [heading]
        count = 0
        for row in rows:
            block = format_text_block(row, self.config.jira_base_url)
            logger.debug("[%d] %s", row.row_index, block)
            parts.append(block)
            parts.append(BLOCK_SEPARATOR)
            count += 1
        return "".join(parts), count

    def build_text_report(
        self, new_csv_path: Path, old_csv_path: Path
    ) -> tuple[str, int]:
        """Render the text digest for both sheets.

        Returns:
            Tuple of (digest text, number of blocks)

        Raises:
            OSError: If a CSV cannot be read
            CsvSchemaError: If a titled row is missing columns
        """
        new_text, new_count = self._render_section(
            NEW_SECTION_HEADING, iter_new_rows(Path(new_csv_path))
        )
        old_text, old_count = self._render_section(
            OLD_SECTION_HEADING, iter_old_rows(Path(old_csv_path))
        )
        return new_text + old_text, new_count + old_count

    def generate_text_report(
        self, new_csv_path: Path, old_csv_path: Path
    ) -> ReportResult:
        """Write the dated text digest for the new and old sheets.

        Args:
            new_csv_path: Export of newly reported issues
            old_csv_path: Export of already known issues

        Returns:
            ReportResult describing the written file or the failure
        """
        try:
            content, count = self.build_text_report(new_csv_path, old_csv_path)
            path = self._get_storage().write_text(
                ReportKind.TEXT, content, self._report_day(), self.mode
            )
        except Exception as e:
            logger.exception("Text report generation failed")
            return ReportResult.failure(ReportKind.TEXT, str(e) or type(e).__name__)

        return ReportResult.success(ReportKind.TEXT, path, count)

    def generate_json_report(self, new_csv_path: Path) -> ReportResult:
        """Write the dated JSON report for the new sheet.

        Args:
            new_csv_path: Export of newly reported issues

        Returns:
            ReportResult describing the written file or the failure
        """
        try:
            records = [
                to_issue_record(row, self.config.jira_base_url).model_dump(
                    by_alias=True
                )
                for row in iter_new_rows(Path(new_csv_path))
            ]
            path = self._get_storage().write_json_report(
                records, self._report_day(), self.mode
            )
        except Exception as e:
            logger.exception("JSON report generation failed")
            return ReportResult.failure(ReportKind.JSON, str(e) or type(e).__name__)

        logger.info("JSON saved to %s", path)
        return ReportResult.success(ReportKind.JSON, path, len(records))

    async def agenerate_all(
        self, new_csv_path: Path | None = None, old_csv_path: Path | None = None
    ) -> list[ReportResult]:
        """Generate both reports concurrently on worker threads.

        Returns:
            [text result, json result]
        """
        new_csv = Path(new_csv_path) if new_csv_path else self.config.new_csv_path
        old_csv = Path(old_csv_path) if old_csv_path else self.config.old_csv_path

        results = await asyncio.gather(
            asyncio.to_thread(self.generate_text_report, new_csv, old_csv),
            asyncio.to_thread(self.generate_json_report, new_csv),
        )
        return list(results)

    def generate_all(
        self, new_csv_path: Path | None = None, old_csv_path: Path | None = None
    ) -> list[ReportResult]:
        """Generate both reports, paths defaulting to the configured assets."""
        return asyncio.run(self.agenerate_all(new_csv_path, old_csv_path))

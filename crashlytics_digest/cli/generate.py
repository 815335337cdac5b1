"""CLI commands for generating the daily crash digest."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..config import DigestConfig
from ..reports.generator import ReportGenerator
from ..reports.models import ReportResult, WriteMode
from ..storage.manager import ReportStorage
from ..utils.date_parser import parse_date_input, validate_report_date
from ..utils.log_setup import setup_logging
from .options import (
    APPEND_OPTION,
    ASSETS_DIR_OPTION,
    DATASET_OPTION,
    DATE_OPTION,
    LOG_FILE_OPTION,
    NEW_CSV_OPTION,
    OLD_CSV_OPTION,
    OUTPUT_DIR_OPTION,
    VERBOSE_OPTION,
)

console = Console()


def _build_generator(
    assets_dir: Path | None,
    dataset: str | None,
    output_dir: Path | None,
    report_date: str | None,
    append: bool | None,
) -> ReportGenerator:
    """Create a generator from configuration and command line overrides."""
    config = DigestConfig()
    if assets_dir is not None:
        config.assets_dir = assets_dir
    if dataset is not None:
        config.dataset = dataset
    if output_dir is not None:
        config.output_dir = output_dir
    if append is not None:
        config.write_mode = (WriteMode.APPEND if append else WriteMode.REPLACE).value

    try:
        config.validate()
        today = parse_date_input(report_date) if report_date else None
    except ValueError as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    if today is not None:
        validate_report_date(today)

    return ReportGenerator(config=config, today=today)


def _show_results(results: list[ReportResult]) -> None:
    """Print a results table and exit with 1 if any report failed."""
    results_table = Table(title="Report Results")
    results_table.add_column("Report", style="cyan")
    results_table.add_column("Status", style="green")
    results_table.add_column("Entries", justify="right", style="yellow")
    results_table.add_column("Details", style="white")

    for result in results:
        if result.ok:
            status = "✅ ok"
            details = str(result.path)
        else:
            status = "❌ failed"
            details = result.error or "unknown error"
        results_table.add_row(
            result.kind.name.lower(), status, str(result.entry_count), details
        )

    console.print(results_table)

    failed = [r for r in results if not r.ok]
    if failed:
        console.print(f"❌ {len(failed)} of {len(results)} reports failed")
        raise typer.Exit(1)

    console.print(f"✨ Generated {len(results)} reports")


def generate(
    new_csv: Path | None = NEW_CSV_OPTION,
    old_csv: Path | None = OLD_CSV_OPTION,
    assets_dir: Path | None = ASSETS_DIR_OPTION,
    dataset: str | None = DATASET_OPTION,
    output_dir: Path | None = OUTPUT_DIR_OPTION,
    report_date: str | None = DATE_OPTION,
    append: bool | None = APPEND_OPTION,
    verbose: bool = VERBOSE_OPTION,
    log_file: Path | None = LOG_FILE_OPTION,
) -> None:
    """Generate the text digest and JSON report concurrently.

    Reads <assets-dir>/new/<dataset>.csv and <assets-dir>/old/<dataset>.csv
    unless explicit CSV paths are given, and writes
    <output-dir>/Daily_Monitoring/<YYYY_MM_DD>.txt and .json.

    Examples:
        crashlytics-digest generate
        crashlytics-digest generate --assets-dir ./exports --date yesterday
        crashlytics-digest generate --new-csv new.csv --old-csv old.csv --append
    """
    setup_logging(verbose, log_file)
    generator = _build_generator(assets_dir, dataset, output_dir, report_date, append)

    console.print("📊 Generating daily crash digest...")
    results = generator.generate_all(new_csv, old_csv)
    _show_results(results)


def text(
    new_csv: Path | None = NEW_CSV_OPTION,
    old_csv: Path | None = OLD_CSV_OPTION,
    assets_dir: Path | None = ASSETS_DIR_OPTION,
    dataset: str | None = DATASET_OPTION,
    output_dir: Path | None = OUTPUT_DIR_OPTION,
    report_date: str | None = DATE_OPTION,
    append: bool | None = APPEND_OPTION,
    verbose: bool = VERBOSE_OPTION,
    log_file: Path | None = LOG_FILE_OPTION,
) -> None:
    """Generate only the text digest from the new and old CSVs."""
    setup_logging(verbose, log_file)
    generator = _build_generator(assets_dir, dataset, output_dir, report_date, append)

    result = generator.generate_text_report(
        new_csv or generator.config.new_csv_path,
        old_csv or generator.config.old_csv_path,
    )
    _show_results([result])


def json_report(
    new_csv: Path | None = NEW_CSV_OPTION,
    assets_dir: Path | None = ASSETS_DIR_OPTION,
    dataset: str | None = DATASET_OPTION,
    output_dir: Path | None = OUTPUT_DIR_OPTION,
    report_date: str | None = DATE_OPTION,
    append: bool | None = APPEND_OPTION,
    verbose: bool = VERBOSE_OPTION,
    log_file: Path | None = LOG_FILE_OPTION,
) -> None:
    """Generate only the JSON report from the new CSV."""
    setup_logging(verbose, log_file)
    generator = _build_generator(assets_dir, dataset, output_dir, report_date, append)

    result = generator.generate_json_report(new_csv or generator.config.new_csv_path)
    _show_results([result])


def status(output_dir: Path | None = OUTPUT_DIR_OPTION) -> None:
    """Show generated reports and storage statistics."""
    console.print("📊 Report Status")

    config = DigestConfig()
    storage = ReportStorage(output_dir if output_dir is not None else config.output_dir)
    stats = storage.get_storage_stats()

    stats_table = Table(title="Storage Statistics")
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", style="green")

    stats_table.add_row("Total Reports", str(stats["total_reports"]))
    stats_table.add_row("Latest Day", stats["latest_day"] or "-")
    stats_table.add_row("Storage Size", f"{stats['total_size_mb']} MB")
    stats_table.add_row("Storage Path", stats["storage_path"])

    console.print(stats_table)

    reports = storage.list_reports()
    if reports:
        report_table = Table(title="Generated Reports")
        report_table.add_column("File", style="cyan")
        for name in reports:
            report_table.add_row(name)
        console.print(report_table)
    else:
        console.print("No reports found in storage.")

"""Standardized CLI option definitions for consistent shorthand mappings.

This module provides centralized option definitions so every report command
accepts the same flags.
"""

import typer

# Input options - CSV sources
NEW_CSV_OPTION = typer.Option(
    None, "--new-csv", "-n", help="CSV of newly reported issues (9 columns)"
)

OLD_CSV_OPTION = typer.Option(
    None, "--old-csv", "-p", help="CSV of already known issues (8 columns)"
)

ASSETS_DIR_OPTION = typer.Option(
    None,
    "--assets-dir",
    "-a",
    help="Directory holding new/ and old/ CSV exports (defaults to ./assets)",
)

DATASET_OPTION = typer.Option(
    None,
    "--dataset",
    help="CSV file name without extension (defaults to 'AOS Crashlytics DB')",
)

# Output options
OUTPUT_DIR_OPTION = typer.Option(
    None,
    "--output-dir",
    "-o",
    help="Directory Daily_Monitoring is created in (defaults to ./data)",
)

DATE_OPTION = typer.Option(
    None,
    "--date",
    "-d",
    help="Date to file the report under (YYYY-MM-DD, today, yesterday)",
)

APPEND_OPTION = typer.Option(
    None,
    "--append/--replace",
    help="Append to today's report instead of replacing it",
)

# Behavior options
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log parsed columns and rendered blocks"
)

LOG_FILE_OPTION = typer.Option(None, "--log-file", help="Also write logs to this file")

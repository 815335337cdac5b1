"""Test configuration and fixtures."""

import csv
import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

NEW_HEADER = [
    "Crash Event",
    "URL",
    "Description",
    "Users (24h)",
    "Events (24h)",
    "Users (90d)",
    "Events (90d)",
    "Fix Version",
    "Jira",
]
OLD_HEADER = [h for h in NEW_HEADER if h != "URL"]


def write_csv(path: Path, rows: list[list[str]]) -> Path:
    """Write rows as a UTF-8 CSV file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        csv.writer(f).writerows(rows)
    return path


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo root logger changes made by CLI commands."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if (handler.get_name() or "").startswith("crashlytics-digest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def csv_writer(tmp_path: Path) -> Callable[[str, list[list[str]]], Path]:
    """Write a CSV under the temporary directory and return its path."""

    def _write(name: str, rows: list[list[str]]) -> Path:
        return write_csv(tmp_path / name, rows)

    return _write


@pytest.fixture
def new_csv(tmp_path: Path) -> Path:
    """Sample "new" sheet with one ticketed crash and one untriaged crash."""
    return write_csv(
        tmp_path / "assets" / "new" / "AOS Crashlytics DB.csv",
        [
            NEW_HEADER,
            [
                "NullPointerException in PlayerView",
                "https://console.firebase.google.com/project/app/crashlytics/issues/ABC-123?time=last-seven-days",
                "Crash when resuming playback",
                "12",
                "30",
                "120",
                "400",
                "2.3.0",
                "PROJ-42",
            ],
            ["", "", "", "", "", "", "", "", ""],
            [
                "IllegalStateException in Billing",
                "https://console.firebase.google.com/project/app/crashlytics",
                "Occurs after purchase\nOnly on Android 14",
                "n/a",
                "7",
                "50",
                "99",
                "",
                "",
            ],
        ],
    )


@pytest.fixture
def old_csv(tmp_path: Path) -> Path:
    """Sample "old" sheet with a single known crash."""
    return write_csv(
        tmp_path / "assets" / "old" / "AOS Crashlytics DB.csv",
        [
            OLD_HEADER,
            [
                "OutOfMemoryError in ImageCache",
                "Large bitmaps",
                "3",
                "4",
                "80",
                "150",
                "",
                "",
            ],
        ],
    )


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Private data directory reports are written under."""
    return tmp_path / "data"

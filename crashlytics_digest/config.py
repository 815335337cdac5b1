"""Configuration for report generation."""

import os
from pathlib import Path

from .reports.formatting import DEFAULT_JIRA_BASE_URL
from .reports.models import WriteMode

DEFAULT_DATASET = "AOS Crashlytics DB"


class DigestConfig:
    """Configuration class for the daily crash digest."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        self.assets_dir: Path = Path(
            os.getenv("CRASHLYTICS_DIGEST_ASSETS_DIR", "assets")
        )
        self.dataset: str = os.getenv("CRASHLYTICS_DIGEST_DATASET", DEFAULT_DATASET)
        self.output_dir: Path = Path(os.getenv("CRASHLYTICS_DIGEST_OUTPUT_DIR", "data"))
        self.jira_base_url: str = os.getenv(
            "CRASHLYTICS_DIGEST_JIRA_BASE_URL", DEFAULT_JIRA_BASE_URL
        )
        self.write_mode: str = os.getenv(
            "CRASHLYTICS_DIGEST_WRITE_MODE", WriteMode.REPLACE.value
        ).lower()

    @property
    def new_csv_path(self) -> Path:
        return self.assets_dir / "new" / f"{self.dataset}.csv"

    @property
    def old_csv_path(self) -> Path:
        return self.assets_dir / "old" / f"{self.dataset}.csv"

    @property
    def mode(self) -> WriteMode:
        """Parsed write mode, see validate()."""
        return WriteMode(self.write_mode)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        valid_modes = [m.value for m in WriteMode]
        if self.write_mode not in valid_modes:
            raise ValueError(
                f"Invalid write mode '{self.write_mode}'. "
                f"Expected one of: {', '.join(valid_modes)}"
            )
        if not self.dataset.strip():
            raise ValueError("CRASHLYTICS_DIGEST_DATASET must not be empty")

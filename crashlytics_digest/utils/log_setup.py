"""Logging setup for the command line entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_HANDLER_NAME = "crashlytics-digest-console"
FILE_HANDLER_NAME = "crashlytics-digest-file"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """
    Configure the root logger.
    Console output shows warnings unless verbose is set; a log file, when
    given, always receives everything down to DEBUG.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    console_handler = next(
        (h for h in root.handlers if h.get_name() == CONSOLE_HANDLER_NAME), None
    )
    if console_handler is None:
        console_handler = RichHandler(console=Console(stderr=True), show_path=False)
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        root.addHandler(console_handler)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    if not any(
        isinstance(h, logging.FileHandler)
        and getattr(h, "baseFilename", "") == str(log_file.absolute())
        for h in root.handlers
    ):
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.set_name(FILE_HANDLER_NAME)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(fh)

"""Storage of generated report files."""

from .manager import ReportStorage

__all__ = ["ReportStorage"]

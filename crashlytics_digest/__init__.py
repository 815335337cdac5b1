"""Daily crash digest generation from Crashlytics CSV exports."""

__version__ = "0.1.0"

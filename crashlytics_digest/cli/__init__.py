"""Command line interface for the daily crash digest."""

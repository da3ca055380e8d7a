"""Descriptive statistics report over a personal step-count activity log."""

__version__ = "0.1.0"

"""Output formatters for sync results."""

from .console_report import print_sync_report

__all__ = ["print_sync_report"]

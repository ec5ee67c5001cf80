"""Reporting exports."""
from .base import ReportManager, Reporter
from .json_reporter import JsonReporter
from .terminal import BUILD_FAILED_BANNER, TerminalReporter, format_line

__all__ = [
    "BUILD_FAILED_BANNER",
    "ReportManager",
    "Reporter",
    "JsonReporter",
    "TerminalReporter",
    "format_line",
]

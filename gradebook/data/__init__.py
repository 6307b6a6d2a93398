"""
Report persistence module.

This package handles all file I/O: appending reports and restoring
students from earlier reports.
"""

from .history import HistoryLoader
from .report_writer import ReportWriter, format_ranking_line

__all__ = ["HistoryLoader", "ReportWriter", "format_ranking_line"]

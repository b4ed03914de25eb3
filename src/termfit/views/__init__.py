"""Width-responsive views built on the core layout primitives."""

from termfit.views.status_line import Segment, SegmentPriority, StatusLine, build_status_line
from termfit.views.activity_log import (
    ActivityLog,
    EntryPriority,
    LogDisplayMode,
    LogEntry,
    build_activity_log,
)
from termfit.views.error_report import ErrorReport, build_error_report
from termfit.views.code_view import CodeView, build_code_view

__all__ = [
    "Segment",
    "SegmentPriority",
    "StatusLine",
    "build_status_line",
    "ActivityLog",
    "EntryPriority",
    "LogDisplayMode",
    "LogEntry",
    "build_activity_log",
    "ErrorReport",
    "build_error_report",
    "CodeView",
    "build_code_view",
]

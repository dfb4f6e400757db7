"""Check results PR comment: scan counting, rendering and publishing."""

from .checks import ChangedScope, CheckReport, CheckResult, all_passed
from .config import ConfigError, ReportInputs, ReportSettings, load_settings
from .context import RunContext
from .formatter import ReportFormatter
from .outcome import Outcome
from .publisher import CommentPermissionError, CommentPublisher, CommentPublishError, GhCommentPublisher
from .render import render_report
from .scan import ScanReport, load_scan_report

__all__ = [
    "ChangedScope",
    "CheckReport",
    "CheckResult",
    "CommentPermissionError",
    "CommentPublishError",
    "CommentPublisher",
    "ConfigError",
    "GhCommentPublisher",
    "Outcome",
    "ReportFormatter",
    "ReportInputs",
    "ReportSettings",
    "RunContext",
    "ScanReport",
    "all_passed",
    "load_scan_report",
    "load_settings",
    "render_report",
]

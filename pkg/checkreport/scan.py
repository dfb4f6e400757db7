"""Security scan report loading and severity counting.

The scanner writes a plain-text table to the workspace. Only three markers are
recognized; everything else in the file is passed through for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .outcome import Outcome

CRITICAL_MARKER = "(CRITICAL):"
HIGH_MARKER = "(HIGH):"
MEDIUM_MARKER = "(MEDIUM):"

MISSING_REPORT_TEXT = "No issues found or Trivy did not run"
EMPTY_REPORT_TEXT = "No issues found"


def count_marker(text: str, marker: str) -> int:
    """Count non-overlapping, case-sensitive occurrences of marker in text."""
    if not text:
        return 0
    return text.count(marker)


@dataclass(frozen=True)
class ScanReport:
    """Scanner output plus derived severity counts."""

    text: str
    critical: int = 0
    high: int = 0
    medium: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.high + self.medium

    @property
    def outcome(self) -> Outcome:
        """Derived outcome: medium findings never fail the scan."""
        if self.critical + self.high > 0:
            return Outcome.FAILURE
        return Outcome.SUCCESS

    @property
    def issues_label(self) -> str:
        return f"{self.critical} critical, {self.high} high, {self.medium} medium"

    @classmethod
    def from_text(cls, raw: str, *, empty_text: str = EMPTY_REPORT_TEXT) -> "ScanReport":
        """Build a report from scanner output that exists on disk."""
        text = raw.rstrip()
        return cls(
            text=text or empty_text,
            critical=count_marker(text, CRITICAL_MARKER),
            high=count_marker(text, HIGH_MARKER),
            medium=count_marker(text, MEDIUM_MARKER),
        )

    @classmethod
    def missing(cls, *, missing_text: str = MISSING_REPORT_TEXT) -> "ScanReport":
        return cls(text=missing_text)


def load_scan_report(
    path: Path,
    *,
    missing_text: str = MISSING_REPORT_TEXT,
    empty_text: str = EMPTY_REPORT_TEXT,
) -> ScanReport:
    """Load the scan report at path.

    An absent file yields the placeholder report. Read errors on a file that
    does exist (permissions, directories, bad encoding) are raised to the caller.
    """
    if not path.exists():
        return ScanReport.missing(missing_text=missing_text)
    return ScanReport.from_text(path.read_text(encoding="utf-8"), empty_text=empty_text)

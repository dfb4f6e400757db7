"""Per-check results and the aggregate report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .outcome import Outcome
from .scan import ScanReport

NO_ISSUES = "-"
NO_SCOPE = "None"


@dataclass(frozen=True)
class ChangedScope:
    """Ordered scope identifiers touched by the change."""

    items: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str | None) -> "ChangedScope":
        """Split a newline-delimited value, dropping blank entries."""
        lines = str(raw or "").splitlines()
        return cls(tuple(line.strip() for line in lines if line.strip()))

    def render(self) -> str:
        if not self.items:
            return NO_SCOPE
        return ", ".join(f"`{item}`" for item in self.items)


@dataclass(frozen=True)
class CheckResult:
    """One reported pipeline stage."""

    outcome: Outcome
    label: str
    icon: str
    issues: str = NO_ISSUES
    scope: str = ""

    @property
    def passed(self) -> bool:
        return self.outcome.passed


def all_passed(checks: Iterable[CheckResult]) -> bool:
    """True only when every check is literally ``success``."""
    return all(check.passed for check in checks)


@dataclass(frozen=True)
class CheckReport:
    """Everything the renderer needs for one comment."""

    format_check: CheckResult
    validate_check: CheckResult
    scan_check: CheckResult
    scan: ScanReport

    @property
    def checks(self) -> tuple[CheckResult, CheckResult, CheckResult]:
        return (self.format_check, self.validate_check, self.scan_check)

    @property
    def passed(self) -> bool:
        return all_passed(self.checks)

"""Render a CheckReport into the PR comment body."""

from __future__ import annotations

from .checks import CheckReport, CheckResult
from .config import ReportSettings
from .context import RunContext
from .markdown import RULE, bold, code, code_block, details_block, table_header, table_row

PASSED_BANNER = "✅ **All checks passed!**"
FAILED_BANNER = "🔴 **Some checks failed**"
TABLE_COLUMNS = ("Check", "Status", "Issues", "Scope")


def banner(passed: bool) -> str:
    return PASSED_BANNER if passed else FAILED_BANNER


def check_row(check: CheckResult) -> str:
    """Check row."""
    return table_row(
        [
            f"{check.icon} {bold(check.label)}",
            f"{check.outcome.icon} {check.outcome.value}",
            check.issues,
            check.scope,
        ]
    )


def footer(context: RunContext) -> str:
    return (
        f"<sub>👤 Pusher: @{context.actor} | 🔄 Action: {code(context.event_name)}"
        f" | ⚙️ Workflow: {code(context.workflow)}</sub>"
    )


def render_report(report: CheckReport, settings: ReportSettings, context: RunContext) -> str:
    """Render the full comment body; output is deterministic for equal inputs."""
    lines = [
        f"## {settings.title}",
        "",
        "### 📊 Summary",
        banner(report.passed),
        "",
        *table_header(TABLE_COLUMNS),
        *(check_row(check) for check in report.checks),
        "",
        RULE,
        "",
        *details_block(
            code_block(report.scan.text),
            summary=f"{settings.scan_icon} {settings.scan_label} Security Details ({report.scan.total} issue(s))",
        ),
        "",
        RULE,
        f"💡 {bold('Note:')} {settings.note}",
        "",
        RULE,
        footer(context),
    ]
    return "\n".join(lines)

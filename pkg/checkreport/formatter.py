"""ReportFormatter: turn pipeline inputs into one published PR comment."""

from __future__ import annotations

from dataclasses import dataclass, field

from .checks import NO_ISSUES, ChangedScope, CheckReport, CheckResult
from .config import ConfigError, ReportInputs, ReportSettings
from .context import RunContext
from .outcome import Outcome
from .publisher import CommentPublisher
from .render import render_report
from .scan import load_scan_report


@dataclass(frozen=True)
class ReportFormatter:
    """Build, render and publish the check results comment.

    The publisher and run context are injected so tests can substitute fakes.
    """

    publisher: CommentPublisher
    context: RunContext
    settings: ReportSettings = field(default_factory=ReportSettings)

    def build(self, inputs: ReportInputs) -> CheckReport:
        """Read the scan file and classify each check."""
        settings = self.settings
        scan = load_scan_report(
            inputs.scan_path(settings),
            missing_text=settings.missing_report_text,
            empty_text=settings.empty_report_text,
        )
        scope = ChangedScope.parse(inputs.changed_stacks)
        return CheckReport(
            format_check=CheckResult(
                outcome=Outcome.parse(inputs.fmt_status),
                label=settings.format_label,
                icon=settings.format_icon,
                issues=NO_ISSUES,
                scope=settings.static_scope,
            ),
            validate_check=CheckResult(
                outcome=Outcome.parse(inputs.validate_status),
                label=settings.validate_label,
                icon=settings.validate_icon,
                issues=NO_ISSUES,
                scope=settings.static_scope,
            ),
            scan_check=CheckResult(
                outcome=scan.outcome,
                label=settings.scan_label,
                icon=settings.scan_icon,
                issues=scan.issues_label,
                scope=scope.render(),
            ),
            scan=scan,
        )

    def render(self, inputs: ReportInputs) -> str:
        return render_report(self.build(inputs), self.settings, self.context)

    def post(self, body: str) -> None:
        """Post an already rendered body as a new PR comment."""
        issue_number = self.context.issue_number
        if issue_number is None:
            raise ConfigError("no pull request number: set PR_NUMBER or run on a pull_request event")
        self.publisher.create_comment(self.context.owner, self.context.repo, issue_number, body)

    def publish(self, inputs: ReportInputs) -> str:
        """Render the comment and post it once. Returns the posted body."""
        body = self.render(inputs)
        self.post(body)
        return body

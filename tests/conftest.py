"""Shared fixtures for the check report tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pkg.checkreport import ReportInputs, RunContext  # noqa: E402


class FakePublisher:
    """Records create_comment calls instead of talking to GitHub."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[str, str, int, str]] = []
        self.error = error

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        self.calls.append((owner, repo, issue_number, body))
        if self.error is not None:
            raise self.error


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()


@pytest.fixture
def run_context() -> RunContext:
    return RunContext(
        actor="octocat",
        event_name="pull_request",
        workflow="Terragrunt Checks",
        owner="acme",
        repo="infra",
        issue_number=42,
    )


@pytest.fixture
def make_inputs(tmp_path: Path):
    def _make(scan_text: str | None = None, **overrides) -> ReportInputs:
        if scan_text is not None:
            (tmp_path / "trivy_output.txt").write_text(scan_text, encoding="utf-8")
        return ReportInputs(workspace=tmp_path, **overrides)

    return _make


@pytest.fixture
def actions_env(tmp_path: Path) -> dict[str, str]:
    return {
        "GITHUB_WORKSPACE": str(tmp_path),
        "GITHUB_ACTOR": "octocat",
        "GITHUB_EVENT_NAME": "pull_request",
        "GITHUB_WORKFLOW": "Terragrunt Checks",
        "GITHUB_REPOSITORY": "acme/infra",
        "PR_NUMBER": "42",
    }

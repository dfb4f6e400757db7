"""Publish the report as a PR comment.

Single attempt, no retry: a failed post fails the run.
"""

from __future__ import annotations

import os
import subprocess
import tempfile
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

GhRunner = Callable[[Sequence[str]], "subprocess.CompletedProcess[str]"]

PERMISSION_HINTS = ("403", "resource not accessible", "insufficient")


class CommentPublisher(Protocol):
    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        ...


class CommentPermissionError(Exception):
    """Token lacks pull-requests: write permission."""


class CommentPublishError(Exception):
    """gh CLI failed to create the comment."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


def _default_runner(args: Sequence[str]) -> "subprocess.CompletedProcess[str]":
    return subprocess.run(["gh", *args], capture_output=True, text=True, check=False)


def _is_permission_error(stderr: str) -> bool:
    lower_stderr = stderr.lower()
    return any(hint in lower_stderr for hint in PERMISSION_HINTS)


@dataclass(frozen=True)
class GhCommentPublisher:
    """CommentPublisher backed by ``gh api``."""

    runner: GhRunner | None = None

    def _run_gh(self, args: Sequence[str]) -> "subprocess.CompletedProcess[str]":
        """Run a gh CLI command once.

        Raises:
            CommentPermissionError: Token lacks pull-requests: write permission
            CommentPublishError: Any other non-zero exit
        """
        runner = self.runner or _default_runner
        result = runner(list(args))
        if result.returncode == 0:
            return result

        stderr = result.stderr or ""
        if _is_permission_error(stderr):
            raise CommentPermissionError(
                "Unable to post PR comment: token lacks pull-requests: write permission.\n"
                "Add this to your workflow:\n"
                "permissions:\n"
                "  contents: read\n"
                "  pull-requests: write"
            )
        raise CommentPublishError(
            f"gh exited with status {result.returncode}: {stderr.strip()}", stderr
        )

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        """Create a new comment on the issue or pull request.

        Raises:
            CommentPermissionError: Token lacks pull-requests: write permission
            CommentPublishError: gh failed, is not installed, or the body file could not be written
        """
        try:
            fd, body_file = tempfile.mkstemp(prefix="check-report-", suffix=".md")
        except OSError as exc:
            raise CommentPublishError(f"unable to create comment body file: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(body)
            self._run_gh(
                [
                    "api",
                    f"repos/{owner}/{repo}/issues/{issue_number}/comments",
                    "-F",
                    f"body=@{body_file}",
                ]
            )
        except OSError as exc:
            raise CommentPublishError(f"unable to run gh: {exc}") from exc
        finally:
            os.unlink(body_file)

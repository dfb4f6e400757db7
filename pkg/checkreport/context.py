"""Run context: who triggered the pipeline and where the comment goes."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .config import ConfigError


def _require(env: Mapping[str, str], name: str) -> str:
    value = str(env.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{name} is not set")
    return value


def _as_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
        return number if number > 0 else None
    return None


def issue_number_from_event(payload: Any) -> int | None:
    """Find the pull request or issue number in a webhook payload."""
    if not isinstance(payload, dict):
        return None
    for key in ("pull_request", "issue"):
        section = payload.get(key)
        if isinstance(section, dict):
            number = _as_positive_int(section.get("number"))
            if number is not None:
                return number
    return _as_positive_int(payload.get("number"))


def _read_event(path_value: str) -> Any:
    path = Path(path_value)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"unable to read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc


@dataclass(frozen=True)
class RunContext:
    """Read-only identity of the current run."""

    actor: str
    event_name: str
    workflow: str
    owner: str
    repo: str
    issue_number: int | None = None

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "RunContext":
        """Build the context from the GitHub Actions environment.

        ``PR_NUMBER`` wins over the event payload at ``GITHUB_EVENT_PATH``.
        A missing issue number is allowed here; publishing checks for it.
        """
        env = os.environ if env is None else env
        repository = _require(env, "GITHUB_REPOSITORY")
        owner, sep, repo = repository.partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ConfigError(f"GITHUB_REPOSITORY must be owner/repo, got {repository!r}")

        issue_number = _as_positive_int(env.get("PR_NUMBER"))
        if issue_number is None:
            event_path = str(env.get("GITHUB_EVENT_PATH") or "").strip()
            if event_path:
                issue_number = issue_number_from_event(_read_event(event_path))

        return cls(
            actor=_require(env, "GITHUB_ACTOR"),
            event_name=_require(env, "GITHUB_EVENT_NAME"),
            workflow=_require(env, "GITHUB_WORKFLOW"),
            owner=owner,
            repo=repo,
            issue_number=issue_number,
        )

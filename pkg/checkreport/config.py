"""Configuration for the check report.

Two layers: ``ReportSettings`` holds the display text (optionally overridden
from YAML), ``ReportInputs`` is the snapshot of pipeline environment values.
Both are read once at the boundary; nothing below this module touches
``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .scan import EMPTY_REPORT_TEXT, MISSING_REPORT_TEXT

DEFAULT_STATUS = "success"
DEFAULT_SCAN_FILE = "trivy_output.txt"


class ConfigError(RuntimeError):
    """Invalid settings file or missing required environment."""


def _coerce_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{field_name} must be a string")
    normalized = value.strip()
    if not normalized:
        raise ConfigError(f"{field_name} cannot be empty")
    return normalized


@dataclass(frozen=True)
class ReportSettings:
    """Display text for the rendered comment."""

    title: str = "🔍 Terragrunt Check Results"
    format_label: str = "HCL Format"
    format_icon: str = "🖌"
    validate_label: str = "HCL Validate"
    validate_icon: str = "🤖"
    scan_label: str = "Trivy"
    scan_icon: str = "🔒"
    static_scope: str = "All HCL files"
    note: str = "Terragrunt plan is disabled. To enable, configure AWS OIDC credentials in the workflow."
    scan_file: str = DEFAULT_SCAN_FILE
    missing_report_text: str = MISSING_REPORT_TEXT
    empty_report_text: str = EMPTY_REPORT_TEXT

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ReportSettings":
        """From dict."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in raw if key not in known)
        if unknown:
            raise ConfigError(f"unknown settings: {', '.join(unknown)}")
        values = {key: _coerce_str(value, key) for key, value in raw.items()}
        scan_file = values.get("scan_file")
        if scan_file is not None and Path(scan_file).is_absolute():
            raise ConfigError("scan_file must be relative to the workspace")
        return cls(**values)


def load_settings(path: Path | None) -> ReportSettings:
    """Load settings from a YAML file, or the defaults when path is None."""
    if path is None:
        return ReportSettings()
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"unable to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if raw is None:
        return ReportSettings()
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected mapping")
    return ReportSettings.from_dict(raw)


@dataclass(frozen=True)
class ReportInputs:
    """Pipeline values that feed one report."""

    workspace: Path
    fmt_status: str = DEFAULT_STATUS
    validate_status: str = DEFAULT_STATUS
    changed_stacks: str = ""

    def scan_path(self, settings: ReportSettings) -> Path:
        return self.workspace / settings.scan_file

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        workspace: str | Path | None = None,
    ) -> "ReportInputs":
        """Snapshot the pipeline environment.

        Empty statuses fall back to ``success``. The workspace comes from the
        explicit argument or ``GITHUB_WORKSPACE``; one of them is required.
        """
        env = os.environ if env is None else env
        root = workspace or env.get("GITHUB_WORKSPACE") or ""
        if not str(root).strip():
            raise ConfigError("GITHUB_WORKSPACE is not set")
        return cls(
            workspace=Path(root),
            fmt_status=env.get("FMT_STATUS") or DEFAULT_STATUS,
            validate_status=env.get("VALIDATE_STATUS") or DEFAULT_STATUS,
            changed_stacks=env.get("CHANGED_STACKS") or "",
        )

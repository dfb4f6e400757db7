"""Tests for settings loading and the environment boundary."""
from __future__ import annotations

from pathlib import Path

import pytest

from pkg.checkreport import ConfigError, ReportInputs, ReportSettings, load_settings

ROOT = Path(__file__).parent.parent
DEFAULTS_FILE = ROOT / "defaults" / "check-report.yml"


class TestLoadSettings:
    def test_none_returns_defaults(self):
        assert load_settings(None) == ReportSettings()

    def test_shipped_defaults_match_builtin(self):
        assert load_settings(DEFAULTS_FILE) == ReportSettings()

    def test_partial_override(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text('title: "Infra checks"\nscan_file: reports/trivy.txt\n', encoding="utf-8")
        settings = load_settings(path)
        assert settings.title == "Infra checks"
        assert settings.scan_file == "reports/trivy.txt"
        assert settings.format_label == "HCL Format"

    def test_empty_file_returns_defaults(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == ReportSettings()

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text("titel: typo\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="unknown settings: titel"):
            load_settings(path)

    def test_non_string_rejected(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text("title: 3\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="title must be a string"):
            load_settings(path)

    def test_empty_string_rejected(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text('note: "  "\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="note cannot be empty"):
            load_settings(path)

    def test_absolute_scan_file_rejected(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text("scan_file: /etc/passwd\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="relative"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="expected mapping"):
            load_settings(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text("title: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_settings(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="unable to read"):
            load_settings(tmp_path / "nope.yml")


class TestReportInputs:
    def test_defaults(self, tmp_path: Path):
        inputs = ReportInputs.from_env({"GITHUB_WORKSPACE": str(tmp_path)})
        assert inputs.workspace == tmp_path
        assert inputs.fmt_status == "success"
        assert inputs.validate_status == "success"
        assert inputs.changed_stacks == ""

    def test_empty_values_fall_back(self, tmp_path: Path):
        inputs = ReportInputs.from_env(
            {"GITHUB_WORKSPACE": str(tmp_path), "FMT_STATUS": "", "VALIDATE_STATUS": ""}
        )
        assert inputs.fmt_status == "success"
        assert inputs.validate_status == "success"

    def test_reads_values(self, tmp_path: Path):
        inputs = ReportInputs.from_env(
            {
                "GITHUB_WORKSPACE": str(tmp_path),
                "FMT_STATUS": "failure",
                "VALIDATE_STATUS": "skipped",
                "CHANGED_STACKS": "prod/vpc\nprod/eks",
            }
        )
        assert inputs.fmt_status == "failure"
        assert inputs.validate_status == "skipped"
        assert inputs.changed_stacks == "prod/vpc\nprod/eks"

    def test_explicit_workspace_wins(self, tmp_path: Path):
        inputs = ReportInputs.from_env({"GITHUB_WORKSPACE": "/elsewhere"}, workspace=tmp_path)
        assert inputs.workspace == tmp_path

    def test_workspace_required(self):
        with pytest.raises(ConfigError, match="GITHUB_WORKSPACE"):
            ReportInputs.from_env({})

    def test_scan_path_uses_settings(self, tmp_path: Path):
        inputs = ReportInputs(workspace=tmp_path)
        assert inputs.scan_path(ReportSettings()) == tmp_path / "trivy_output.txt"
        assert inputs.scan_path(ReportSettings(scan_file="out/scan.txt")) == tmp_path / "out" / "scan.txt"

    def test_reads_process_environment_by_default(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path))
        monkeypatch.setenv("FMT_STATUS", "failure")
        monkeypatch.delenv("VALIDATE_STATUS", raising=False)
        inputs = ReportInputs.from_env()
        assert inputs.fmt_status == "failure"
        assert inputs.validate_status == "success"

"""Unit tests for run-spec CLI execution."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from cli.main import main
from core.types import ExportRequest, ImportRequest
from pipeline.client import RespackClient
from pipeline.import_pipeline import ImportResult
from resources.summary import PackSummary
from tests.fixture_paths import fixture_path


def test_cli_run_spec_executes_summary_export_and_import_steps(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Run-spec command should route each step to SDK operations."""
    captured: dict[str, object] = {}

    def _fake_summary(
        self: RespackClient, module_paths: Sequence[str] | None = None
    ) -> PackSummary:
        captured["summary_modules"] = list(module_paths or [])
        captured["base_directory"] = self.config.base_directory.name
        return PackSummary(modules=1, resources=3)

    def _fake_export(self: RespackClient, request: ExportRequest) -> Path:
        captured["export_modules"] = request.module_paths
        captured["export_filter"] = request.if_not_locales
        return Path(request.output_dir) / f"{request.out_name}.zip"

    def _fake_import(self: RespackClient, request: ImportRequest) -> ImportResult:
        captured["import_file"] = request.package_path
        captured["import_ignore_empty"] = request.ignore_if_empty
        return ImportResult(summary=PackSummary(modules=1), written_files=())

    monkeypatch.setattr(RespackClient, "summary", _fake_summary)
    monkeypatch.setattr(RespackClient, "export", _fake_export)
    monkeypatch.setattr(RespackClient, "import_package", _fake_import)
    exit_code = main(["run-spec", str(fixture_path("run_spec/valid_pipeline.yaml"))])
    output = capsys.readouterr().out.strip().splitlines()

    assert (
        exit_code == 0
        and output[0].startswith("summary=")
        and output[1] == f"package_path={Path('build/packages/translations.zip')}"
        and output[2].startswith("import_summary=")
        and output[3] == "steps_completed=3"
        and captured
        == {
            "summary_modules": ["tests/fixtures/modules/app_core/cartridge"],
            "base_directory": "modules",
            "export_modules": ("tests/fixtures/modules/app_core/cartridge",),
            "export_filter": ("fr",),
            "import_file": "build/packages/translations.zip",
            "import_ignore_empty": False,
        }
    )


def test_cli_run_spec_missing_import_file_returns_error_code(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Import steps without a file fail the run."""
    exit_code = main(["run-spec", str(fixture_path("run_spec/missing_file.yaml"))])

    assert exit_code == 1 and "'file'" in capsys.readouterr().out


def test_cli_run_spec_unknown_step_field_returns_error_code(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Step fields a command does not understand are rejected."""
    exit_code = main(["run-spec", str(fixture_path("run_spec/unknown_step_field.yaml"))])

    assert exit_code == 1 and "dataset" in capsys.readouterr().out

"""Unit tests for the export workflow."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import RespackConfig
from core.errors import RespackConfigError, RespackSourceError
from core.types import ExportRequest
from pipeline.export_pipeline import build_package_name, export_package
from tests.fixture_paths import fixture_path
from transcode.archive import read_zip
from transcode.json_format import read_json_document


def _config(base_directory: Path) -> RespackConfig:
    return RespackConfig(
        base_directory=base_directory,
        field_separator=";",
        quote_character='"',
        escape_character='"',
        eol="\n",
        encoding="utf-8",
    )


def _module_paths() -> tuple[str, ...]:
    return (str(fixture_path("modules")) + "/**/cartridge",)


def test_export_package_writes_zip_archive(tmp_path) -> None:
    """CSV exports should produce a zip named after the package."""
    request = ExportRequest(module_paths=_module_paths(), output_dir=str(tmp_path), out_name="pkg")

    package_path = export_package(request, _config(tmp_path))

    assert package_path == tmp_path / "pkg.zip" and read_zip(package_path).member_paths == [
        "pkg/app_core/account.csv",
        "pkg/app_storefront/checkout.csv",
    ]


def test_export_package_writes_json_document(tmp_path) -> None:
    """JSON exports should produce one document."""
    request = ExportRequest(
        module_paths=_module_paths(),
        output_dir=str(tmp_path),
        out_name="pkg",
        file_format="json",
        if_not_locales=("de_DE",),
    )

    package_path = export_package(request, _config(tmp_path))

    document = read_json_document(package_path)
    assert package_path.name == "pkg.json" and document["app_storefront"] == {
        "checkout": {"checkout.cancel": {"default": "Cancel"}}
    }


def test_export_package_generates_default_name(tmp_path) -> None:
    """Missing package names fall back to a timestamped name."""
    request = ExportRequest(module_paths=_module_paths(), output_dir=str(tmp_path))

    package_path = export_package(request, _config(tmp_path))

    assert package_path.name.startswith("properties_") and package_path.suffix == ".zip"


def test_build_package_name_uses_prefix() -> None:
    """Generated names carry the properties prefix."""
    assert build_package_name().startswith("properties_")


def test_export_package_rejects_invalid_filter_locale(tmp_path) -> None:
    """Filter locales must be locale codes."""
    request = ExportRequest(module_paths=_module_paths(), if_not_locales=("French",))

    with pytest.raises(RespackConfigError):
        export_package(request, _config(tmp_path))


def test_export_package_rejects_missing_module_directory(tmp_path) -> None:
    """Explicit module paths must exist."""
    request = ExportRequest(module_paths=(str(tmp_path / "absent"),), output_dir=str(tmp_path))

    with pytest.raises(RespackSourceError):
        export_package(request, _config(tmp_path))

"""Unit tests for the SDK client and public SDK surface."""

from __future__ import annotations

from dataclasses import replace

import pytest

import respack
from core.config import RespackConfig
from core.errors import RespackConfigError
from pipeline.client import RespackClient
from tests.fixture_paths import fixture_path


def test_public_sdk_exports_resolve() -> None:
    """Every name listed by the SDK module should be importable."""
    assert all(hasattr(respack, name) for name in respack.__all__)


def test_summary_reads_module_paths() -> None:
    """Client summaries should count fixture resources."""
    client = RespackClient(RespackConfig.from_env())

    summary = client.summary([str(fixture_path("modules/app_storefront/cartridge"))])

    assert (summary.modules, summary.resources, summary.locales) == (1, 2, ("default", "de_DE"))


def test_with_base_directory_returns_new_client(tmp_path) -> None:
    """Cloning should change only the base directory."""
    client = RespackClient(RespackConfig.from_env())

    clone = client.with_base_directory(str(tmp_path))

    assert clone.config == replace(client.config, base_directory=tmp_path.resolve())


def test_with_encoding_validates_codec() -> None:
    """Unknown encodings are rejected when cloning."""
    client = RespackClient(RespackConfig.from_env())

    with pytest.raises(RespackConfigError):
        client.with_encoding("not-a-codec")

"""Unit tests for modules."""

from __future__ import annotations

import pytest

from core.errors import RespackImportError
from core.types import ImportOptions
from properties.reader import parse_properties
from resources.bundle import Bundle
from resources.module import Module
from resources.summary import ModuleSummary


def test_summary_folds_bundle_counts_and_locales() -> None:
    """Module summaries should count bundles, keys, and locale union."""
    module = Module("app_core")
    module.add_bundle(Bundle("account", "default", parse_properties("a=1\nb=2\n")))
    module.add_bundle(Bundle("checkout", "fr", parse_properties("c=3\n")))

    assert module.summary() == ModuleSummary(
        bundle_count=2, resource_count=3, locales=("default", "fr")
    )


def test_add_bundle_replaces_same_name() -> None:
    """Bundles are unique by name within a module."""
    module = Module("app_core")
    module.add_bundle(Bundle("account", "default", parse_properties("a=1\n")))
    replacement = Bundle("account", "fr", parse_properties("a=un\n"))
    module.add_bundle(replacement)

    assert module.bundles == [replacement] and module.get_bundle("account") is replacement


def test_save_without_directory_raises_error() -> None:
    """A module without a directory anchor cannot be saved."""
    module = Module("app_core")
    module.add_bundle(Bundle("account", "default", parse_properties("a=1\n")))

    with pytest.raises(RespackImportError):
        module.save(ImportOptions())


def test_save_writes_bundles_under_module_directory(tmp_path) -> None:
    """Each bundle locale should land under the module content root."""
    module = Module("app_core", tmp_path / "app_core" / "cartridge")
    module.add_bundle(Bundle("account", "fr", parse_properties("a=un\n")))

    written = module.save(ImportOptions())

    assert written == [
        tmp_path / "app_core" / "cartridge" / "templates" / "resources" / "account_fr.properties"
    ]

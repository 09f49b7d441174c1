"""Integration tests for export, translation, and import round trips."""

from __future__ import annotations

import zipfile
from dataclasses import replace

from core.config import RespackConfig
from core.types import ExportRequest, ImportRequest
from pipeline.client import RespackClient
from pipeline.import_pipeline import load_package
from resources.pack import ResourcePack
from tests.fixture_paths import copy_module_tree


def _client(tree_root) -> RespackClient:
    config = replace(RespackConfig.from_env(), base_directory=tree_root, eol="\n")
    return RespackClient(config)


def test_export_then_import_preserves_every_translation(tmp_path) -> None:
    """Re-ingesting an exported package should yield the original translations."""
    tree_root = copy_module_tree(tmp_path)
    client = _client(tree_root)
    module_paths = (str(tree_root) + "/**/cartridge",)
    original = client.build_pack(module_paths)

    package_path = client.export(
        ExportRequest(module_paths=module_paths, output_dir=str(tmp_path), out_name="pkg")
    )
    restored = load_package(package_path, client.config)

    mismatches = []
    for module in original.modules:
        restored_module = restored.get_module(module.name)
        for bundle in module.bundles:
            restored_bundle = restored_module.get_bundle(bundle.name) if restored_module else None
            for entry in bundle.entries:
                restored_entry = restored_bundle.get_entry(entry.key) if restored_bundle else None
                for locale in entry.locales:
                    restored_text = (
                        restored_entry.get_translation(locale) if restored_entry else None
                    )
                    if restored_text != entry.get_translation(locale):
                        mismatches.append((module.name, bundle.name, entry.key, locale))
    assert mismatches == []


def test_translated_package_updates_source_files(tmp_path) -> None:
    """A translator's edits should land in the locale files on import."""
    tree_root = copy_module_tree(tmp_path)
    client = _client(tree_root)
    module_paths = (str(tree_root / "app_core" / "cartridge"),)
    package_path = client.export(
        ExportRequest(
            module_paths=module_paths,
            output_dir=str(tmp_path),
            out_name="pkg",
            if_not_locales=("fr",),
        )
    )
    with zipfile.ZipFile(package_path) as archive:
        exported = archive.read("pkg/app_core/account.csv").decode("utf-8")
    translated = exported.replace(
        "account.help;First line second line;",
        "account.help;First line second line;Premiere ligne seconde ligne",
    )
    with zipfile.ZipFile(package_path, "w") as archive:
        archive.writestr("pkg/app_core/account.csv", translated)

    result = client.import_package(ImportRequest(package_path=str(package_path)))

    resources_dir = tree_root / "app_core" / "cartridge" / "templates" / "resources"
    fr_file = resources_dir / "account_fr.properties"
    pack = ResourcePack.from_modules(list(module_paths))
    help_entry = pack.get_module("app_core").get_bundle("account").get_entry("account.help")
    assert (
        result.summary.resources == 1
        and fr_file.read_text(encoding="utf-8").endswith(
            "account.help=Premiere ligne seconde ligne\n"
        )
        and help_entry.get_translation("fr") == "Premiere ligne seconde ligne"
    )

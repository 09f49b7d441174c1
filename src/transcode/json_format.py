"""JSON exchange format.

The document maps module names to bundle names to keys to per-locale text:
``{"app_core": {"account": {"title": {"default": "Account", "fr": "Compte"}}}}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from core.errors import RespackArchiveError
from core.events import (
    UNPACK_AFTER_PARSE_ENTRY,
    UNPACK_BEFORE_PARSE_ENTRY,
    UNPACK_INVALID_ENTRY,
    EventChannel,
)
from core.logging_config import get_logger
from core.types import ExportOptions, ParseOptions
from resources.bundle import Bundle
from resources.entry import BundleEntry
from transcode.common import ModuleResolver, accept_locales, should_include

if TYPE_CHECKING:
    from resources.pack import ResourcePack

_LOGGER = get_logger(__name__)

JsonDocument = dict[str, dict[str, dict[str, dict[str, str]]]]


class JsonExporter:
    """Exports a resource pack as one nested JSON document."""

    def __init__(self, options: ExportOptions) -> None:
        self._exclude_if_all = tuple(options.if_not_locales)

    def export(self, pack: ResourcePack) -> JsonDocument:
        """Build the document; modules and bundles without included entries are omitted."""
        document: JsonDocument = {}
        for module in pack.modules:
            for bundle in module.bundles:
                for entry in bundle.entries:
                    if not should_include(entry, self._exclude_if_all):
                        continue
                    bundle_payload = document.setdefault(module.name, {}).setdefault(
                        bundle.name, {}
                    )
                    bundle_payload[entry.key] = {
                        locale: entry.get_translation(locale, "") for locale in entry.locales
                    }
        return document


class JsonParser:
    """Reads a JSON document back into a resource pack."""

    def __init__(self, options: ParseOptions) -> None:
        self._base_directory = options.base_directory

    def parse(
        self,
        source: Mapping[str, Any],
        pack: ResourcePack,
        events: EventChannel,
    ) -> ResourcePack:
        """Attach one bundle per resolvable module/bundle object to ``pack``."""
        resolver = ModuleResolver(base_directory=self._base_directory, events=events)
        for module_name, bundles in source.items():
            if not isinstance(bundles, Mapping):
                _report_invalid_entry(str(module_name), events)
                continue
            module = resolver.resolve(pack, str(module_name))
            if module is None:
                continue
            for bundle_name, entries in bundles.items():
                entry_name = f"{module_name}/{bundle_name}"
                if not isinstance(entries, Mapping):
                    _report_invalid_entry(entry_name, events)
                    continue
                events.emit(
                    UNPACK_BEFORE_PARSE_ENTRY,
                    entry=entry_name,
                    module=module_name,
                    bundle=bundle_name,
                )
                bundle = _to_bundle(str(bundle_name), entries, entry_name, events)
                module.add_bundle(bundle)
                events.emit(
                    UNPACK_AFTER_PARSE_ENTRY,
                    entry=entry_name,
                    module=module_name,
                    bundle=bundle_name,
                    resource_count=bundle.entry_count,
                )
        return pack


def write_json_document(document: JsonDocument, file_path: Path) -> Path:
    """Write ``document`` as indented UTF-8 JSON.

    Raises:
        RespackArchiveError: If the file cannot be written.
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as error:
        raise RespackArchiveError(
            f"Failed to write JSON document {file_path}: {error}. "
            "Check the output directory and retry the export."
        ) from error
    return file_path


def read_json_document(file_path: Path) -> Mapping[str, Any]:
    """Read a JSON document produced by the JSON exporter.

    Raises:
        RespackArchiveError: If the file is unreadable or not a JSON object.
    """
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as error:
        raise RespackArchiveError(
            f"Failed to read JSON document {file_path}: {error}. Check the file path."
        ) from error
    except json.JSONDecodeError as error:
        raise RespackArchiveError(
            f"Failed to parse JSON document {file_path}: {error.msg}. "
            "Fix the JSON syntax and retry the import."
        ) from error
    if not isinstance(payload, dict):
        raise RespackArchiveError(
            f"Invalid JSON document {file_path}: expected an object at top level."
        )
    return payload


def _to_bundle(
    bundle_name: str,
    entries: Mapping[str, Any],
    entry_name: str,
    events: EventChannel,
) -> Bundle:
    """Convert one bundle object into a bundle of queued translations."""
    bundle = Bundle(bundle_name)
    candidates: dict[str, None] = {}
    for translations in entries.values():
        if isinstance(translations, Mapping):
            for locale in translations:
                candidates.setdefault(str(locale), None)
    accepted = set(accept_locales(candidates, entry_name, events))
    for key, translations in entries.items():
        if not isinstance(translations, Mapping):
            _LOGGER.warning("json_entry_skipped", entry=entry_name, key=key)
            continue
        entry = BundleEntry(str(key))
        for locale, text in translations.items():
            if locale in accepted and isinstance(text, str):
                entry.queue_translation(locale, text)
        bundle.queue_entry(entry)
    return bundle


def _report_invalid_entry(entry_name: str, events: EventChannel) -> None:
    _LOGGER.warning("json_member_invalid", entry=entry_name)
    events.emit(UNPACK_INVALID_ENTRY, entry=entry_name)

"""Resource pack: every bundle of a set of modules.

The pack is the entry and exit point of the model. It is built from source
resource files or from an exchange package, exported to an exchange format,
and saved back into resource files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from core.constants import DEFAULT_MODULE_GLOB
from core.events import (
    EXPORT_COMPLETE,
    EXPORT_START,
    IMPORT_AFTER_MODULE,
    IMPORT_BEFORE_MODULE,
    PACK_AFTER_FILE,
    PACK_BEFORE_FILE,
    PACK_COMPLETE,
    PACK_START,
    PACK_UNMATCHED_FILE,
    UNPACK_COMPLETE,
    UNPACK_START,
    EventChannel,
    resolve_channel,
)
from core.logging_config import get_logger
from core.types import ExportOptions, ImportOptions, ParseOptions
from properties.property import Property
from properties.reader import read_properties_file
from resources.bundle import Bundle
from resources.discovery import find_source_files, match_source_path
from resources.module import Module
from resources.summary import PackSummary, merge_locales
from transcode.archive import TabularPackage
from transcode.json_format import JsonDocument
from transcode.registry import get_format_adapter

_LOGGER = get_logger(__name__)


class ResourcePack:
    """All resource bundles of a set of modules, keyed by module name."""

    def __init__(
        self,
        file_paths: Sequence[Path | str] | None = None,
        events: EventChannel | None = None,
    ) -> None:
        """Create a pack, optionally reading the given resource files.

        Args:
            file_paths: Resource files to read; an empty pack when ``None``.
            events: Optional lifecycle event channel.
        """
        self._modules: dict[str, Module] = {}
        if file_paths is not None:
            self.add_source_files(file_paths, events)

    @classmethod
    def from_modules(
        cls,
        module_paths: Sequence[str] | None = None,
        events: EventChannel | None = None,
    ) -> "ResourcePack":
        """Build a pack from every resource file found under module directories.

        Args:
            module_paths: Directories or glob patterns; ``./**/cartridge`` by default.
            events: Optional lifecycle event channel.

        Returns:
            The populated pack.

        Raises:
            RespackSourceError: If a module path or resource file cannot be read.
        """
        file_paths = find_source_files(module_paths or [DEFAULT_MODULE_GLOB])
        return cls(file_paths, events)

    @classmethod
    def from_tabular_package(
        cls,
        package: TabularPackage,
        options: ParseOptions,
        events: EventChannel | None = None,
    ) -> "ResourcePack":
        """Build a pack from a CSV exchange package.

        Raises:
            RespackParseError: If a member cannot be tokenized.
        """
        return cls._parse("csv", package, options, events)

    @classmethod
    def from_json(
        cls,
        document: Mapping[str, Any],
        options: ParseOptions,
        events: EventChannel | None = None,
    ) -> "ResourcePack":
        """Build a pack from a JSON exchange document."""
        return cls._parse("json", document, options, events)

    @classmethod
    def _parse(
        cls,
        file_format: str,
        source: object,
        options: ParseOptions,
        events: EventChannel | None,
    ) -> "ResourcePack":
        channel = resolve_channel(events)
        channel.emit(UNPACK_START)
        parser = get_format_adapter(file_format).parser(options)
        pack = parser.parse(source, cls(), channel)
        channel.emit(UNPACK_COMPLETE)
        return pack

    def add_source_files(
        self,
        file_paths: Sequence[Path | str],
        events: EventChannel | None = None,
    ) -> None:
        """Read resource files and merge them into the pack.

        Files whose path has an unexpected shape are merged under empty
        module and bundle names.

        Raises:
            RespackSourceError: If a file cannot be read.
        """
        channel = resolve_channel(events)
        channel.emit(PACK_START, file_count=len(file_paths))
        for file_index, raw_path in enumerate(file_paths):
            file_path = Path(raw_path)
            match = match_source_path(file_path)
            if not match.matched:
                _LOGGER.warning("source_path_unmatched", file_path=str(file_path))
                channel.emit(PACK_UNMATCHED_FILE, file_path=str(file_path))
            file_fields = {
                "file_path": str(file_path),
                "module": match.module,
                "bundle": match.bundle,
                "locale": match.locale,
                "file_index": file_index,
            }
            channel.emit(PACK_BEFORE_FILE, **file_fields)
            properties = read_properties_file(file_path)
            self.add_properties(
                match.module, match.bundle, match.locale, properties, match.module_path
            )
            channel.emit(PACK_AFTER_FILE, **file_fields, properties_count=len(properties))
        channel.emit(PACK_COMPLETE)

    def add_properties(
        self,
        module_name: str,
        bundle_name: str,
        locale: str,
        resources: Iterable[Property],
        module_path: Path | None = None,
    ) -> None:
        """Merge the properties of one resource file.

        Args:
            module_name: Module the file belongs to.
            bundle_name: Bundle the file belongs to.
            locale: Locale the file translates.
            resources: Properties read from the file.
            module_path: Module content root, recorded when the module has none.
        """
        module = self._modules.get(module_name)
        if module is None:
            module = Module(module_name, module_path)
        elif module.path is None and module_path is not None:
            module.path = module_path
        bundle = module.get_bundle(bundle_name)
        if bundle is None:
            bundle = Bundle(bundle_name)
            module.add_bundle(bundle)
        bundle.add_translations(locale, resources)
        self._modules[module_name] = module

    @property
    def modules(self) -> list[Module]:
        """Modules in order of first discovery."""
        return list(self._modules.values())

    def get_module(self, name: str) -> Module | None:
        """Return the module called ``name`` when present."""
        return self._modules.get(name)

    def create_module(self, name: str, path: Path | None = None) -> Module:
        """Create an empty module, replacing any module with the same name."""
        module = Module(name, path)
        self._modules[name] = module
        return module

    def summary(self) -> PackSummary:
        """Fold module summaries into global counts."""
        bundles = 0
        resources = 0
        locales: tuple[str, ...] = ()
        details = {}
        for module in self._modules.values():
            module_summary = module.summary()
            details[module.name] = module_summary
            bundles += module_summary.bundle_count
            resources += module_summary.resource_count
            locales = merge_locales(locales, module_summary.locales)
        return PackSummary(
            modules=len(self._modules),
            bundles=bundles,
            locales=locales,
            resources=resources,
            details=details,
        )

    def save(self, options: ImportOptions, events: EventChannel | None = None) -> list[Path]:
        """Upsert every module's translations into its resource files.

        Raises:
            RespackImportError: If a module has no directory or a file cannot be written.
        """
        channel = resolve_channel(events)
        written: list[Path] = []
        for module in self._modules.values():
            channel.emit(IMPORT_BEFORE_MODULE, module=module.name)
            written.extend(module.save(options, channel))
            channel.emit(IMPORT_AFTER_MODULE, module=module.name)
        return written

    def to_tabular_package(
        self,
        options: ExportOptions,
        events: EventChannel | None = None,
    ) -> TabularPackage:
        """Export the pack as a CSV exchange package."""
        package: TabularPackage = self._export("csv", options, events)
        return package

    def to_json(
        self,
        options: ExportOptions,
        events: EventChannel | None = None,
    ) -> JsonDocument:
        """Export the pack as a JSON exchange document."""
        document: JsonDocument = self._export("json", options, events)
        return document

    def _export(
        self,
        file_format: str,
        options: ExportOptions,
        events: EventChannel | None,
    ) -> Any:
        channel = resolve_channel(events)
        channel.emit(EXPORT_START)
        result = get_format_adapter(file_format).exporter(options).export(self)
        channel.emit(EXPORT_COMPLETE, resources=self.summary().resources)
        return result

    def __repr__(self) -> str:
        return f"ResourcePack(modules={list(self._modules)!r})"

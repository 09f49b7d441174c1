"""Resource bundle: every key of one scope across all its locales."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from core.constants import (
    DEFAULT_LOCALE,
    PROPERTIES_ENCODING,
    PROPERTIES_EXTENSION,
    RESOURCES_DIR_PARTS,
)
from core.errors import RespackImportError
from core.events import IMPORT_AFTER_FILE, IMPORT_BEFORE_FILE, EventChannel, resolve_channel
from core.logging_config import get_logger
from core.types import ImportOptions
from properties.editor import PropertiesEditor
from properties.property import Property
from resources.entry import BundleEntry

_LOGGER = get_logger(__name__)


class Bundle:
    """Named collection of entries sharing one scope within a module.

    The bundle records every locale it was given, ordered by first sighting,
    so its locales always cover those of its entries. A locale read from a
    file without keys is kept as well.
    """

    def __init__(
        self,
        name: str,
        locale: str | None = None,
        resources: Iterable[Property] | None = None,
    ) -> None:
        self.name = name
        self._seen_locales: list[str] = []
        self._entries: dict[str, BundleEntry] = {}
        if locale is not None and resources is not None:
            self.add_translations(locale, resources)

    def add_translations(self, locale: str, resources: Iterable[Property]) -> None:
        """Merge the properties of one source file for ``locale``.

        The locale is recorded even when ``resources`` is empty. Existing
        entries gain the locale; unknown keys create new entries.
        """
        self._register_locales([locale])
        for resource in resources:
            entry = self._entries.get(resource.key)
            if entry is None:
                self._entries[resource.key] = BundleEntry(resource.key, locale, resource)
            else:
                entry.register_translation(locale, resource)

    def queue_entry(self, entry: BundleEntry) -> None:
        """Adopt a fully populated entry; replaces any entry with the same key."""
        self._register_locales(entry.locales)
        self._entries[entry.key] = entry

    def get_entry(self, key: str) -> BundleEntry | None:
        """Return the entry for ``key`` when present."""
        return self._entries.get(key)

    @property
    def locales(self) -> list[str]:
        """Recorded locales in first-seen order."""
        return list(self._seen_locales)

    @property
    def entries(self) -> list[BundleEntry]:
        """Entries in discovery order."""
        return list(self._entries.values())

    @property
    def entry_count(self) -> int:
        """Number of distinct keys."""
        return len(self._entries)

    def resource_path(self, directory: Path, locale: str) -> Path:
        """Return the file holding this bundle's ``locale`` translations."""
        suffix = "" if locale == DEFAULT_LOCALE else f"_{locale}"
        file_name = f"{self.name}{suffix}{PROPERTIES_EXTENSION}"
        return directory.joinpath(*RESOURCES_DIR_PARTS, file_name)

    def save(
        self,
        directory: Path,
        options: ImportOptions,
        events: EventChannel | None = None,
    ) -> list[Path]:
        """Upsert every entry into the per-locale files under ``directory``.

        Keys absent from the bundle are never removed from the files. With
        ``options.ignore_if_empty`` an empty translation leaves its key untouched.

        Args:
            directory: Module content root.
            options: Merge options.
            events: Optional lifecycle event channel.

        Returns:
            Paths of the written files.

        Raises:
            RespackImportError: If a target file cannot be read or written.
        """
        channel = resolve_channel(events)
        written: list[Path] = []
        for locale in self.locales:
            file_path = self.resource_path(directory, locale)
            channel.emit(IMPORT_BEFORE_FILE, path=str(file_path))
            editor = PropertiesEditor(_read_target(file_path))
            upsert_count = 0
            for entry in self._entries.values():
                text = entry.get_translation(locale, "")
                if text or not options.ignore_if_empty:
                    editor.upsert(entry.key, text, escape_special=options.escape_special)
                    upsert_count += 1
            _write_target(file_path, editor.serialize())
            written.append(file_path)
            _LOGGER.debug(
                "bundle_file_saved",
                bundle=self.name,
                locale=locale,
                path=str(file_path),
                upsert_count=upsert_count,
            )
            channel.emit(IMPORT_AFTER_FILE, path=str(file_path), upsert_count=upsert_count)
        return written

    def _register_locales(self, locales: Iterable[str]) -> None:
        for locale in locales:
            if locale not in self._seen_locales:
                self._seen_locales.append(locale)

    def __repr__(self) -> str:
        return f"Bundle(name={self.name!r}, entries={self.entry_count}, locales={self.locales!r})"


def _read_target(file_path: Path) -> str:
    """Read an existing target file, or return empty text when absent."""
    if not file_path.exists():
        return ""
    try:
        return file_path.read_text(encoding=PROPERTIES_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise RespackImportError(
            f"Failed to read merge target {file_path}: {error}. "
            "Check file permissions and encoding."
        ) from error


def _write_target(file_path: Path, content: str) -> None:
    """Write merged content, creating parent directories as needed."""
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding=PROPERTIES_ENCODING, newline="") as handle:
            handle.write(content)
    except OSError as error:
        raise RespackImportError(
            f"Failed to write merge target {file_path}: {error}. "
            "Check directory permissions and retry the import."
        ) from error

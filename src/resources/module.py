"""Module: a filesystem-anchored container of resource bundles."""

from __future__ import annotations

from pathlib import Path

from core.errors import RespackImportError
from core.events import EventChannel
from core.types import ImportOptions
from resources.bundle import Bundle
from resources.summary import ModuleSummary, merge_locales


class Module:
    """Named group of bundles rooted at one content directory."""

    def __init__(self, name: str, path: Path | None = None) -> None:
        self.name = name
        self.path = path
        self._bundles: dict[str, Bundle] = {}

    @property
    def bundles(self) -> list[Bundle]:
        """Bundles in insertion order."""
        return list(self._bundles.values())

    def get_bundle(self, name: str) -> Bundle | None:
        """Return the bundle called ``name`` when present."""
        return self._bundles.get(name)

    def add_bundle(self, bundle: Bundle) -> None:
        """Attach ``bundle``, replacing any bundle with the same name."""
        self._bundles[bundle.name] = bundle

    def save(self, options: ImportOptions, events: EventChannel | None = None) -> list[Path]:
        """Save every bundle under this module's directory.

        Raises:
            RespackImportError: If the module has no directory anchor.
        """
        if self.path is None:
            raise RespackImportError(
                f"Module '{self.name}' has no directory on disk. "
                "Build the pack from module directories or resolve modules before saving."
            )
        written: list[Path] = []
        for bundle in self._bundles.values():
            written.extend(bundle.save(self.path, options, events))
        return written

    def summary(self) -> ModuleSummary:
        """Fold bundle counts and locales into a summary."""
        resource_count = 0
        locales: tuple[str, ...] = ()
        for bundle in self._bundles.values():
            resource_count += bundle.entry_count
            locales = merge_locales(locales, bundle.locales)
        return ModuleSummary(
            bundle_count=len(self._bundles),
            resource_count=resource_count,
            locales=locales,
        )

    def __repr__(self) -> str:
        return f"Module(name={self.name!r}, path={self.path!r}, bundles={len(self._bundles)})"

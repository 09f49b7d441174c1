"""Capabilities shared by every exchange format.

Each format provides an exporter and a parser satisfying the protocols
below. Inclusion filtering, member path splitting, locale column checks,
and module resolution behave the same for every format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Iterable, Protocol, TypeVar

from core.constants import ARCHIVER_METADATA_DIR, ARCHIVER_SIDECAR_PREFIX
from core.events import (
    UNPACK_AMBIGUOUS_MODULE,
    UNPACK_INVALID_LOCALE,
    UNPACK_UNKNOWN_MODULE,
    EventChannel,
)
from core.locales import is_valid_locale
from core.logging_config import get_logger
from resources.discovery import find_module_roots
from resources.entry import BundleEntry

if TYPE_CHECKING:
    from resources.module import Module
    from resources.pack import ResourcePack

_LOGGER = get_logger(__name__)

ExportT_co = TypeVar("ExportT_co", covariant=True)
SourceT_contra = TypeVar("SourceT_contra", contravariant=True)


class Exporter(Protocol[ExportT_co]):
    """Converts a resource pack into one exchange artifact."""

    def export(self, pack: ResourcePack) -> ExportT_co: ...


class Parser(Protocol[SourceT_contra]):
    """Reads one exchange artifact into a resource pack."""

    def parse(
        self,
        source: SourceT_contra,
        pack: ResourcePack,
        events: EventChannel,
    ) -> ResourcePack: ...


def should_include(entry: BundleEntry, exclude_if_all: tuple[str, ...]) -> bool:
    """Return whether ``entry`` passes the export inclusion filter.

    With a non-empty ``exclude_if_all``, entries that already have every
    listed locale are dropped so only entries still missing one remain.
    """
    if exclude_if_all:
        return not entry.has_all_locales(exclude_if_all)
    return True


@dataclass(frozen=True)
class MemberPath:
    """Module and bundle names carried by a package member path."""

    module: str
    bundle: str


def split_member_path(path: str, extension: str) -> MemberPath | None:
    """Split ``.../<module>/<bundle><extension>`` into names, or ``None``.

    Metadata written by macOS archivers (``__MACOSX/`` folders and ``._``
    sidecar files) is not a bundle and yields ``None``.
    """
    member = PurePosixPath(path)
    if member.suffix.lower() != extension or len(member.parts) < 2:
        return None
    if ARCHIVER_METADATA_DIR in member.parts or member.name.startswith(ARCHIVER_SIDECAR_PREFIX):
        return None
    module_name = member.parts[-2].strip()
    bundle_name = member.stem.strip()
    if not module_name or not bundle_name:
        return None
    return MemberPath(module=module_name, bundle=bundle_name)


def accept_locales(
    candidates: Iterable[str],
    entry_name: str,
    events: EventChannel,
) -> list[str]:
    """Keep valid locale codes and report the rejected ones."""
    accepted: list[str] = []
    for candidate in candidates:
        if is_valid_locale(candidate):
            accepted.append(candidate)
            continue
        _LOGGER.warning("locale_rejected", locale=candidate, entry=entry_name)
        events.emit(UNPACK_INVALID_LOCALE, locale=candidate, entry=entry_name)
    return accepted


@dataclass
class ModuleResolver:
    """Resolves module names to directories, once per name per run.

    Unknown and ambiguous names are remembered so every later member of the
    same module is skipped without another search or report.
    """

    base_directory: Path
    events: EventChannel
    rejected: set[str] = field(default_factory=set)

    def resolve(self, pack: ResourcePack, module_name: str) -> Module | None:
        """Return the pack module for ``module_name``, creating it when found."""
        if module_name in self.rejected:
            return None
        module = pack.get_module(module_name)
        if module is not None:
            return module
        matches = find_module_roots(self.base_directory, module_name)
        if not matches:
            self._reject_unknown(module_name)
            return None
        if len(matches) > 1:
            self._reject_ambiguous(module_name, matches)
            return None
        return pack.create_module(module_name, matches[0])

    def _reject_unknown(self, module_name: str) -> None:
        self.rejected.add(module_name)
        directory = str(self.base_directory)
        _LOGGER.warning("module_unresolved", module=module_name, directory=directory)
        self.events.emit(UNPACK_UNKNOWN_MODULE, module=module_name, directory=directory)

    def _reject_ambiguous(self, module_name: str, matches: list[Path]) -> None:
        self.rejected.add(module_name)
        directory = str(self.base_directory)
        match_rows = [str(match) for match in matches]
        _LOGGER.warning(
            "module_ambiguous", module=module_name, directory=directory, matches=match_rows
        )
        self.events.emit(
            UNPACK_AMBIGUOUS_MODULE,
            module=module_name,
            directory=directory,
            matches=match_rows,
        )

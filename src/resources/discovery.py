"""Filesystem discovery for modules and their resource files.

This module expands module arguments into source files, extracts
module/bundle/locale identifiers from file paths, and resolves module
names back to directories when an exchange package is imported.
"""

from __future__ import annotations

import glob
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from core.constants import (
    DEFAULT_LOCALE,
    MODULE_CONTENT_DIR_NAME,
    PROPERTIES_EXTENSION,
    RESOURCES_DIR_PARTS,
)
from core.errors import RespackSourceError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

_SOURCE_PATH_PATTERN = re.compile(
    r"(?P<root>(?:.*/)?(?P<module>[^/]+)/"
    + re.escape(MODULE_CONTENT_DIR_NAME)
    + r")/"
    + "/".join(re.escape(part) for part in RESOURCES_DIR_PARTS)
    + r"/(?P<bundle>[^/.]+?)(?:_(?P<locale>[a-z]{2}(?:_[A-Z]{2})?))?"
    + re.escape(PROPERTIES_EXTENSION)
    + r"$"
)
_GLOB_MAGIC = "*?["


@dataclass(frozen=True)
class SourcePathMatch:
    """Identifiers extracted from one source file path.

    Attributes:
        module: Module name, empty when the path has an unexpected shape.
        bundle: Bundle name, empty when the path has an unexpected shape.
        locale: Locale code, ``default`` for unsuffixed files, empty when unmatched.
        module_path: Module content root, ``None`` when unmatched.
    """

    module: str
    bundle: str
    locale: str
    module_path: Path | None

    @property
    def matched(self) -> bool:
        """Return whether the path had the expected shape."""
        return self.module_path is not None


def match_source_path(file_path: Path | str) -> SourcePathMatch:
    """Extract module, bundle, and locale from a resource file path.

    Paths that do not follow ``<module>/cartridge/templates/resources/<bundle>[_<locale>]``
    yield empty identifiers instead of failing.
    """
    posix_path = Path(file_path).as_posix()
    match = _SOURCE_PATH_PATTERN.search(posix_path)
    if match is None:
        return SourcePathMatch(module="", bundle="", locale="", module_path=None)
    return SourcePathMatch(
        module=match.group("module"),
        bundle=match.group("bundle"),
        locale=match.group("locale") or DEFAULT_LOCALE,
        module_path=Path(match.group("root")),
    )


def find_source_files(module_paths: Sequence[str]) -> list[Path]:
    """List resource files under the given module directories.

    Args:
        module_paths: Explicit directories or glob patterns.

    Returns:
        Unique resource file paths, sorted per module directory.

    Raises:
        RespackSourceError: If an explicit directory does not exist.
    """
    files: list[Path] = []
    seen: set[Path] = set()
    for module_dir in _expand_module_dirs(module_paths):
        pattern = "**/" + "/".join(RESOURCES_DIR_PARTS) + "/*" + PROPERTIES_EXTENSION
        for file_path in sorted(module_dir.glob(pattern)):
            if file_path.is_file() and file_path not in seen:
                seen.add(file_path)
                files.append(file_path)
    return files


def find_module_roots(base_directory: Path, module_name: str) -> list[Path]:
    """Return every content root under ``base_directory`` for ``module_name``.

    Args:
        base_directory: Directory searched recursively.
        module_name: Module directory name.

    Returns:
        Sorted candidate directories; zero, one, or many.
    """
    pattern = f"**/{glob.escape(module_name)}/{MODULE_CONTENT_DIR_NAME}"
    return [path for path in sorted(base_directory.glob(pattern)) if path.is_dir()]


def _expand_module_dirs(module_paths: Sequence[str]) -> list[Path]:
    """Expand glob patterns and validate explicit module directories."""
    directories: list[Path] = []
    for raw_path in module_paths:
        if any(character in raw_path for character in _GLOB_MAGIC):
            matches = sorted(glob.glob(raw_path, recursive=True))
            if not matches:
                _LOGGER.warning("module_pattern_unmatched", pattern=raw_path)
            directories.extend(Path(match) for match in matches if Path(match).is_dir())
            continue
        module_dir = Path(raw_path).expanduser()
        if not module_dir.is_dir():
            raise RespackSourceError(
                f"Module path {module_dir} does not exist or is not a directory. "
                "Provide an existing module directory or a glob pattern."
            )
        directories.append(module_dir)
    return directories

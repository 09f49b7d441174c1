"""Zip container for tabular exchange packages."""

from __future__ import annotations

import zipfile
from dataclasses import dataclass
from pathlib import Path

from core.errors import RespackArchiveError


@dataclass(frozen=True)
class PackageMember:
    """One file inside an exchange package.

    Attributes:
        path: Forward-slash member path, e.g. ``out/app_core/account.csv``.
        content: Raw member bytes.
    """

    path: str
    content: bytes

    @property
    def is_directory(self) -> bool:
        """Return whether the member is a directory placeholder."""
        return self.path.endswith("/")


@dataclass(frozen=True)
class TabularPackage:
    """Ordered collection of package members."""

    members: tuple[PackageMember, ...] = ()

    @property
    def member_paths(self) -> list[str]:
        """Member paths in package order."""
        return [member.path for member in self.members]

    def get(self, path: str) -> bytes | None:
        """Return the content of member ``path`` when present."""
        for member in self.members:
            if member.path == path:
                return member.content
        return None


def write_zip(package: TabularPackage, zip_path: Path) -> Path:
    """Write ``package`` as a deflated zip archive.

    Raises:
        RespackArchiveError: If the archive cannot be written.
    """
    try:
        zip_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for member in package.members:
                archive.writestr(member.path, member.content)
    except OSError as error:
        raise RespackArchiveError(
            f"Failed to write package {zip_path}: {error}. "
            "Check the output directory and retry the export."
        ) from error
    return zip_path


def read_zip(zip_path: Path) -> TabularPackage:
    """Load every member of a zip archive into memory.

    Raises:
        RespackArchiveError: If the archive is missing or corrupt.
    """
    try:
        with zipfile.ZipFile(zip_path) as archive:
            members = tuple(
                PackageMember(path=info.filename, content=archive.read(info))
                for info in archive.infolist()
            )
    except (OSError, zipfile.BadZipFile) as error:
        raise RespackArchiveError(
            f"Failed to read package {zip_path}: {error}. "
            "Provide the zip archive produced by the export command."
        ) from error
    return TabularPackage(members=members)

"""Shared typed models.

This module defines immutable option and request models used by the
resource model, transcoders, pipelines, and CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from core.constants import (
    DEFAULT_CSV_ENCODING,
    DEFAULT_EOL,
    DEFAULT_ESCAPE_CHARACTER,
    DEFAULT_FIELD_SEPARATOR,
    DEFAULT_FILE_FORMAT,
    DEFAULT_QUOTE_CHARACTER,
)

FileFormat = Literal["csv", "json"]


@dataclass(frozen=True)
class TabularDialect:
    """Delimited-text settings shared by export and parse.

    Attributes:
        field_separator: Character placed between fields.
        quote_character: Character enclosing fields with special content.
        escape_character: Character placed before a quote inside a quoted field.
        eol: Line ending between rows.
    """

    field_separator: str = DEFAULT_FIELD_SEPARATOR
    quote_character: str = DEFAULT_QUOTE_CHARACTER
    escape_character: str = DEFAULT_ESCAPE_CHARACTER
    eol: str = DEFAULT_EOL


@dataclass(frozen=True)
class ExportOptions:
    """Options shared by every exporter.

    Attributes:
        out_name: Package name, used as top-level folder inside the archive.
        if_not_locales: Only keep entries missing at least one of these locales.
        dialect: Delimited-text settings for tabular output.
        preserve_line_breaks: Restore source continuation breaks as ``dialect.eol``.
    """

    out_name: str
    if_not_locales: tuple[str, ...] = ()
    dialect: TabularDialect = field(default_factory=TabularDialect)
    preserve_line_breaks: bool = False


@dataclass(frozen=True)
class ParseOptions:
    """Options for reading an exchange package back into a resource pack.

    Attributes:
        base_directory: Root searched for module directories.
        dialect: Delimited-text settings of the package members.
        encoding: Text encoding of the package members.
    """

    base_directory: Path
    dialect: TabularDialect = field(default_factory=TabularDialect)
    encoding: str = DEFAULT_CSV_ENCODING


@dataclass(frozen=True)
class ImportOptions:
    """Options for merging a resource pack into resource files.

    Attributes:
        ignore_if_empty: Leave keys untouched when the translation is empty.
        escape_special: Write line breaks and tabs as escape sequences.
    """

    ignore_if_empty: bool = True
    escape_special: bool = False


@dataclass(frozen=True)
class ExportRequest:
    """Export workflow request.

    Attributes:
        module_paths: Module directories or glob patterns to read.
        output_dir: Directory receiving the package file.
        out_name: Package name without extension, generated when absent.
        file_format: Exchange format identifier.
        if_not_locales: Inclusion filter locales.
        preserve_line_breaks: Restore source continuation breaks in CSV cells.
    """

    module_paths: tuple[str, ...]
    output_dir: str = "."
    out_name: str | None = None
    file_format: FileFormat = DEFAULT_FILE_FORMAT
    if_not_locales: tuple[str, ...] = ()
    preserve_line_breaks: bool = False


@dataclass(frozen=True)
class ImportRequest:
    """Import workflow request.

    Attributes:
        package_path: Zip package or JSON document to merge.
        ignore_if_empty: Leave keys untouched when the translation is empty.
        escape_special: Write line breaks and tabs as escape sequences.
    """

    package_path: str
    ignore_if_empty: bool = True
    escape_special: bool = False

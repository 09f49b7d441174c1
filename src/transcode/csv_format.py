"""CSV exchange format.

A CSV package is a zip archive with one folder per module and one CSV file
per bundle. Inside each file the first column holds resource keys and every
other column holds one locale's translations.
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, Iterator

from core.constants import CSV_EXTENSION, DEFAULT_KEY_HEADER
from core.errors import RespackConfigError, RespackParseError
from core.events import (
    UNPACK_AFTER_PARSE_ENTRY,
    UNPACK_BEFORE_PARSE_ENTRY,
    UNPACK_INVALID_ENTRY,
    EventChannel,
)
from core.locales import restore_line_breaks
from core.logging_config import get_logger
from core.types import ExportOptions, ParseOptions, TabularDialect
from resources.bundle import Bundle
from resources.entry import BundleEntry
from transcode.archive import PackageMember, TabularPackage
from transcode.common import ModuleResolver, accept_locales, should_include, split_member_path

if TYPE_CHECKING:
    from resources.pack import ResourcePack

_LOGGER = get_logger(__name__)
_EXPORT_ENCODING = "utf-8"
_BYTE_ORDER_MARK = "\ufeff"


def validate_dialect(dialect: TabularDialect) -> TabularDialect:
    """Reject dialects the CSV reader cannot tokenize unambiguously.

    Raises:
        RespackConfigError: If two roles share a character.
    """
    roles = {
        "separator": dialect.field_separator,
        "quotation": dialect.quote_character,
    }
    if dialect.escape_character != dialect.quote_character:
        roles["escape"] = dialect.escape_character
    if len(set(roles.values())) != len(roles):
        raise RespackConfigError(
            f"Invalid CSV dialect {roles}: separator, quotation and escape characters "
            "must differ (escape may equal quotation)."
        )
    return dialect


def escape_field(value: str, dialect: TabularDialect) -> str:
    """Quote one field when it holds a separator, quote, or line break.

    Quote characters inside a quoted field are prefixed with the escape
    character. When the escape character differs from the quote character,
    escape characters are doubled as well.
    """
    quote = dialect.quote_character
    escape = dialect.escape_character
    distinct_escape = escape != quote
    needs_quotes = (
        dialect.field_separator in value
        or dialect.eol in value
        or quote in value
        or "\n" in value
        or "\r" in value
        or (distinct_escape and escape in value)
    )
    if not needs_quotes:
        return value
    if distinct_escape:
        value = value.replace(escape, escape + escape)
    return quote + value.replace(quote, escape + quote) + quote


class CsvExporter:
    """Exports a resource pack as a package of per-bundle CSV files."""

    def __init__(self, options: ExportOptions) -> None:
        self._out_name = options.out_name
        self._exclude_if_all = tuple(options.if_not_locales)
        self._dialect = validate_dialect(options.dialect)
        self._preserve_line_breaks = options.preserve_line_breaks

    def export(self, pack: ResourcePack) -> TabularPackage:
        """Build the package; bundles with no included entry are left out."""
        members: list[PackageMember] = []
        for module in pack.modules:
            for bundle in module.bundles:
                lines = self.to_csv_lines(bundle)
                if not lines:
                    continue
                content = self._dialect.eol.join(lines).encode(_EXPORT_ENCODING)
                member_path = f"{self._out_name}/{module.name}/{bundle.name}{CSV_EXTENSION}"
                members.append(PackageMember(path=member_path, content=content))
        return TabularPackage(members=tuple(members))

    def to_csv_lines(self, bundle: Bundle) -> list[str]:
        """Render one bundle as CSV lines, header first; empty when filtered out."""
        locales = bundle.locales
        rows = [
            self._to_csv_line(entry, locales)
            for entry in bundle.entries
            if should_include(entry, self._exclude_if_all)
        ]
        if not rows:
            return []
        header = self._join([DEFAULT_KEY_HEADER, *locales])
        return [header, *rows]

    def _to_csv_line(self, entry: BundleEntry, locales: list[str]) -> str:
        return self._join([entry.key, *(self._cell_text(entry, locale) for locale in locales)])

    def _cell_text(self, entry: BundleEntry, locale: str) -> str:
        text = entry.get_translation(locale, "")
        source = entry.get_source(locale)
        if self._preserve_line_breaks and source is not None and source.value == text:
            return restore_line_breaks(source, self._dialect.eol)
        return text

    def _join(self, fields: list[str]) -> str:
        escaped = (escape_field(value, self._dialect) for value in fields)
        return self._dialect.field_separator.join(escaped)


class CsvParser:
    """Reads a CSV package back into a resource pack."""

    def __init__(self, options: ParseOptions) -> None:
        self._base_directory = options.base_directory
        self._dialect = validate_dialect(options.dialect)
        self._encoding = options.encoding

    def parse(
        self,
        source: TabularPackage,
        pack: ResourcePack,
        events: EventChannel,
    ) -> ResourcePack:
        """Attach one bundle per resolvable CSV member to ``pack``.

        Members with an unexpected path and members of unknown or ambiguous
        modules are reported and skipped.

        Raises:
            RespackParseError: If a member cannot be decoded or tokenized.
        """
        resolver = ModuleResolver(base_directory=self._base_directory, events=events)
        for member in source.members:
            if member.is_directory:
                continue
            names = split_member_path(member.path, CSV_EXTENSION)
            if names is None:
                _LOGGER.warning("package_member_unmatched", entry=member.path)
                events.emit(UNPACK_INVALID_ENTRY, entry=member.path)
                continue
            module = resolver.resolve(pack, names.module)
            if module is None:
                continue
            events.emit(
                UNPACK_BEFORE_PARSE_ENTRY,
                entry=member.path,
                module=names.module,
                bundle=names.bundle,
            )
            bundle = self.to_bundle(names.bundle, member.content, member.path, events)
            module.add_bundle(bundle)
            events.emit(
                UNPACK_AFTER_PARSE_ENTRY,
                entry=member.path,
                module=names.module,
                bundle=names.bundle,
                resource_count=bundle.entry_count,
            )
        return pack

    def to_bundle(
        self,
        bundle_name: str,
        content: bytes,
        entry_name: str,
        events: EventChannel,
    ) -> Bundle:
        """Convert one CSV member into a bundle of queued translations.

        The first column is the key column whatever its header says. Columns
        whose header is not a locale code are reported and ignored.
        """
        bundle = Bundle(bundle_name)
        rows = self._read_rows(content, entry_name)
        header = next(rows, None)
        if header is None:
            return bundle
        candidates = [cell.strip() for cell in header[1:]]
        accepted = set(accept_locales(candidates, entry_name, events))
        locale_columns = [
            (index, locale)
            for index, locale in enumerate(candidates, start=1)
            if locale in accepted
        ]
        for row in rows:
            key = row[0].strip() if row else ""
            if not key:
                continue
            entry = BundleEntry(key)
            for index, locale in locale_columns:
                entry.queue_translation(locale, row[index] if index < len(row) else "")
            bundle.queue_entry(entry)
        return bundle

    def _read_rows(self, content: bytes, entry_name: str) -> Iterator[list[str]]:
        try:
            text = content.decode(self._encoding)
        except UnicodeDecodeError as error:
            raise RespackParseError(
                f"Failed to decode package member {entry_name} as {self._encoding}: {error}. "
                "Pass the encoding the file was saved with."
            ) from error
        if text.startswith(_BYTE_ORDER_MARK):
            text = text[len(_BYTE_ORDER_MARK) :]
        distinct_escape = self._dialect.escape_character != self._dialect.quote_character
        reader = csv.reader(
            io.StringIO(text, newline=""),
            delimiter=self._dialect.field_separator,
            quotechar=self._dialect.quote_character,
            escapechar=self._dialect.escape_character if distinct_escape else None,
            doublequote=not distinct_escape,
        )
        try:
            yield from reader
        except csv.Error as error:
            raise RespackParseError(
                f"Failed to parse package member {entry_name} at line {reader.line_num}: "
                f"{error}. Check the separator and quotation settings."
            ) from error

"""Formatting-preserving ``.properties`` editor.

The editor keeps every physical line it does not touch exactly as read,
line terminator included. Updated entries keep their indentation and
separator spelling; new entries are appended at the end of the file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from properties.reader import ends_with_continuation, parse_properties, split_physical_lines

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_SPECIAL_ESCAPES = {"\r\n": "\\n", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\f": "\\f"}
_SPECIAL_PATTERN = re.compile(r"\r\n|[\n\r\t\f]")
_DEFAULT_SEPARATOR = "="
_DEFAULT_EOL = "\n"


@dataclass(frozen=True)
class _Slot:
    """Location of one key's logical line in the slot list."""

    first: int
    count: int
    indent: str
    separator: str
    value: str | None = None


class PropertiesEditor:
    """Upsert-only editor over the text of one ``.properties`` file."""

    def __init__(self, text: str = "") -> None:
        physical_lines = split_physical_lines(text)
        self._eol = next(
            (terminator for _content, terminator in physical_lines if terminator), _DEFAULT_EOL
        )
        self._trailing_newline = not text or text.endswith(("\n", "\r"))
        self._lines: list[tuple[str, str] | None] = list(physical_lines)
        self._slots: dict[str, _Slot] = {}
        for prop in parse_properties(text):
            first = prop.line_number - 1
            physical_line = physical_lines[first][0]
            indent = physical_line[: len(physical_line) - len(physical_line.lstrip())]
            self._slots[prop.key] = _Slot(
                first=first,
                count=prop.line_count,
                indent=indent,
                separator=prop.separator or _DEFAULT_SEPARATOR,
                value=prop.value,
            )

    def has_key(self, key: str) -> bool:
        """Return whether ``key`` is defined in the edited text."""
        return key in self._slots

    def upsert(self, key: str, text: str, escape_special: bool = False) -> None:
        """Update ``key`` in place, or append it when absent.

        A key already holding ``text`` is left byte-for-byte untouched. A value
        ending with an odd run of backslashes gets one more, so it never
        continues onto the next entry.

        Args:
            key: Raw resource key.
            text: Raw value to write.
            escape_special: Write line breaks, tabs and form feeds as escape
                sequences instead of continuation lines.
        """
        slot = self._slots.get(key)
        if slot is not None and slot.value == text:
            return
        terminator = self._eol
        if slot is None:
            self._lines.append(None)
            slot = _Slot(
                first=len(self._lines) - 1,
                count=1,
                indent="",
                separator=_DEFAULT_SEPARATOR,
            )
        else:
            last_line = self._lines[slot.first + slot.count - 1]
            if last_line is not None:
                terminator = last_line[1]
        rendered = slot.indent + key + slot.separator + self._format_value(text, escape_special)
        self._lines[slot.first] = (rendered, terminator)
        for offset in range(1, slot.count):
            self._lines[slot.first + offset] = None
        self._slots[key] = _Slot(
            first=slot.first, count=1, indent=slot.indent, separator=slot.separator, value=text
        )

    def serialize(self) -> str:
        """Return the edited file content."""
        kept = [line for line in self._lines if line is not None]
        parts: list[str] = []
        for index, (content, terminator) in enumerate(kept):
            if index == len(kept) - 1 and not self._trailing_newline:
                terminator = ""
            elif not terminator:
                terminator = self._eol
            parts.append(content + terminator)
        return "".join(parts)

    def _format_value(self, text: str, escape_special: bool) -> str:
        if escape_special:
            escaped = _SPECIAL_PATTERN.sub(lambda match: _SPECIAL_ESCAPES[match.group(0)], text)
            return _close_backslash_run(escaped)
        segments = _LINE_BREAK.split(text)
        return ("\\" + self._eol).join(_close_backslash_run(segment) for segment in segments)


def _close_backslash_run(segment: str) -> str:
    """Double a dangling trailing backslash so the line ends where it should."""
    if ends_with_continuation(segment):
        return segment + "\\"
    return segment

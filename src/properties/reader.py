"""Line-oriented ``.properties`` reader.

Values are kept raw: escape sequences are not decoded, so a value read here
and written back through the editor is byte-identical.
"""

from __future__ import annotations

import re
from pathlib import Path

from core.constants import PROPERTIES_ENCODING
from core.errors import RespackSourceError
from properties.property import Property

_COMMENT_MARKERS = "#!"
_KEY_TERMINATORS = "=: \t\f"
_BLANKS = " \t\f"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_properties_file(file_path: Path) -> list[Property]:
    """Read and parse one ``.properties`` file.

    Args:
        file_path: Path to the file.

    Returns:
        Properties in file order.

    Raises:
        RespackSourceError: If the file cannot be read or decoded.
    """
    try:
        text = file_path.read_text(encoding=PROPERTIES_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise RespackSourceError(
            f"Failed to read resource file {file_path}: {error}. "
            "Check file permissions and that it is UTF-8 encoded."
        ) from error
    return parse_properties(text)


def parse_properties(text: str) -> list[Property]:
    """Parse ``.properties`` text into ordered records.

    Comment and blank lines are skipped. A line ending with an odd number of
    backslashes continues on the next line, whose leading blanks are dropped.

    Args:
        text: Full file content.

    Returns:
        Properties in file order, duplicates included.
    """
    lines = [content for content, _terminator in split_physical_lines(text)]
    properties: list[Property] = []
    index = 0
    while index < len(lines):
        first_index = index
        content = lines[index].lstrip(_BLANKS)
        index += 1
        if not content or content[0] in _COMMENT_MARKERS:
            continue
        newline_positions: list[int] = []
        while ends_with_continuation(content):
            content = content[:-1]
            if index >= len(lines):
                break
            newline_positions.append(len(content))
            content += lines[index].lstrip(_BLANKS)
            index += 1
        properties.append(
            _build_property(content, first_index + 1, index - first_index, newline_positions)
        )
    return properties


def split_physical_lines(text: str) -> list[tuple[str, str]]:
    """Split text into ``(content, terminator)`` pairs.

    Only ``\\r\\n``, ``\\r`` and ``\\n`` end a line; other Unicode line
    separators stay inside the content. The last line's terminator is empty
    when the text does not end with a line break.
    """
    lines: list[tuple[str, str]] = []
    position = 0
    for match in _LINE_BREAK.finditer(text):
        lines.append((text[position : match.start()], match.group(0)))
        position = match.end()
    if position < len(text):
        lines.append((text[position:], ""))
    return lines


def _build_property(
    content: str,
    line_number: int,
    line_count: int,
    newline_positions: list[int],
) -> Property:
    """Split one logical line into key, separator, and value."""
    key_end = _find_key_end(content)
    separator_end = key_end
    while separator_end < len(content) and content[separator_end] in _BLANKS:
        separator_end += 1
    if separator_end < len(content) and content[separator_end] in "=:":
        separator_end += 1
        while separator_end < len(content) and content[separator_end] in _BLANKS:
            separator_end += 1
    return Property(
        key=content[:key_end],
        value=content[separator_end:],
        line_number=line_number,
        line_count=line_count,
        lines_content=content,
        separator_position=key_end,
        separator_length=separator_end - key_end,
        newline_positions=tuple(newline_positions),
    )


def _find_key_end(content: str) -> int:
    """Return the offset of the first unescaped key terminator."""
    position = 0
    while position < len(content):
        character = content[position]
        if character == "\\":
            position += 2
            continue
        if character in _KEY_TERMINATORS:
            return position
        position += 1
    return len(content)


def ends_with_continuation(content: str) -> bool:
    """Return true when a line ends with an odd run of backslashes."""
    trailing = len(content) - len(content.rstrip("\\"))
    return trailing % 2 == 1

"""Parsed ``.properties`` entry model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Property:
    """One key/value pair read from a ``.properties`` file.

    Attributes:
        key: Raw resource key.
        value: Raw value with continuation breaks removed.
        line_number: One-based number of the first physical line.
        line_count: Number of physical lines the entry spans.
        lines_content: Logical line text, continuation breaks removed.
        separator_position: Offset of the separator run in ``lines_content``.
        separator_length: Length of the separator run, surrounding blanks included.
        newline_positions: Offsets in ``lines_content`` where a continuation break stood.
    """

    key: str
    value: str
    line_number: int
    line_count: int
    lines_content: str
    separator_position: int | None
    separator_length: int
    newline_positions: tuple[int, ...] = ()

    @property
    def separator(self) -> str:
        """Return the separator exactly as written in the source line."""
        if self.separator_position is None:
            return ""
        end = self.separator_position + self.separator_length
        return self.lines_content[self.separator_position : end]

"""Locale validation and value reconstruction helpers."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from core.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from properties.property import Property

LOCALE_PATTERN = re.compile(r"[a-z]{2}(?:_[A-Z]{2})?")


def is_valid_locale(locale: str | None) -> bool:
    """Return whether ``locale`` is a usable locale code.

    Accepts two lowercase letters optionally followed by an underscore and
    two uppercase letters (``fr``, ``fr_CA``), or the default-locale marker.
    """
    if not locale:
        return False
    return locale == DEFAULT_LOCALE or LOCALE_PATTERN.fullmatch(locale) is not None


def restore_line_breaks(prop: Property, eol: str) -> str:
    """Rebuild a property value with its source continuation breaks.

    Args:
        prop: Parsed property carrying raw line metadata.
        eol: Sequence inserted where each continuation break stood.

    Returns:
        The value split at the original break positions and joined by ``eol``,
        or the plain value when the property spanned a single line.
    """
    if not prop.newline_positions or prop.separator_position is None:
        return prop.value
    start = prop.separator_position + prop.separator_length
    chunks: list[str] = []
    for position in prop.newline_positions:
        if position < start:
            continue
        chunks.append(prop.lines_content[start:position])
        start = position
    chunks.append(prop.lines_content[start:])
    return eol.join(chunks)

"""Runtime configuration model for respack.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    DEFAULT_BASE_DIR,
    DEFAULT_CSV_ENCODING,
    DEFAULT_EOL,
    DEFAULT_ESCAPE_CHARACTER,
    DEFAULT_FIELD_SEPARATOR,
    DEFAULT_QUOTE_CHARACTER,
    EOL_ALIASES,
    SUPPORTED_EOLS,
)
from core.errors import RespackConfigError
from core.types import TabularDialect


@dataclass(frozen=True)
class RespackConfig:
    """Validated runtime configuration.

    Attributes:
        base_directory: Root searched for module directories on import.
        field_separator: CSV field separator.
        quote_character: CSV quote character.
        escape_character: CSV escape character for quotes.
        eol: CSV line ending.
        encoding: Encoding of imported CSV members.
    """

    base_directory: Path
    field_separator: str
    quote_character: str
    escape_character: str
    eol: str
    encoding: str

    @classmethod
    def from_env(cls) -> "RespackConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RespackConfigError: If environment values are invalid.
        """
        base_dir_value = os.getenv("RESPACK_BASE_DIR", DEFAULT_BASE_DIR)
        return cls(
            base_directory=Path(base_dir_value).expanduser().resolve(),
            field_separator=parse_single_character(
                os.getenv("RESPACK_CSV_SEPARATOR", DEFAULT_FIELD_SEPARATOR), "RESPACK_CSV_SEPARATOR"
            ),
            quote_character=parse_single_character(
                os.getenv("RESPACK_CSV_QUOTE", DEFAULT_QUOTE_CHARACTER), "RESPACK_CSV_QUOTE"
            ),
            escape_character=parse_single_character(
                os.getenv("RESPACK_CSV_ESCAPE", DEFAULT_ESCAPE_CHARACTER), "RESPACK_CSV_ESCAPE"
            ),
            eol=parse_eol(os.getenv("RESPACK_CSV_EOL", DEFAULT_EOL), "RESPACK_CSV_EOL"),
            encoding=parse_encoding(
                os.getenv("RESPACK_CSV_ENCODING", DEFAULT_CSV_ENCODING), "RESPACK_CSV_ENCODING"
            ),
        )

    def dialect(self) -> TabularDialect:
        """Return the tabular dialect described by this config."""
        return TabularDialect(
            field_separator=self.field_separator,
            quote_character=self.quote_character,
            escape_character=self.escape_character,
            eol=self.eol,
        )


def parse_single_character(raw_value: str, setting_name: str) -> str:
    """Validate a one-character dialect setting.

    Args:
        raw_value: Raw setting value.
        setting_name: Setting name for error context.

    Returns:
        The validated character.

    Raises:
        RespackConfigError: If the value is not exactly one character.
    """
    if len(raw_value) != 1:
        raise RespackConfigError(
            f"Invalid {setting_name} value: expected exactly one character, "
            f"got '{raw_value}'. Provide a single character such as ';'."
        )
    if raw_value in "\r\n":
        raise RespackConfigError(
            f"Invalid {setting_name} value: line breaks cannot be used as a field character."
        )
    return raw_value


def parse_eol(raw_value: str, setting_name: str) -> str:
    """Normalize an end-of-line setting.

    Args:
        raw_value: Raw line ending, or one of its aliases.
        setting_name: Setting name for error context.

    Returns:
        The line ending sequence.

    Raises:
        RespackConfigError: If the value is not a supported line ending.
    """
    eol = EOL_ALIASES.get(raw_value.lower(), raw_value)
    if eol not in SUPPORTED_EOLS:
        raise RespackConfigError(
            f"Invalid {setting_name} value: got {raw_value!r}. "
            "Use one of lf, crlf or cr."
        )
    return eol


def parse_encoding(raw_value: str, setting_name: str) -> str:
    """Validate a text encoding name.

    Args:
        raw_value: Codec name.
        setting_name: Setting name for error context.

    Returns:
        The codec name as given.

    Raises:
        RespackConfigError: If Python knows no such codec.
    """
    try:
        codecs.lookup(raw_value)
    except LookupError as error:
        raise RespackConfigError(
            f"Invalid {setting_name} value: unknown encoding '{raw_value}'. "
            "Use a Python codec name such as utf-8 or cp1252."
        ) from error
    return raw_value

"""Exporter and parser pairs keyed by exchange format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from core.constants import SUPPORTED_FILE_FORMATS
from core.errors import RespackConfigError
from core.types import ExportOptions, FileFormat, ParseOptions
from transcode.common import Exporter, Parser
from transcode.csv_format import CsvExporter, CsvParser
from transcode.json_format import JsonExporter, JsonParser


@dataclass(frozen=True)
class FormatAdapter:
    """Factories for the two capabilities every format offers."""

    exporter: Callable[[ExportOptions], Exporter[Any]]
    parser: Callable[[ParseOptions], Parser[Any]]


FORMAT_ADAPTERS: dict[str, FormatAdapter] = {
    "csv": FormatAdapter(exporter=CsvExporter, parser=CsvParser),
    "json": FormatAdapter(exporter=JsonExporter, parser=JsonParser),
}


def get_format_adapter(file_format: FileFormat | str) -> FormatAdapter:
    """Return the adapter for ``file_format``.

    Raises:
        RespackConfigError: If the format is not supported.
    """
    adapter = FORMAT_ADAPTERS.get(file_format)
    if adapter is None:
        supported_rows = ", ".join(SUPPORTED_FILE_FORMATS)
        raise RespackConfigError(
            f"Unsupported file format '{file_format}'. Use one of: {supported_rows}."
        )
    return adapter

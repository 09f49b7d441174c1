"""Public SDK surface for respack.

This module provides a stable import path for library users.
It re-exports the primary client, the resource model, and typed option models.
"""

from __future__ import annotations

from core.config import RespackConfig
from core.events import EventChannel, EventListener
from core.locales import is_valid_locale, restore_line_breaks
from core.types import (
    ExportOptions,
    ExportRequest,
    ImportOptions,
    ImportRequest,
    ParseOptions,
    TabularDialect,
)
from pipeline.client import RespackClient
from pipeline.import_pipeline import ImportResult
from resources.bundle import Bundle
from resources.entry import BundleEntry
from resources.module import Module
from resources.pack import ResourcePack
from resources.summary import PackSummary
from transcode.csv_format import escape_field
from transcode.registry import get_format_adapter

__all__ = [
    "Bundle",
    "BundleEntry",
    "EventChannel",
    "EventListener",
    "ExportOptions",
    "ExportRequest",
    "ImportOptions",
    "ImportRequest",
    "ImportResult",
    "Module",
    "PackSummary",
    "ParseOptions",
    "RespackClient",
    "RespackConfig",
    "ResourcePack",
    "TabularDialect",
    "escape_field",
    "get_format_adapter",
    "is_valid_locale",
    "restore_line_breaks",
]

"""Python SDK for resource pack operations.

This module exposes high-level APIs for export, import, and summaries
backed by the resource model and the exchange formats.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Sequence

from core.config import RespackConfig, parse_encoding
from core.events import EventChannel
from core.run_spec_execution import execute_run_spec_file
from core.types import ExportRequest, ImportRequest
from pipeline.export_pipeline import export_package
from pipeline.import_pipeline import ImportResult, import_package
from resources.pack import ResourcePack
from resources.summary import PackSummary


class RespackClient:
    """Primary SDK entry point for export and import workflows."""

    def __init__(
        self,
        config: RespackConfig | None = None,
        events: EventChannel | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            events: Optional lifecycle event channel passed to every operation.
        """
        self._config = config or RespackConfig.from_env()
        self._events = events

    @property
    def config(self) -> RespackConfig:
        """Runtime configuration used by this client."""
        return self._config

    def build_pack(self, module_paths: Sequence[str] | None = None) -> ResourcePack:
        """Read every resource file under the given module paths.

        Args:
            module_paths: Directories or glob patterns.

        Returns:
            The populated resource pack.
        """
        return ResourcePack.from_modules(module_paths, self._events)

    def summary(self, module_paths: Sequence[str] | None = None) -> PackSummary:
        """Summarize the resources found under the given module paths."""
        return self.build_pack(module_paths).summary()

    def export(self, request: ExportRequest) -> Path:
        """Export module resources into an exchange package.

        Args:
            request: Export request.

        Returns:
            Path of the written package.
        """
        return export_package(request, self._config, self._events)

    def import_package(self, request: ImportRequest) -> ImportResult:
        """Merge an exchange package into module resource files.

        Args:
            request: Import request.

        Returns:
            Import summary and written files.
        """
        return import_package(request, self._config, self._events)

    def with_base_directory(self, base_directory: str) -> "RespackClient":
        """Clone the client with a different module search root.

        Args:
            base_directory: New base directory.

        Returns:
            New SDK client instance.
        """
        resolved = Path(base_directory).expanduser().resolve()
        return RespackClient(replace(self._config, base_directory=resolved), self._events)

    def with_encoding(self, encoding: str) -> "RespackClient":
        """Clone the client with a different CSV member encoding.

        Raises:
            RespackConfigError: If the encoding is unknown.
        """
        validated = parse_encoding(encoding, "--encoding")
        return RespackClient(replace(self._config, encoding=validated), self._events)

    def run_spec(self, spec_file: str) -> tuple[str, ...]:
        """Execute a YAML run-spec through the shared execution engine.

        Args:
            spec_file: Path to YAML run-spec file.

        Returns:
            Ordered command output lines.
        """
        return execute_run_spec_file(self, spec_file)

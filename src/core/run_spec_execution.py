"""Shared run-spec execution engine for CLI and SDK workflows.

This module maps validated run-spec steps to client operations so different
entry points can execute one declarative workflow without drift.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence, cast

from core.constants import DEFAULT_MODULE_GLOB, SUPPORTED_FILE_FORMATS
from core.errors import RespackRunSpecError
from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from core.run_spec_fields import (
    optional_bool,
    optional_string,
    optional_string_list,
    required_string,
    validate_step_fields,
)
from core.types import ExportRequest, FileFormat, ImportRequest

_EXPORT_FIELDS = {"modules", "out_name", "output_dir", "format", "if_not", "preserve_line_breaks"}
_IMPORT_FIELDS = {"file", "ignore_empty", "escape_special"}
_SUMMARY_FIELDS = {"modules"}


class RunSpecClient(Protocol):
    """Client API contract required by run-spec execution."""

    def with_base_directory(self, base_directory: str) -> Any: ...

    def export(self, request: ExportRequest) -> Path: ...

    def import_package(self, request: ImportRequest) -> Any: ...

    def summary(self, module_paths: Sequence[str] | None = None) -> Any: ...


def execute_run_spec_file(client: RunSpecClient, spec_file: str) -> tuple[str, ...]:
    """Load and execute a run-spec file, returning printable output lines."""
    spec = load_run_spec(spec_file)
    return execute_run_spec(client, spec)


def execute_run_spec(client: RunSpecClient, spec: RunSpec) -> tuple[str, ...]:
    """Execute a parsed run-spec object and return output lines."""
    execution_client = (
        client.with_base_directory(spec.defaults.base_dir) if spec.defaults.base_dir else client
    )
    output_lines: list[str] = []
    for step in spec.steps:
        output_lines.append(_execute_step(execution_client, step))
    return tuple(output_lines)


def _execute_step(client: RunSpecClient, step: RunSpecStep) -> str:
    if step.command == "export":
        return _execute_export_step(client, step)
    if step.command == "import":
        return _execute_import_step(client, step)
    if step.command == "summary":
        return _execute_summary_step(client, step)
    raise RespackRunSpecError(f"Unsupported run-spec command '{step.command}'.")


def _execute_export_step(client: RunSpecClient, step: RunSpecStep) -> str:
    validate_step_fields(step.args, _EXPORT_FIELDS, step.command)
    request = ExportRequest(
        module_paths=optional_string_list(step.args, "modules") or (DEFAULT_MODULE_GLOB,),
        output_dir=optional_string(step.args, "output_dir") or ".",
        out_name=optional_string(step.args, "out_name"),
        file_format=_parse_file_format(step.args),
        if_not_locales=optional_string_list(step.args, "if_not"),
        preserve_line_breaks=optional_bool(step.args, "preserve_line_breaks", False),
    )
    package_path = client.export(request)
    return f"package_path={package_path}"


def _execute_import_step(client: RunSpecClient, step: RunSpecStep) -> str:
    validate_step_fields(step.args, _IMPORT_FIELDS, step.command)
    request = ImportRequest(
        package_path=required_string(step.args, "file"),
        ignore_if_empty=optional_bool(step.args, "ignore_empty", True),
        escape_special=optional_bool(step.args, "escape_special", False),
    )
    result = client.import_package(request)
    payload = result.summary.to_payload()
    return f"import_summary={json.dumps(payload, sort_keys=True)}"


def _execute_summary_step(client: RunSpecClient, step: RunSpecStep) -> str:
    validate_step_fields(step.args, _SUMMARY_FIELDS, step.command)
    module_paths = optional_string_list(step.args, "modules") or (DEFAULT_MODULE_GLOB,)
    summary = client.summary(list(module_paths))
    return f"summary={json.dumps(summary.to_payload(), sort_keys=True)}"


def _parse_file_format(args: Mapping[str, object]) -> FileFormat:
    value = optional_string(args, "format")
    if value is None:
        return "csv"
    if value in SUPPORTED_FILE_FORMATS:
        return cast(FileFormat, value)
    supported_rows = ", ".join(SUPPORTED_FILE_FORMATS)
    raise RespackRunSpecError(f"Invalid format '{value}'. Use one of: {supported_rows}.")

"""Type-safe field parsing helpers for run-spec execution.

This module centralizes primitive parsing so run-spec executors can stay
concise and produce consistent validation errors across CLI and SDK flows.
"""

from __future__ import annotations

from typing import Mapping

from core.errors import RespackRunSpecError


def required_string(args: Mapping[str, object], field_name: str) -> str:
    """Read a required string field from a run-spec step."""
    value = optional_string(args, field_name)
    if value is None:
        raise RespackRunSpecError(f"Run-spec step is missing required field '{field_name}'.")
    return value


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise RespackRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_string_list(args: Mapping[str, object], field_name: str) -> tuple[str, ...]:
    """Read a string or list of strings; missing fields yield an empty tuple."""
    value = args.get(field_name)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise RespackRunSpecError(f"Run-spec field '{field_name}' must be a list of strings.")


def optional_bool(
    args: Mapping[str, object],
    field_name: str,
    default_value: bool,
) -> bool:
    """Read an optional boolean field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return default_value
    if isinstance(value, bool):
        return value
    raise RespackRunSpecError(f"Run-spec field '{field_name}' must be true/false.")


def validate_step_fields(
    args: Mapping[str, object],
    allowed_fields: set[str],
    command: str,
) -> None:
    """Reject step fields the command does not understand."""
    unknown_fields = sorted(set(args) - allowed_fields)
    if unknown_fields:
        raise RespackRunSpecError(
            f"Run-spec '{command}' step has unknown fields: {', '.join(unknown_fields)}."
        )

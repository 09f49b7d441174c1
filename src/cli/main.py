"""Respack CLI entry points.

This module maps argparse commands onto SDK calls for exporting module
resources into exchange packages and importing them back.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Mapping, Sequence

from cli.export_command import add_export_command, run_export_command
from cli.import_command import add_import_command, run_import_command
from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from cli.summary_command import add_summary_command, run_summary_command
from core.config import RespackConfig, parse_eol, parse_single_character
from core.errors import RespackError
from core.events import EventChannel
from core.logging_config import configure_verbose_logging, get_logger
from pipeline.client import RespackClient

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="respack",
        description="Export module resource bundles to CSV/JSON packages and import them back",
    )
    parser.add_argument("--base-dir", help="Override RESPACK_BASE_DIR for this command")
    parser.add_argument("--separator", help="CSV field separator character")
    parser.add_argument("--quotation", help="CSV quote character")
    parser.add_argument("--escape", help="CSV escape character for quotes")
    parser.add_argument("--eol", help="CSV line ending: lf, crlf or cr")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every lifecycle event",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_export_command(subparsers)
    add_import_command(subparsers)
    add_summary_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the respack CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args)
        if args.command == "export":
            return run_export_command(client, args)
        if args.command == "import":
            return run_import_command(client, args)
        if args.command == "summary":
            return run_summary_command(client, args)
        if args.command == "run-spec":
            return run_run_spec_command(client, args)
    except RespackError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(args: argparse.Namespace) -> RespackClient:
    """Build SDK client with global option overrides applied.

    Args:
        args: Parsed CLI args.

    Returns:
        Configured SDK client.
    """
    config = RespackConfig.from_env()
    if args.base_dir:
        config = replace(config, base_directory=Path(args.base_dir).expanduser().resolve())
    if args.separator is not None:
        config = replace(
            config, field_separator=parse_single_character(args.separator, "--separator")
        )
    if args.quotation is not None:
        config = replace(
            config, quote_character=parse_single_character(args.quotation, "--quotation")
        )
    if args.escape is not None:
        config = replace(
            config, escape_character=parse_single_character(args.escape, "--escape")
        )
    if args.eol is not None:
        config = replace(config, eol=parse_eol(args.eol, "--eol"))
    events = None
    if args.verbose:
        configure_verbose_logging()
        events = EventChannel().with_listener(_log_event)
    return RespackClient(config, events)


def _log_event(event: str, payload: Mapping[str, object]) -> None:
    _LOGGER.info("lifecycle_event", event_name=event, **payload)

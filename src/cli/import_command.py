"""Import command wiring for respack CLI."""

from __future__ import annotations

import argparse
import json
from typing import Any

from core.types import ImportRequest
from pipeline.client import RespackClient


def add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser(
        "import",
        help="Merge a CSV zip or JSON package into module resource files",
    )
    parser.add_argument("package", help="Path to the .zip or .json package")
    parser.add_argument(
        "--encoding",
        help="Encoding of CSV members (overrides RESPACK_CSV_ENCODING)",
    )
    parser.add_argument(
        "--keep-empty",
        action="store_true",
        help="Write empty translations instead of leaving keys untouched",
    )
    parser.add_argument(
        "--escape-special",
        action="store_true",
        help="Write line breaks and tabs as escape sequences",
    )


def run_import_command(client: RespackClient, args: argparse.Namespace) -> int:
    """Handle import command invocation."""
    if args.encoding:
        client = client.with_encoding(args.encoding)
    request = ImportRequest(
        package_path=args.package,
        ignore_if_empty=not args.keep_empty,
        escape_special=args.escape_special,
    )
    result = client.import_package(request)
    print(json.dumps(result.summary.to_payload(), sort_keys=True))
    print(f"files_written={len(result.written_files)}")
    return 0

"""Export command wiring for respack CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import SUPPORTED_FILE_FORMATS
from core.types import ExportRequest
from pipeline.client import RespackClient


def add_export_command(subparsers: Any) -> None:
    """Register export subcommand."""
    parser = subparsers.add_parser(
        "export",
        help="Export module resources into a CSV zip or JSON package",
    )
    parser.add_argument(
        "modules",
        nargs="*",
        help="Module directories or glob patterns (default: ./**/cartridge)",
    )
    parser.add_argument(
        "--format",
        dest="file_format",
        choices=SUPPORTED_FILE_FORMATS,
        default="csv",
        help="Exchange package format",
    )
    parser.add_argument("-o", "--outfile", help="Package name without extension")
    parser.add_argument("--output-dir", default=".", help="Directory receiving the package")
    parser.add_argument(
        "--if-not",
        nargs="+",
        default=[],
        metavar="LOCALE",
        help="Skip keys already translated into every listed locale",
    )
    parser.add_argument(
        "--preserve-line-breaks",
        action="store_true",
        help="Keep source line continuations as line breaks in exported text",
    )


def run_export_command(client: RespackClient, args: argparse.Namespace) -> int:
    """Handle export command invocation."""
    request = ExportRequest(
        module_paths=tuple(args.modules),
        output_dir=args.output_dir,
        out_name=args.outfile,
        file_format=args.file_format,
        if_not_locales=tuple(args.if_not),
        preserve_line_breaks=args.preserve_line_breaks,
    )
    package_path = client.export(request)
    print(f"package_path={package_path}")
    return 0

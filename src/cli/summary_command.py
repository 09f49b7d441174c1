"""Summary command wiring for respack CLI."""

from __future__ import annotations

import argparse
import json
from typing import Any

from pipeline.client import RespackClient


def add_summary_command(subparsers: Any) -> None:
    """Register summary subcommand."""
    parser = subparsers.add_parser(
        "summary",
        help="Count modules, bundles, locales, and keys without writing anything",
    )
    parser.add_argument(
        "modules",
        nargs="*",
        help="Module directories or glob patterns (default: ./**/cartridge)",
    )


def run_summary_command(client: RespackClient, args: argparse.Namespace) -> int:
    """Handle summary command invocation."""
    summary = client.summary(args.modules or None)
    print(json.dumps(summary.to_payload(), sort_keys=True))
    return 0

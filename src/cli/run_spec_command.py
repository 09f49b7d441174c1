"""Run-spec command wiring for respack CLI.

Each export, import, or summary step of the YAML file runs through the
client in order; a failing step stops the run.
"""

from __future__ import annotations

import argparse
from typing import Any

from pipeline.client import RespackClient


def add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser(
        "run-spec",
        help="Run export, import, and summary steps from a YAML file",
    )
    parser.add_argument("spec_file", help="Path to YAML run-spec file (version: 1)")


def run_run_spec_command(client: RespackClient, args: argparse.Namespace) -> int:
    """Print one line per executed step, then the step count."""
    output_lines = client.run_spec(args.spec_file)
    for line in output_lines:
        print(line)
    print(f"steps_completed={len(output_lines)}")
    return 0

"""
CLI command for listing the specs in a spec directory.

Usage:
    svcspec list
    svcspec list /hab/sup/default/specs
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from rich.markup import escape

from svcspec.cli.ux import console, error, print_table, warning
from svcspec.config.settings import get_settings
from svcspec.core.errors import (
    ExitCode,
    SvcSpecError,
    format_error_message,
    main_with_error_handling,
)
from svcspec.specs.loader import load_spec_file, spec_files


def register_list_parser(subparsers: argparse._SubParsersAction[Any]) -> None:
    """Register the list command parser."""
    list_parser = subparsers.add_parser("list", help="List service specs in a directory")
    list_parser.add_argument(
        "spec_dir",
        nargs="?",
        help="Spec directory (default: SVCSPEC_SPEC_DIR)",
    )


def handle_list_command(args: argparse.Namespace) -> int:
    """Handle the list command."""
    return list_command(spec_dir=getattr(args, "spec_dir", None))


@main_with_error_handling()
def list_command(spec_dir: str | None = None) -> int:
    """
    List every spec file in a directory.

    Returns:
        Exit code (0 for success, 1 if any spec failed to load)
    """
    directory = Path(spec_dir) if spec_dir else get_settings().spec_dir
    if not directory.is_dir():
        error(f"Spec directory not found: {directory}")
        return ExitCode.IO_ERROR

    rows: list[list[str]] = []
    failures = 0
    for path in sorted(spec_files(directory)):
        try:
            spec = load_spec_file(path)
        except SvcSpecError as e:
            failures += 1
            message = escape(format_error_message(e))
            rows.append([path.name, "-", "-", "-", f"[error]{message}[/error]"])
            continue
        rows.append(
            [
                path.name,
                str(spec.ident),
                spec.group,
                spec.composite or "-",
                spec.desired_state.value,
            ]
        )

    if not rows:
        warning(f"No spec files found in {directory}")
        return 0

    print_table(
        f"Specs in {directory}",
        ["File", "Ident", "Group", "Composite", "State"],
        rows,
    )
    console.print()
    return ExitCode.WARNING if failures else 0

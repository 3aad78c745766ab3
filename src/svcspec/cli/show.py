"""
CLI command for displaying a service spec.

Usage:
    svcspec show /hab/sup/default/specs/redis.spec
"""

from __future__ import annotations

import argparse
from typing import Any

from rich.markup import escape

from svcspec.cli.ux import console, header, print_key_value
from svcspec.core.errors import main_with_error_handling
from svcspec.specs.loader import load_spec_file


def register_show_parser(subparsers: argparse._SubParsersAction[Any]) -> None:
    """Register the show command parser."""
    show_parser = subparsers.add_parser("show", help="Show a service spec")
    show_parser.add_argument("spec_file", help="Path to a .spec file")


def handle_show_command(args: argparse.Namespace) -> int:
    """Handle the show command."""
    return show_command(spec_file=args.spec_file)


@main_with_error_handling()
def show_command(spec_file: str) -> int:
    """
    Load a spec (upgrading legacy files in memory) and print its fields.

    Returns:
        Exit code (0 for success)
    """
    spec = load_spec_file(spec_file)

    header(f"Service Spec: {spec.ident}")
    items = {key: escape(_display(value)) for key, value in spec.to_dict().items()}
    print_key_value(items)
    console.print()
    return 0


def _display(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(value) if value else "(none)"
    return str(value)

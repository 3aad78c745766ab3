"""
CLI command for rewriting a legacy spec file in the current schema.

Usage:
    svcspec migrate redis.spec
    svcspec migrate redis.spec --dry-run
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from rich.markup import escape

from svcspec.cli.ux import console, header, success
from svcspec.core.errors import ServiceSpecParse, main_with_error_handling
from svcspec.specs.legacy import ServiceSpecLegacy
from svcspec.specs.loader import parse_service_spec


def register_migrate_parser(subparsers: argparse._SubParsersAction[Any]) -> None:
    """Register the migrate command parser."""
    migrate_parser = subparsers.add_parser(
        "migrate",
        help="Rewrite a legacy service spec in the current schema",
    )
    migrate_parser.add_argument("spec_file", help="Path to a .spec file")
    migrate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the migrated spec without writing the file",
    )


def handle_migrate_command(args: argparse.Namespace) -> int:
    """Handle the migrate command."""
    return migrate_command(
        spec_file=args.spec_file,
        dry_run=getattr(args, "dry_run", False),
    )


@main_with_error_handling()
def migrate_command(spec_file: str, dry_run: bool = False) -> int:
    """
    Upgrade a legacy spec file in place.

    Returns:
        Exit code (0 for success)
    """
    path = Path(spec_file)
    legacy = ServiceSpecLegacy.from_file(path)

    if _is_current_schema(path):
        success(f"{path.name} is already in the current schema. No migration needed.")
        return 0

    spec = legacy.to_latest()

    if dry_run:
        header(f"Migration Preview: {spec.ident}")
        console.print(escape(spec.to_toml_string()))
        console.print("[muted]Run without --dry-run to write the file[/muted]")
        return 0

    spec.to_file(path)
    success(f"Migrated {path.name} to the current schema")
    return 0


def _is_current_schema(path: Path) -> bool:
    try:
        parse_service_spec(path.read_text())
    except ServiceSpecParse:
        return False
    return True

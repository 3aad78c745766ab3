"""
svcspec command line.

Usage:
    svcspec show FILE
    svcspec list [DIR]
    svcspec migrate FILE [--dry-run]
    svcspec check-binds FILE PACKAGE_DIR
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from svcspec.cli.check_binds import handle_check_binds_command, register_check_binds_parser
from svcspec.cli.list_specs import handle_list_command, register_list_parser
from svcspec.cli.migrate import handle_migrate_command, register_migrate_parser
from svcspec.cli.show import handle_show_command, register_show_parser
from svcspec.logging import configure_logging

HANDLERS = {
    "show": handle_show_command,
    "list": handle_list_command,
    "migrate": handle_migrate_command,
    "check-binds": handle_check_binds_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svcspec", description="Service spec tooling")
    subparsers = parser.add_subparsers(dest="command")

    register_show_parser(subparsers)
    register_list_parser(subparsers)
    register_migrate_parser(subparsers)
    register_check_binds_parser(subparsers)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    configure_logging()
    sys.exit(handler(args))

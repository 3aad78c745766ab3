"""
CLI command for checking a spec's binds against an installed package.

Usage:
    svcspec check-binds redis.spec /hab/pkgs/core/redis/4.0.14/20190319155852
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from svcspec.cli.ux import error, success
from svcspec.core.errors import ExitCode, main_with_error_handling
from svcspec.package.metadata import PackageInstall
from svcspec.specs.loader import load_spec_file


def register_check_binds_parser(subparsers: argparse._SubParsersAction[Any]) -> None:
    """Register the check-binds command parser."""
    check_parser = subparsers.add_parser(
        "check-binds",
        help="Validate a spec's binds against a package's bind contract",
    )
    check_parser.add_argument("spec_file", help="Path to a .spec file")
    check_parser.add_argument("package_dir", help="Install directory of the package")


def handle_check_binds_command(args: argparse.Namespace) -> int:
    """Handle the check-binds command."""
    return check_binds_command(spec_file=args.spec_file, package_dir=args.package_dir)


@main_with_error_handling()
def check_binds_command(spec_file: str, package_dir: str) -> int:
    """
    Validate binds; contract violations propagate as validation errors.

    Returns:
        Exit code (0 for success, 12 for a contract violation)
    """
    install_path = Path(package_dir)
    if not install_path.is_dir():
        error(f"Package directory not found: {package_dir}")
        return ExitCode.IO_ERROR

    spec = load_spec_file(spec_file)
    package = PackageInstall(ident=spec.ident, installed_path=install_path)
    spec.validate(package)

    success(f"Binds for {spec.ident} satisfy the package's bind contract")
    return 0

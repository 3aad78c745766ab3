"""
Unified error handling for service spec operations.

Every failure raised by this package derives from SvcSpecError and
carries an exit code used by the CLI.

Exit Codes:
- 0: Success
- 1: Warning (advisory, operation succeeded with warnings)
- 10: Configuration error
- 12: Validation error (bad spec, binding or bind contract)
- 13: I/O error (spec or metadata file could not be read or written)
- 127: Unknown/internal error
"""

from __future__ import annotations

import functools
import sys
import traceback
from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, TypeVar

import structlog

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands."""

    SUCCESS = 0
    WARNING = 1
    CONFIG_ERROR = 10
    VALIDATION_ERROR = 12
    IO_ERROR = 13
    UNKNOWN_ERROR = 127


class SvcSpecError(Exception):
    """Base exception for service spec errors with exit code support."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR
    show_traceback: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# =============================================================================
# Spec errors
# =============================================================================


class MissingRequiredIdent(SvcSpecError):
    """Raised when a spec has no package identity, or the default one."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self) -> None:
        super().__init__("Service spec is missing a required package identifier (ident)")


class ServiceSpecParse(SvcSpecError):
    """Raised when spec TOML is malformed or holds an invalid value."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, reason: str):
        super().__init__(f"Unable to parse service spec: {reason}", {"reason": reason})
        self.reason = reason


class ServiceSpecFileIO(SvcSpecError):
    """Raised when a spec file cannot be opened, read or written."""

    exit_code = ExitCode.IO_ERROR

    def __init__(self, path: Path, cause: OSError):
        super().__init__(
            f"Unable to read or write service spec file {path}: {cause}",
            {"path": str(path)},
        )
        self.path = path
        self.cause = cause


class InvalidBinding(SvcSpecError):
    """Raised when a binding string does not follow the binding grammar."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, value: str):
        super().__init__(
            f"Invalid binding '{value}', must be of the form "
            "[<SERVICE_NAME>:]<NAME>:<SERVICE_GROUP>"
        )
        self.value = value


class InvalidBinds(SvcSpecError):
    """Raised when spec binds match neither a required nor an optional package bind."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, names: list[str]):
        super().__init__(
            f"Invalid bind(s), {', '.join(names)}, not declared by the package",
            {"binds": ", ".join(names)},
        )
        self.names = names


class MissingRequiredBind(SvcSpecError):
    """Raised when required package binds are absent from a spec."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, names: list[str]):
        super().__init__(
            f"Missing required bind(s), {', '.join(names)}",
            {"binds": ", ".join(names)},
        )
        self.names = names


# =============================================================================
# Identity grammar errors
# =============================================================================


class InvalidPackageIdent(SvcSpecError):
    """Raised for a malformed origin/name[/version[/release]] string."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, value: str):
        super().__init__(
            f"Invalid package identifier '{value}', must be of the form "
            "origin/name[/version[/release]]"
        )
        self.value = value


class InvalidApplicationEnvironment(SvcSpecError):
    """Raised for a malformed app.env string."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, value: str):
        super().__init__(
            f"Invalid application environment '{value}', must be of the form app.env"
        )
        self.value = value


class InvalidServiceGroup(SvcSpecError):
    """Raised for a malformed [app.env#]service.group[@organization] string."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, value: str):
        super().__init__(
            f"Invalid service group '{value}', must be of the form "
            "[app.env#]service.group[@organization]"
        )
        self.value = value


# =============================================================================
# Package metadata errors
# =============================================================================


class MetadataFileIO(SvcSpecError):
    """Raised when a package metadata file exists but cannot be read."""

    exit_code = ExitCode.IO_ERROR

    def __init__(self, path: Path, cause: OSError):
        super().__init__(
            f"Unable to read package metadata file {path}: {cause}",
            {"path": str(path)},
        )
        self.path = path
        self.cause = cause


class MetadataParse(SvcSpecError):
    """Raised for a malformed line in a package metadata file."""

    exit_code = ExitCode.VALIDATION_ERROR

    def __init__(self, path: Path, line: str):
        super().__init__(
            f"Malformed entry in package metadata file {path}: '{line}'",
            {"path": str(path)},
        )
        self.path = path
        self.line = line


# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling(
    *,
    show_traceback: bool = False,
    log_errors: bool = True,
) -> Callable[[F], F]:
    """
    Decorator for CLI command functions that provides unified error handling.

    Usage:
        @main_with_error_handling()
        def my_command() -> int:
            return 0

    Exit codes:
        - SvcSpecError subclasses: Uses the error's exit_code
        - KeyboardInterrupt: Returns 130 (standard for SIGINT)
        - Other exceptions: Returns 127 (unknown error)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except SvcSpecError as e:
                if log_errors:
                    logger.error(
                        "command_error",
                        error_type=type(e).__name__,
                        message=e.message,
                        exit_code=e.exit_code,
                        **e.details,
                    )
                if e.show_traceback or show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                if log_errors:
                    logger.info("command_interrupted")
                return 130
            except Exception as e:
                if log_errors:
                    logger.error(
                        "unexpected_error",
                        error_type=type(e).__name__,
                        message=str(e),
                        exit_code=ExitCode.UNKNOWN_ERROR,
                    )
                if show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator


def format_error_message(error: SvcSpecError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg

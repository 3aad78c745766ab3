"""Core modules for svcspec - centralized error definitions."""

from svcspec.core.errors import (
    ExitCode,
    InvalidApplicationEnvironment,
    InvalidBinding,
    InvalidBinds,
    InvalidPackageIdent,
    InvalidServiceGroup,
    MetadataFileIO,
    MetadataParse,
    MissingRequiredBind,
    MissingRequiredIdent,
    ServiceSpecFileIO,
    ServiceSpecParse,
    SvcSpecError,
    format_error_message,
    main_with_error_handling,
)

__all__ = [
    "ExitCode",
    "SvcSpecError",
    # Spec errors
    "MissingRequiredIdent",
    "ServiceSpecParse",
    "ServiceSpecFileIO",
    "InvalidBinding",
    "InvalidBinds",
    "MissingRequiredBind",
    # Identity grammar errors
    "InvalidPackageIdent",
    "InvalidApplicationEnvironment",
    "InvalidServiceGroup",
    # Package metadata errors
    "MetadataFileIO",
    "MetadataParse",
    "main_with_error_handling",
    "format_error_message",
]

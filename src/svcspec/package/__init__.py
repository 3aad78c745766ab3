"""
Package identity and installed package metadata.
"""

from svcspec.package.ident import ApplicationEnvironment, PackageIdent, ServiceGroup
from svcspec.package.metadata import (
    Bind,
    BindMap,
    BindMapping,
    PackageBinds,
    PackageInstall,
)

__all__ = [
    "ApplicationEnvironment",
    "PackageIdent",
    "ServiceGroup",
    "Bind",
    "BindMap",
    "BindMapping",
    "PackageBinds",
    "PackageInstall",
]

"""
Package and service group identifiers.

Grammars:
    PackageIdent:            origin/name[/version[/release]]
    ApplicationEnvironment:  app.env
    ServiceGroup:            [app.env#]service.group[@organization]
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from svcspec.core.errors import (
    InvalidApplicationEnvironment,
    InvalidPackageIdent,
    InvalidServiceGroup,
)

# Segments may not contain any of the grammar's separators
_SEGMENT = r"[^.#@:/\s]+"

SERVICE_GROUP_PATTERN = re.compile(
    rf"(?:(?P<app_env>{_SEGMENT}\.{_SEGMENT})#)?"
    rf"(?P<service>{_SEGMENT})\.(?P<group>{_SEGMENT})"
    rf"(?:@(?P<organization>{_SEGMENT}))?"
)


@dataclass(frozen=True)
class PackageIdent:
    """
    Identity of a package.

    The zero value (empty origin and name) is the "default identity" and
    is never a valid spec identity.
    """

    origin: str = ""
    name: str = ""
    version: str | None = None
    release: str | None = None

    @classmethod
    def from_str(cls, value: str) -> PackageIdent:
        # "/" is how the default identity renders
        if value == "/":
            return cls()
        parts = value.split("/")
        if not 2 <= len(parts) <= 4 or not all(parts):
            raise InvalidPackageIdent(value)
        version = parts[2] if len(parts) > 2 else None
        release = parts[3] if len(parts) > 3 else None
        return cls(origin=parts[0], name=parts[1], version=version, release=release)

    def is_default(self) -> bool:
        return self == PackageIdent()

    def is_fully_qualified(self) -> bool:
        return self.version is not None and self.release is not None

    def __str__(self) -> str:
        parts = [self.origin, self.name]
        if self.version is not None:
            parts.append(self.version)
            if self.release is not None:
                parts.append(self.release)
        return "/".join(parts)


@dataclass(frozen=True)
class ApplicationEnvironment:
    """An application/environment pair, e.g. ``theinternet.preprod``."""

    application: str
    environment: str

    @classmethod
    def from_str(cls, value: str) -> ApplicationEnvironment:
        match = re.fullmatch(rf"({_SEGMENT})\.({_SEGMENT})", value)
        if match is None:
            raise InvalidApplicationEnvironment(value)
        return cls(application=match.group(1), environment=match.group(2))

    def __str__(self) -> str:
        return f"{self.application}.{self.environment}"


@dataclass(frozen=True)
class ServiceGroup:
    """
    The addressable unit a binding resolves against.

    Examples:
        redis.cache                        -> service=redis, group=cache
        app.env#redis.cache@acmecorp       -> all four parts
    """

    service: str
    group: str
    application_environment: ApplicationEnvironment | None = None
    organization: str | None = None

    @classmethod
    def from_str(cls, value: str) -> ServiceGroup:
        match = SERVICE_GROUP_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidServiceGroup(value)
        app_env = match.group("app_env")
        return cls(
            service=match.group("service"),
            group=match.group("group"),
            application_environment=ApplicationEnvironment.from_str(app_env) if app_env else None,
            organization=match.group("organization"),
        )

    @classmethod
    def new(
        cls,
        application_environment: ApplicationEnvironment | None,
        service: str,
        group: str,
        organization: str | None,
    ) -> ServiceGroup:
        """Build a service group from its parts, validating the result."""
        candidate = cls(
            service=service,
            group=group,
            application_environment=application_environment,
            organization=organization,
        )
        return cls.from_str(str(candidate))

    def __str__(self) -> str:
        value = f"{self.service}.{self.group}"
        if self.application_environment is not None:
            value = f"{self.application_environment}#{value}"
        if self.organization is not None:
            value = f"{value}@{self.organization}"
        return value

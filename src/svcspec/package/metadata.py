"""
Installed package metadata.

Reads the bind contract and composite bind map of an installed package
from its metadata files:

    BINDS            db=port host
    BINDS_OPTIONAL   cache=port
    BIND_MAP         core/web/1.0.0/20170101=db:core/postgres/9.6/20170102 cache:core/redis/4/20170103
    SERVICES         core/web/1.0.0/20170101

A metadata file that does not exist is treated as empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import structlog

from svcspec.core.errors import MetadataFileIO, MetadataParse, SvcSpecError
from svcspec.package.ident import PackageIdent

logger = structlog.get_logger()

BINDS_FILE = "BINDS"
BINDS_OPTIONAL_FILE = "BINDS_OPTIONAL"
BIND_MAP_FILE = "BIND_MAP"
SERVICES_FILE = "SERVICES"


@dataclass
class Bind:
    """One entry of a package's bind contract."""

    service: str
    exports: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BindMapping:
    """A composite-declared mapping of a bind name to the member that satisfies it."""

    bind_name: str
    satisfying_service: PackageIdent


# Consumed during composite resolution: each member's entry is removed as it is resolved.
BindMap = dict[PackageIdent, list[BindMapping]]


class PackageBinds(Protocol):
    """Source of a package's required and optional bind names."""

    def binds(self) -> list[Bind]: ...

    def binds_optional(self) -> list[Bind]: ...


@dataclass
class PackageInstall:
    """An installed package on disk."""

    ident: PackageIdent
    installed_path: Path

    def binds(self) -> list[Bind]:
        return [self._parse_bind(path, line) for path, line in self._lines(BINDS_FILE)]

    def binds_optional(self) -> list[Bind]:
        return [self._parse_bind(path, line) for path, line in self._lines(BINDS_OPTIONAL_FILE)]

    def bind_map(self) -> BindMap:
        """Return the composite's member ident -> bind mappings table."""
        bind_map: BindMap = {}
        for path, line in self._lines(BIND_MAP_FILE):
            member, sep, mappings = line.partition("=")
            if not sep or not mappings.strip():
                raise MetadataParse(path, line)
            try:
                member_ident = PackageIdent.from_str(member.strip())
                entries = []
                for mapping in mappings.split():
                    bind_name, sep, satisfying = mapping.partition(":")
                    if not sep or not bind_name:
                        raise MetadataParse(path, line)
                    entries.append(BindMapping(bind_name, PackageIdent.from_str(satisfying)))
            except MetadataParse:
                raise
            except SvcSpecError as e:
                raise MetadataParse(path, line) from e
            bind_map[member_ident] = entries
        return bind_map

    def services(self) -> list[PackageIdent]:
        """Return the member packages of a composite."""
        idents = []
        for path, line in self._lines(SERVICES_FILE):
            try:
                idents.append(PackageIdent.from_str(line))
            except SvcSpecError as e:
                raise MetadataParse(path, line) from e
        return idents

    def _lines(self, file_name: str) -> list[tuple[Path, str]]:
        path = self.installed_path / file_name
        try:
            content = path.read_text()
        except FileNotFoundError:
            logger.debug("metadata_file_missing", path=str(path), ident=str(self.ident))
            return []
        except OSError as e:
            raise MetadataFileIO(path, e) from e
        return [(path, line.strip()) for line in content.splitlines() if line.strip()]

    @staticmethod
    def _parse_bind(path: Path, line: str) -> Bind:
        name, sep, exports = line.partition("=")
        name = name.strip()
        if not sep or not name:
            raise MetadataParse(path, line)
        return Bind(service=name, exports=exports.split())

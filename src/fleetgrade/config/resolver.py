"""Resolve remote hosts: per-host overrides > [remote] defaults, or legacy keys.

Everything here is a pure function of the RemoteDocument passed in. No
logging, no file access, no module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from fleetgrade.config.document import RemoteDocument
from fleetgrade.config.remote import (
    DeprecatedBlock,
    RemoteBlock,
    ResolvedHost,
    merge,
)
from fleetgrade.exceptions import ConflictingFormatsError


@dataclass(frozen=True)
class CurrentFormat:
    """Only [[remote.hosts]] declares destinations."""

    remote: RemoteBlock


@dataclass(frozen=True)
class LegacyFormat:
    """Only remote_topgrades declares destinations."""

    deprecated: DeprecatedBlock


@dataclass(frozen=True)
class BothFormats:
    """Both shapes declare destinations; precedence is ambiguous."""

    remote: RemoteBlock
    deprecated: DeprecatedBlock


@dataclass(frozen=True)
class NoHosts:
    """Neither shape declares destinations."""


HostSource = Union[CurrentFormat, LegacyFormat, BothFormats, NoHosts]


def classify(document: RemoteDocument) -> HostSource:
    """Decide which shape supplies the hosts.

    Only declared destinations count. A legacy block holding nothing but a
    stray remote_topgrade_path, or a [remote] table without hosts, does not.
    """
    remote = document.remote if document.remote and document.remote.hosts else None
    deprecated = (
        document.deprecated
        if document.deprecated and document.deprecated.destinations
        else None
    )

    if remote is not None and deprecated is not None:
        return BothFormats(remote=remote, deprecated=deprecated)
    if remote is not None:
        return CurrentFormat(remote=remote)
    if deprecated is not None:
        return LegacyFormat(deprecated=deprecated)
    return NoHosts()


def _resolve_current(remote: RemoteBlock) -> list[ResolvedHost]:
    resolved = []
    for entry in remote.hosts:
        effective = merge(remote.defaults, entry.overrides)
        resolved.append(
            ResolvedHost(
                destination=entry.destination,
                connection_arguments=effective.connection_arguments or (),
                remote_path=effective.remote_path,
            )
        )
    return resolved


def _resolve_legacy(deprecated: DeprecatedBlock) -> list[ResolvedHost]:
    arguments = deprecated.split_arguments()
    return [
        ResolvedHost(
            destination=destination,
            connection_arguments=arguments,
            remote_path=deprecated.remote_path,
        )
        for destination in deprecated.destinations
    ]


def resolve(document: RemoteDocument) -> list[ResolvedHost]:
    """Produce the ordered list of hosts to upgrade.

    Hosts keep their declaration order and duplicates are kept.

    Raises:
        ConflictingFormatsError: if both [[remote.hosts]] and
            remote_topgrades declare destinations.
    """
    source = classify(document)

    if isinstance(source, BothFormats):
        raise ConflictingFormatsError(
            remote_destinations=[h.destination for h in source.remote.hosts],
            legacy_destinations=source.deprecated.destinations,
        )
    if isinstance(source, CurrentFormat):
        return _resolve_current(source.remote)
    if isinstance(source, LegacyFormat):
        return _resolve_legacy(source.deprecated)
    return []


def load_hosts(path: Path | None = None) -> list[ResolvedHost]:
    """Load config.toml and resolve its remote hosts."""
    return resolve(RemoteDocument.load(path))

"""Remote host options: global defaults, per-host overrides, legacy keys.

A ``config.toml`` can describe remote hosts in two shapes. The current one
groups everything under ``[remote]``::

    [remote]
    ssh_arguments = ["-o", "ConnectTimeout=2"]
    topgrade_path = "~/.cargo/bin/topgrade"

    [[remote.hosts]]
    destination = "ssh://foo@bar:8080"
    topgrade_path = "topgrade"

    [[remote.hosts]]
    destination = "pi@raspberry"

The deprecated one is a set of flat top-level keys that cannot vary per host::

    remote_topgrades = ["toothless", "pi", "parnas"]
    ssh_arguments = "-o ConnectTimeout=2"
    remote_topgrade_path = ".cargo/bin/topgrade"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CommonOptions:
    """Options that can be set globally or per host.

    None means "not set here": inherit from the enclosing scope, or fall
    back to the tool default.
    """

    connection_arguments: tuple[str, ...] | None = None  # passed to ssh
    remote_path: str | None = None  # topgrade executable on the remote


@dataclass(frozen=True)
class HostEntry:
    """A single ``[[remote.hosts]]`` entry."""

    # [user@]hostname or ssh://[user@]hostname[:port]; never validated here
    destination: str
    overrides: CommonOptions = CommonOptions()


@dataclass(frozen=True)
class RemoteBlock:
    """The ``[remote]`` table."""

    defaults: CommonOptions = CommonOptions()
    hosts: tuple[HostEntry, ...] = ()


@dataclass(frozen=True)
class DeprecatedBlock:
    """Legacy top-level remote keys (``remote_topgrades`` and friends)."""

    destinations: tuple[str, ...] = ()
    connection_arguments: str | None = None  # one un-split string
    remote_path: str | None = None

    def split_arguments(self) -> tuple[str, ...]:
        """Split connection_arguments on whitespace.

        Quotes and escapes are not interpreted; the arguments go straight to
        the ssh process, never through a shell.
        """
        if self.connection_arguments is None:
            return ()
        return tuple(self.connection_arguments.split())


@dataclass(frozen=True)
class ResolvedHost:
    """Execution-ready settings for one remote destination."""

    destination: str
    connection_arguments: tuple[str, ...] = ()
    remote_path: str | None = None  # None: rely on the remote PATH

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly representation."""
        return {
            "destination": self.destination,
            "connection_arguments": list(self.connection_arguments),
            "remote_path": self.remote_path,
        }


def _pick(override: T | None, base: T | None) -> T | None:
    if override is not None:
        return override
    return base


def merge(base: CommonOptions, override: CommonOptions) -> CommonOptions:
    """Overlay override on base, field by field.

    A field set in override always wins, even when it is empty (an explicit
    ``ssh_arguments = []`` clears the global arguments for that host).
    """
    return CommonOptions(
        connection_arguments=_pick(override.connection_arguments, base.connection_arguments),
        remote_path=_pick(override.remote_path, base.remote_path),
    )

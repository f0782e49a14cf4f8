"""Extract remote host settings from config.toml."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli

from fleetgrade.config.remote import CommonOptions, DeprecatedBlock, HostEntry, RemoteBlock
from fleetgrade.exceptions import ConfigError
from fleetgrade.output import warn

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "fleetgrade" / "config.toml"

KNOWN_COMMON_FIELDS = {"ssh_arguments", "topgrade_path"}
KNOWN_REMOTE_FIELDS = KNOWN_COMMON_FIELDS | {"hosts"}
KNOWN_HOST_FIELDS = KNOWN_COMMON_FIELDS | {"destination"}

# Top-level keys of the pre-[remote] format
DEPRECATED_FIELDS = ("remote_topgrades", "remote_topgrade_path", "ssh_arguments")


def _expect_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"config.toml: {where} must be a string, got {type(value).__name__}")
    return value


def _expect_str_list(value: Any, where: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"config.toml: {where} must be an array of strings")
    return tuple(value)


def _parse_common(data: dict[str, Any], where: str) -> CommonOptions:
    """Read ssh_arguments/topgrade_path from a [remote] or host table."""
    ssh_arguments = None
    topgrade_path = None
    if "ssh_arguments" in data:
        ssh_arguments = _expect_str_list(data["ssh_arguments"], f"{where} ssh_arguments")
    if "topgrade_path" in data:
        topgrade_path = _expect_str(data["topgrade_path"], f"{where} topgrade_path")
    return CommonOptions(connection_arguments=ssh_arguments, remote_path=topgrade_path)


def _parse_host(data: Any, index: int) -> HostEntry:
    where = f"[remote.hosts][{index}]"
    if not isinstance(data, dict):
        raise ConfigError(f"config.toml: {where} must be a table")

    unknown = set(data.keys()) - KNOWN_HOST_FIELDS
    if unknown:
        warn(f"config.toml: {where} unknown fields: {', '.join(sorted(unknown))}")

    if "destination" not in data:
        raise ConfigError(f"config.toml: {where} missing required field 'destination'")

    return HostEntry(
        destination=_expect_str(data["destination"], f"{where} destination"),
        overrides=_parse_common(data, where),
    )


def parse_remote_block(data: Any) -> RemoteBlock:
    """Build a RemoteBlock from the [remote] table.

    A table without ``hosts`` is valid and configures no destinations.
    """
    if not isinstance(data, dict):
        raise ConfigError("config.toml: [remote] must be a table")

    unknown = set(data.keys()) - KNOWN_REMOTE_FIELDS
    if unknown:
        warn(f"config.toml: [remote] unknown fields: {', '.join(sorted(unknown))}")

    hosts_data = data.get("hosts", [])
    if not isinstance(hosts_data, list):
        raise ConfigError("config.toml: [remote] hosts must be an array of tables")

    return RemoteBlock(
        defaults=_parse_common(data, "[remote]"),
        hosts=tuple(_parse_host(h, i) for i, h in enumerate(hosts_data)),
    )


def parse_deprecated_block(data: dict[str, Any]) -> DeprecatedBlock | None:
    """Build a DeprecatedBlock from top-level legacy keys.

    Returns None if none of the legacy keys is present.
    """
    if not any(key in data for key in DEPRECATED_FIELDS):
        return None

    destinations: tuple[str, ...] = ()
    if "remote_topgrades" in data:
        destinations = _expect_str_list(data["remote_topgrades"], "remote_topgrades")

    remote_path = None
    if "remote_topgrade_path" in data:
        remote_path = _expect_str(data["remote_topgrade_path"], "remote_topgrade_path")

    ssh_arguments = None
    if "ssh_arguments" in data:
        ssh_arguments = _expect_str(data["ssh_arguments"], "ssh_arguments")

    return DeprecatedBlock(
        destinations=destinations,
        connection_arguments=ssh_arguments,
        remote_path=remote_path,
    )


@dataclass(frozen=True)
class RemoteDocument:
    """The remote-related parts of a config.toml.

    All other sections of the file are ignored.
    """

    remote: RemoteBlock | None = None
    deprecated: DeprecatedBlock | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RemoteDocument":
        """Extract both remote shapes from a parsed TOML mapping."""
        remote = parse_remote_block(data["remote"]) if "remote" in data else None
        return cls(remote=remote, deprecated=parse_deprecated_block(data))

    @classmethod
    def loads(cls, text: str) -> "RemoteDocument":
        """Parse TOML text."""
        try:
            data = tomli.loads(text)
        except tomli.TOMLDecodeError as e:
            raise ConfigError(f"config.toml: {e}")
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Path | None = None) -> "RemoteDocument":
        """Load from file.

        Returns an empty document if the file doesn't exist.
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            return cls()

        with open(path, "rb") as f:
            try:
                data = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ConfigError(f"{path}: {e}")

        return cls.from_dict(data)

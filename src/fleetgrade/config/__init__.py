"""Configuration loading."""

from fleetgrade.config.document import RemoteDocument
from fleetgrade.config.remote import (
    CommonOptions,
    DeprecatedBlock,
    HostEntry,
    RemoteBlock,
    ResolvedHost,
    merge,
)
from fleetgrade.config.resolver import classify, load_hosts, resolve

__all__ = [
    "CommonOptions",
    "DeprecatedBlock",
    "HostEntry",
    "RemoteBlock",
    "RemoteDocument",
    "ResolvedHost",
    "classify",
    "load_hosts",
    "merge",
    "resolve",
]

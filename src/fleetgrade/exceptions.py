"""Exception hierarchy for fleetgrade."""

from __future__ import annotations


class FleetgradeError(Exception):
    """Base exception for all fleetgrade errors.

    Attributes:
        message: Human-readable error message
        exit_code: Suggested exit code for CLI (default 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigError(FleetgradeError):
    """Configuration-related errors (config.toml structure, TOML syntax)."""

    pass


class ConflictingFormatsError(ConfigError):
    """Both the [remote] table and legacy remote_topgrades declare hosts.

    Attributes:
        remote_destinations: Destinations from [[remote.hosts]]
        legacy_destinations: Destinations from remote_topgrades
    """

    def __init__(
        self,
        remote_destinations: tuple[str, ...] | list[str],
        legacy_destinations: tuple[str, ...] | list[str],
    ):
        self.remote_destinations = tuple(remote_destinations)
        self.legacy_destinations = tuple(legacy_destinations)
        super().__init__(
            "config.toml: both [[remote.hosts]] and the deprecated "
            "'remote_topgrades' declare hosts; remove one of them",
            exit_code=2,
        )

"""SSH operations."""

from fleetgrade.ssh.command import DEFAULT_REMOTE_EXECUTABLE, build_ssh_command

__all__ = ["DEFAULT_REMOTE_EXECUTABLE", "build_ssh_command"]

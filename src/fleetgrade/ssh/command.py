"""SSH command construction for remote upgrades."""

from __future__ import annotations

from collections.abc import Sequence

from fleetgrade.config.remote import ResolvedHost

# Used when no topgrade_path resolves; found through the remote PATH
DEFAULT_REMOTE_EXECUTABLE = "topgrade"


def build_ssh_command(
    host: ResolvedHost,
    tool_args: Sequence[str] = (),
    *,
    tty: bool = True,
) -> list[str]:
    """Build the ssh argument vector that upgrades one host.

    Connection arguments go before the destination so ssh treats them as
    its own options. TOPGRADE_PREFIX tags the remote output with the
    destination; TOPGRADE_KEEP_END keeps the remote summary on screen.

    The command is only built here, never run.
    """
    cmd = ["ssh", *host.connection_arguments]
    if tty:
        cmd.append("-t")
    cmd.append(host.destination)
    cmd.extend([
        "env",
        f"TOPGRADE_PREFIX={host.destination}",
        "TOPGRADE_KEEP_END=1",
    ])
    if host.remote_path is None:
        cmd.append(DEFAULT_REMOTE_EXECUTABLE)
    else:
        cmd.append(host.remote_path)
    cmd.extend(tool_args)
    return cmd

"""Shared test fixtures for fleetgrade."""

from __future__ import annotations

import logging

import pytest


REMOTE_CONFIG = """
[remote]
ssh_arguments = ["-o", "ConnectTimeout=2"]
topgrade_path = "~/.cargo/bin/topgrade"

[[remote.hosts]]
destination = "ssh://foo@bar:8080"
topgrade_path = "topgrade"

[[remote.hosts]]
destination = "pi@raspberry"

[[remote.hosts]]
destination = "baz"
"""

# Shape of a config.toml written for topgrade 10.1.2, before [remote] existed
DEPRECATED_CONFIG = """
# Don't ask for confirmations
assume_yes = true
disable = ["system", "emacs"]
ignore_failures = ["powershell"]
no_retry = true
run_in_tmux = true

# List of remote machines with Topgrade installed on them
remote_topgrades = ["toothless", "pi", "parnas"]

# Arguments to pass SSH when upgrading remote systems
ssh_arguments = "-o ConnectTimeout=2"

# Path to Topgrade executable on remote machines
remote_topgrade_path = ".cargo/bin/topgrade"

tmux_arguments = "-S /var/tmux.sock"
set_title = false
cleanup = true

[git]
max_concurrency = 5
repos = ["~/src/*/", "~/.config/something"]
pull_predefined = false
arguments = "--rebase --autostash"

[pre_commands]
"Emacs Snapshot" = "rm -rf ~/.emacs.d/elpa.bak && cp -rl ~/.emacs.d/elpa ~/.emacs.d/elpa.bak"

[linux]
arch_package_manager = "pacman"
yay_arguments = "--nodevel"

[distrobox]
use_root = false
containers = ["archlinux-latest"]
"""


@pytest.fixture
def remote_config_file(tmp_path):
    """Create a config.toml using the [remote] table."""
    config = tmp_path / "config.toml"
    config.write_text(REMOTE_CONFIG)
    return config


@pytest.fixture
def deprecated_config_file(tmp_path):
    """Create a config.toml using the deprecated top-level keys."""
    config = tmp_path / "config.toml"
    config.write_text(DEPRECATED_CONFIG)
    return config


@pytest.fixture
def conflicting_config_file(tmp_path):
    """Create a config.toml where both formats declare hosts."""
    config = tmp_path / "config.toml"
    config.write_text(
        """
remote_topgrades = ["toothless", "pi"]

[[remote.hosts]]
destination = "toothless"
"""
    )
    return config


@pytest.fixture(autouse=True)
def reset_fleetgrade_logger():
    """Drop handlers bound to a previous test's stderr."""
    logger = logging.getLogger("fleetgrade")
    level = logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    logger.setLevel(level)

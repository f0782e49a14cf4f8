"""Command-line interface for fleetgrade."""

from __future__ import annotations

import argparse
import json
import shlex
from pathlib import Path

from fleetgrade import __version__
from fleetgrade.config import RemoteDocument, ResolvedHost, classify, resolve
from fleetgrade.exceptions import ConflictingFormatsError, FleetgradeError
from fleetgrade.output import (
    debug,
    error,
    highlight_destination,
    info,
    report_conflict,
    setup_logging,
)
from fleetgrade.ssh import DEFAULT_REMOTE_EXECUTABLE, build_ssh_command


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="fleetgrade",
        description="Resolve the remote hosts configured for upgrades",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fleetgrade                          # list resolved hosts
  fleetgrade --json                   # same, as JSON
  fleetgrade --commands               # show the ssh command per host
  fleetgrade --commands -- -y         # pass -y to the remote topgrade
  fleetgrade -c ./config.toml         # use another config file
""",
    )

    parser.add_argument("--version", action="version", version=f"fleetgrade {__version__}")
    parser.add_argument(
        "-c", "--config",
        type=Path,
        metavar="PATH",
        help="Config file (default: ~/.config/fleetgrade/config.toml)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--json", action="store_true", help="Print resolved hosts as JSON")
    mode.add_argument(
        "--commands", action="store_true", help="Print the ssh command for each host"
    )

    parser.add_argument("--no-tty", action="store_true", help="Omit -t from ssh commands")
    parser.add_argument("--debug", action="store_true", help="Show debug output")
    parser.add_argument("tool_args", nargs="*", help="Arguments for the remote topgrade")

    return parser


def format_host(host: ResolvedHost) -> str:
    """One-line summary of a resolved host."""
    args = shlex.join(host.connection_arguments) if host.connection_arguments else "-"
    if host.remote_path is None:
        path = f"{DEFAULT_REMOTE_EXECUTABLE} (PATH)"
    else:
        path = shlex.quote(host.remote_path)
    return f"{highlight_destination(host.destination)}\targs: {args}\tpath: {path}"


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        return _main(argv)
    except ConflictingFormatsError as e:
        error(e.message)
        report_conflict(e.remote_destinations, e.legacy_destinations)
        return e.exit_code
    except FleetgradeError as e:
        error(e.message)
        return e.exit_code
    except KeyboardInterrupt:
        return 130


def _main(argv: list[str] | None = None) -> int:
    """Internal main function that may raise FleetgradeError."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)

    document = RemoteDocument.load(args.config)
    debug(f"[config] host source: {type(classify(document)).__name__}")

    hosts = resolve(document)
    for host in hosts:
        debug(f"[config] resolved {host.destination!r}: {host}")

    if args.json:
        print(json.dumps([h.to_dict() for h in hosts], indent=2))
        return 0

    if not hosts:
        info("No remote hosts configured")
        return 0

    for host in hosts:
        if args.commands:
            print(shlex.join(build_ssh_command(host, args.tool_args, tty=not args.no_tty)))
        else:
            print(format_host(host))

    return 0

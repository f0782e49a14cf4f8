"""Terminal output: colored messages and the fleetgrade logger."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
DIM = "\033[2m"
NC = "\033[0m"

_logger = logging.getLogger("fleetgrade")


class ColoredFormatter(logging.Formatter):
    """Color records by level when stderr is a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        if not _supports_color():
            return msg
        if record.levelno >= logging.ERROR:
            return f"{RED}{msg}{NC}"
        elif record.levelno >= logging.WARNING:
            return f"{YELLOW}{msg}{NC}"
        elif record.levelno <= logging.DEBUG:
            return f"{DIM}{msg}{NC}"
        return msg


def setup_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the fleetgrade logger.

    Args:
        debug: If True, show debug lines. Otherwise only warnings.
    """
    level = logging.DEBUG if debug else logging.WARNING
    _logger.setLevel(level)

    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColoredFormatter("%(message)s"))
        _logger.addHandler(handler)
    for h in _logger.handlers:
        h.setLevel(level)


def debug(msg: str) -> None:
    """Log debug message (only shown with --debug flag)."""
    _logger.debug(msg)


def warn(msg: str) -> None:
    """Log a config warning such as an unknown [remote] field."""
    _logger.warning(f"warning: {msg}")


def _supports_color(stream: object = None) -> bool:
    if stream is None:
        stream = sys.stderr
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not callable(isatty):
        return False
    return bool(isatty())


def _colorize(color: str, text: str, stream: object = None) -> str:
    if _supports_color(stream):
        return f"{color}{text}{NC}"
    return text


def error(msg: str) -> None:
    """Print error message to stderr."""
    print(_colorize(RED, f"error: {msg}"), file=sys.stderr)


def info(msg: str) -> None:
    """Print info message."""
    print(_colorize(CYAN, msg), file=sys.stderr)


def report_conflict(remote: Sequence[str], legacy: Sequence[str]) -> None:
    """Show which destinations each format declares.

    Printed after the error so the user can see what to migrate.
    """
    for label, destinations in (
        ("[[remote.hosts]]", remote),
        ("remote_topgrades (deprecated)", legacy),
    ):
        print(f"  {label}:", file=sys.stderr)
        for destination in destinations:
            print(f"    {highlight_destination(destination, sys.stderr)}", file=sys.stderr)


def highlight_destination(destination: str, stream: object = None) -> str:
    """Colorize a destination; stdout listings by default."""
    if stream is None:
        stream = sys.stdout
    return _colorize(GREEN, destination or "<empty>", stream)

"""fleetgrade - Resolve remote upgrade hosts from a layered config."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("fleetgrade")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback when running from a source checkout

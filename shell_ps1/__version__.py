"""Version information for shell-ps1."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("shell-ps1")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"

"""Version information for gwa."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gwa")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.1.0"

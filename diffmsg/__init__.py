"""AI-assisted git commit message drafting from a diff."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("diffmsg")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

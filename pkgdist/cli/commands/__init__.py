"""
Click command implementations for the pkgdist CLI.

Each module corresponds to a pkgdist command (e.g., build.py implements
'pkgdist build'). Commands are registered with the main group via
register_commands() in pkgdist.cli.
"""

from .build import build
from .info import info
from .targets import targets

COMMANDS = [
    build,
    info,
    targets,
]

__all__ = [
    "COMMANDS",
    "build",
    "info",
    "targets",
]

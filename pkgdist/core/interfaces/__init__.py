"""
Interface definitions for pkgdist services.
"""

from .command import ICommandRunner
from .logger import ILogger
from .presenter import IPresenter

__all__ = ["ICommandRunner", "ILogger", "IPresenter"]

"""
Output presenters for the pkgdist CLI.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]

"""
Core definitions for pkgdist: interfaces, models, settings and exceptions.
"""

from .exceptions import (
    CommandFailedError,
    ConfigFileError,
    ConfigValidationError,
    InvalidDestinationError,
    InvalidTargetError,
    PkgdistConfigError,
    PkgdistException,
    PkgdistExecutionError,
)

__all__ = [
    "CommandFailedError",
    "ConfigFileError",
    "ConfigValidationError",
    "InvalidDestinationError",
    "InvalidTargetError",
    "PkgdistConfigError",
    "PkgdistException",
    "PkgdistExecutionError",
]

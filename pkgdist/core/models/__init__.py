"""
Pydantic models for pkgdist.
"""

from .config import (
    COMPILE_MODES,
    BazelConfig,
    BuildProfile,
    CompileMode,
    ConfigBaseModel,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "COMPILE_MODES",
    "BazelConfig",
    "BuildProfile",
    "CompileMode",
    "ConfigBaseModel",
    "LogLevel",
    "LoggingConfig",
]

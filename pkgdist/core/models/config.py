"""
Configuration models.

Provides Pydantic models for pkgdist configuration with validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

# Type aliases
CompileMode = Literal["legacy", "aot"]
LogLevel = Literal["debug", "info", "warning", "error"]

COMPILE_MODES: tuple[str, ...] = ("legacy", "aot")


class ConfigBaseModel(BaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML / env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class BazelConfig(ConfigBaseModel):
    """Build tool invocation and label layout."""

    command: str = "yarn --silent bazel"
    source_root: str = "packages"
    release_tag: str = "release-with-framework"
    package_kind: str = ".*_package"
    package_target: str = "npm_package"
    release_config: str = "release"

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("bazel command must not be empty")
        return v

    @field_validator("source_root")
    @classmethod
    def normalize_source_root(cls, v: str) -> str:
        v = v.strip().strip("/")
        if not v:
            raise ValueError("source_root must name a directory under the workspace")
        return v

    @field_validator("package_target")
    @classmethod
    def validate_package_target(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v or ":" in v:
            raise ValueError("package_target must be a bare target name")
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    file_path: str = str(Path.home() / ".pkgdist" / "pkgdist.log")


class BuildProfile(ConfigBaseModel):
    """A named destination / compile mode / description preset."""

    dest: str
    mode: CompileMode = "legacy"
    description: str = ""

    @field_validator("dest")
    @classmethod
    def validate_dest(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("profile dest must not be empty")
        return v


def _default_profiles() -> dict[str, BuildProfile]:
    return {
        "default": BuildProfile(
            dest="dist/packages-dist", mode="legacy", description="Production"
        ),
        "ivy-aot": BuildProfile(
            dest="dist/packages-dist-ivy-aot", mode="aot", description="Ivy AOT"
        ),
    }


def merge_profiles(v: Any) -> Any:
    """User profiles extend the built-in ones instead of replacing them."""
    if not isinstance(v, dict):
        return v
    merged: dict[str, Any] = dict(_default_profiles())
    merged.update(v)
    return merged

"""
Pydantic Settings for pkgdist configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigValidationError
from .interfaces.logger import ILogger
from .models.config import (
    BazelConfig,
    BuildProfile,
    LoggingConfig,
    _default_profiles,
    merge_profiles,
)

CONFIG_DIR_NAME = ".pkgdist"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(
    start_dir: str | Path | None = None,
    logger: ILogger | None = None,
) -> Path | None:
    """
    Find .pkgdist/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml carrying a [tool.pkgdist] table also counts. Unreadable
    pyproject.toml files are skipped (logged at debug level).

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()
    start = start.resolve()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.is_file():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.is_file():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "pkgdist" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                if logger:
                    logger.debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                if logger:
                    logger.debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


def config_root(config_file: Path) -> Path:
    """Directory a config file belongs to (the project root it describes)."""
    if config_file.name == "pyproject.toml":
        return config_file.parent
    return config_file.parent.parent


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a TOML config file, unwrapping [tool.pkgdist] for pyproject.toml.

    Raises:
        ConfigFileError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Failed to parse config file: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Failed to read config file: {e}", file_path=str(path), cause=e
        ) from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("pkgdist", {})
    return data


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from a TOML config file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is None:
            self._data = read_config_file(self._config_path) if self._config_path else {}
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class PkgdistSettings(BaseSettings):
    """pkgdist configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (PKGDIST_<section>__<field>)
    3. TOML config file (.pkgdist/config.toml or pyproject.toml [tool.pkgdist])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "PKGDIST_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    bazel: BazelConfig = Field(default_factory=BazelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    profiles: dict[str, BuildProfile] = Field(default_factory=_default_profiles)

    # Internal fields (not from config)
    _config_file: Path | None = None

    @field_validator("profiles", mode="before")
    @classmethod
    def merge_builtin_profiles(cls, v: Any) -> Any:
        return merge_profiles(v)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        Note: sources are built per class, so the config path to read is
        passed in through a module-level variable set by load_settings().
        """
        toml_source = TomlConfigSource(settings_cls, config_path=_current_config_path)
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> Path | None:
        """Config file the settings were loaded from, if any."""
        return self._config_file

    def get_profile(self, name: str) -> BuildProfile:
        """Look up a build profile by name.

        Raises:
            ConfigValidationError: If no profile has that name
        """
        try:
            return self.profiles[name]
        except KeyError:
            known = ", ".join(sorted(self.profiles))
            raise ConfigValidationError(
                f"Unknown build profile '{name}' (known: {known})", key="profiles", value=name
            ) from None


# Module-level variable for passing to settings_customise_sources
_current_config_path: Path | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | Path | None = None,
    **overrides: Any,
) -> PkgdistSettings:
    """Load pkgdist settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values, highest priority

    Returns:
        PkgdistSettings instance with all sources merged

    Raises:
        ConfigFileError: If the config file cannot be read or parsed
        ConfigValidationError: If a config value is invalid
    """
    global _current_config_path

    path = config_path or find_config_file(start_dir)
    _current_config_path = path

    try:
        settings = PkgdistSettings(**overrides)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid configuration: {e}",
            context={"file_path": str(path)} if path else None,
            cause=e,
        ) from e
    finally:
        _current_config_path = None

    settings._config_file = path
    return settings

"""
Tests for pkgdist configuration loading.

Tests verify:
- Defaults match the legacy build script's constants
- .pkgdist/config.toml and pyproject.toml [tool.pkgdist] discovery
- Environment variables override TOML values
- Invalid files and values raise typed config errors
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pkgdist.core.exceptions import ConfigFileError, ConfigValidationError
from pkgdist.core.models.config import BazelConfig, BuildProfile
from pkgdist.core.settings import (
    PkgdistSettings,
    config_root,
    find_config_file,
    load_settings,
)


def _write_config(root: Path, text: str) -> Path:
    path = root / ".pkgdist" / "config.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestDefaults:
    def test_bazel_defaults(self):
        bazel = PkgdistSettings().bazel
        assert bazel.command == "yarn --silent bazel"
        assert bazel.source_root == "packages"
        assert bazel.release_tag == "release-with-framework"
        assert bazel.package_kind == ".*_package"
        assert bazel.package_target == "npm_package"
        assert bazel.release_config == "release"

    def test_builtin_profiles(self):
        settings = PkgdistSettings()
        assert settings.get_profile("default") == BuildProfile(
            dest="dist/packages-dist", mode="legacy", description="Production"
        )
        assert settings.get_profile("ivy-aot") == BuildProfile(
            dest="dist/packages-dist-ivy-aot", mode="aot", description="Ivy AOT"
        )

    def test_logging_off_by_default(self):
        logging = PkgdistSettings().logging
        assert logging.level == "warning"
        assert logging.console is False
        assert logging.file is False


class TestFindConfigFile:
    def test_walks_up_to_config_dir(self, tmp_path: Path):
        config = _write_config(tmp_path, "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == config.resolve()

    def test_pyproject_with_section(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[tool.pkgdist.bazel]\ncommand = "bazel"\n')
        assert find_config_file(tmp_path) == (tmp_path / "pyproject.toml").resolve()

    def test_pyproject_without_section_ignored(self, tmp_path: Path):
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text('[tool.other]\nkey = 1\n')
        config = _write_config(tmp_path, "")
        assert find_config_file(project) == config.resolve()

    def test_broken_pyproject_skipped(self, tmp_path: Path):
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[tool.pkgdist\n")
        config = _write_config(tmp_path, "")
        assert find_config_file(project) == config.resolve()

    def test_broken_pyproject_logged(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[tool.pkgdist\n")
        _write_config(tmp_path, "")
        logger = MagicMock()
        find_config_file(tmp_path, logger=logger)
        logger.debug.assert_not_called()

        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[tool.pkgdist\n")
        find_config_file(project, logger=logger)
        logger.debug.assert_called_once()

    def test_config_root(self, tmp_path: Path):
        assert config_root(tmp_path / ".pkgdist" / "config.toml") == tmp_path
        assert config_root(tmp_path / "pyproject.toml") == tmp_path


class TestLoadSettings:
    def test_values_from_toml(self, tmp_path: Path):
        _write_config(
            tmp_path,
            '[bazel]\ncommand = "bazelisk"\nsource_root = "libs"\n\n[logging]\nlevel = "debug"\n',
        )
        settings = load_settings(start_dir=tmp_path)

        assert settings.bazel.command == "bazelisk"
        assert settings.bazel.source_root == "libs"
        assert settings.bazel.package_target == "npm_package"
        assert settings.logging.level == "debug"
        assert settings.config_file == (tmp_path / ".pkgdist" / "config.toml").resolve()

    def test_values_from_pyproject(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[tool.pkgdist.bazel]\nrelease_tag = "publish"\n')
        settings = load_settings(start_dir=tmp_path)
        assert settings.bazel.release_tag == "publish"

    def test_user_profiles_extend_builtins(self, tmp_path: Path):
        _write_config(
            tmp_path,
            '[profiles.nightly]\ndest = "dist/nightly"\nmode = "aot"\ndescription = "Nightly"\n',
        )
        settings = load_settings(start_dir=tmp_path)

        assert settings.get_profile("nightly").dest == "dist/nightly"
        assert settings.get_profile("default").dest == "dist/packages-dist"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        _write_config(tmp_path, '[bazel]\ncommand = "bazelisk"\nsource_root = "libs"\n')
        monkeypatch.setenv("PKGDIST_BAZEL__COMMAND", "bazel --bazelrc=ci.bazelrc")

        settings = load_settings(start_dir=tmp_path)

        assert settings.bazel.command == "bazel --bazelrc=ci.bazelrc"
        assert settings.bazel.source_root == "libs"

    def test_overrides_win(self, tmp_path: Path):
        _write_config(tmp_path, '[bazel]\ncommand = "bazelisk"\n')
        settings = load_settings(start_dir=tmp_path, bazel={"command": "bazel"})
        assert settings.bazel.command == "bazel"

    def test_explicit_config_path(self, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text('[bazel]\npackage_target = "pkg"\n')
        settings = load_settings(config_path=path)
        assert settings.bazel.package_target == "pkg"
        assert settings.config_file == path

    def test_no_config_file(self, tmp_path: Path):
        settings = load_settings(start_dir=tmp_path)
        assert settings.config_file is None

    def test_invalid_toml(self, tmp_path: Path):
        path = _write_config(tmp_path, "[bazel\ncommand = ")
        with pytest.raises(ConfigFileError) as exc_info:
            load_settings(start_dir=tmp_path)
        assert exc_info.value.context["file_path"] == str(path.resolve())

    def test_invalid_value(self, tmp_path: Path):
        _write_config(tmp_path, '[logging]\nlevel = "loud"\n')
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=tmp_path)

    def test_invalid_profile_mode(self, tmp_path: Path):
        _write_config(tmp_path, '[profiles.bad]\ndest = "dist/x"\nmode = "jit"\n')
        with pytest.raises(ConfigValidationError):
            load_settings(start_dir=tmp_path)

    def test_unknown_profile(self):
        with pytest.raises(ConfigValidationError, match="Unknown build profile 'nope'"):
            PkgdistSettings().get_profile("nope")


class TestBazelConfigValidation:
    def test_source_root_normalized(self):
        assert BazelConfig(source_root="/packages/").source_root == "packages"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_command_rejected(self, value):
        with pytest.raises(ValueError):
            BazelConfig(command=value)

    @pytest.mark.parametrize("value", ["", "a:b", "x/npm_package"])
    def test_package_target_must_be_bare(self, value):
        with pytest.raises(ValueError):
            BazelConfig(package_target=value)

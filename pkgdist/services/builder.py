"""
Package builder.

Builds the release-eligible packages with the build tool and copies each
package's output directory into a destination tree, the way the legacy
shell build laid out its dist directory.
"""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import InvalidDestinationError
from ..core.models.config import COMPILE_MODES, BazelConfig
from ..presenters.console import ConsolePresenter
from .logging import NullLogger
from .targets import build_command, package_name, parse_targets, query_command

if TYPE_CHECKING:
    from ..core.interfaces.command import ICommandRunner
    from ..core.interfaces.logger import ILogger
    from ..core.interfaces.presenter import IPresenter
    from .environment import BuildEnvironment


class PackageBuilder:
    """
    Builds packages and copies their artifacts into a destination tree.

    Steps, in order:
    - query the build tool for release-eligible package targets
    - build all of them in one invocation
    - create the destination directory
    - copy each package that produced output, replacing what was there

    Usage:
        builder = PackageBuilder(env, settings.bazel, runner)
        builder.build("dist/packages-dist", "legacy", "Production")
    """

    def __init__(
        self,
        environment: BuildEnvironment,
        config: BazelConfig,
        runner: ICommandRunner,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._env = environment
        self._config = config
        self._runner = runner
        self._presenter = presenter or ConsolePresenter()
        self._logger = logger or NullLogger()

    def build(self, dest_path: str, compile_mode: str, description: str) -> None:
        """
        Build the packages and copy them to <project root>/<dest_path>.

        Args:
            dest_path: Output directory, relative to the project root
            compile_mode: Either `legacy` (view engine) or `aot` (ivy)
            description: Human-readable description of the build

        Raises:
            ValueError: If compile_mode is not a known mode
            InvalidDestinationError: If dest_path is empty or absolute
            CommandFailedError: If the query or the build fails
            InvalidTargetError: If a queried label has an unexpected shape
        """
        if compile_mode not in COMPILE_MODES:
            raise ValueError(
                f"Invalid compile mode {compile_mode!r}, expected one of {', '.join(COMPILE_MODES)}"
            )
        abs_dest = self.destination(dest_path)

        self._presenter.print_banner(
            [
                f"{self._env.script_path}:",
                "  Building npm packages",
                f"  Mode: {description}",
            ]
        )

        targets = self.discover_targets()
        # Every label must map to a package before anything is built or copied.
        packages = [
            package_name(target, self._config.source_root, self._config.package_target)
            for target in targets
        ]

        # --config=release so snapshot builds get published with embedded version info.
        if targets:
            self._runner.execute(
                build_command(
                    self._env.bazel_cmd,
                    targets,
                    compile_mode,
                    release_config=self._config.release_config,
                )
            )
        else:
            self._logger.warning("No release package targets found under //%s", self._config.source_root)

        abs_dest.mkdir(parents=True, exist_ok=True)

        copied = 0
        for pkg in packages:
            if self.copy_package(pkg, abs_dest):
                copied += 1

        self._logger.info(
            "Copied %d of %d package(s) to %s", copied, len(targets), abs_dest
        )

    def destination(self, dest_path: str) -> Path:
        """<project root>/<dest_path>; dest_path must be relative."""
        if not dest_path or Path(dest_path).is_absolute():
            raise InvalidDestinationError(dest_path)
        return self._env.project_root / dest_path

    def discover_targets(self) -> list[str]:
        """Query the build tool for release-eligible package targets."""
        output = self._runner.execute(
            query_command(self._env.bazel_cmd, self._config), capture_output=True
        )
        targets = parse_targets(output or "")
        self._logger.debug("Discovered %d target(s): %s", len(targets), targets)
        return targets

    def source_dir(self, pkg: str) -> Path:
        """Where the build tool leaves the package output for pkg."""
        return self._env.bazel_bin / self._config.source_root / pkg / self._config.package_target

    def copy_package(self, pkg: str, abs_dest: Path) -> bool:
        """
        Replace abs_dest/pkg with the package's build output.

        Returns:
            False if the target produced no package directory (skipped)
        """
        src_dir = self.source_dir(pkg)
        dest_dir = abs_dest / pkg

        if not src_dir.is_dir():
            self._logger.debug("No package output for %s at %s, skipping", pkg, src_dir)
            return False

        self._presenter.print(f"# Copy artifacts to {dest_dir}")
        remove_path(dest_dir)
        shutil.copytree(src_dir, dest_dir)
        make_owner_writable(dest_dir)
        return True


def remove_path(path: Path) -> None:
    """rm -rf for a single path; missing paths are fine."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        # A read-only tree (e.g. left by an earlier copy) cannot be emptied as is.
        make_owner_writable(path)
        shutil.rmtree(path)


def make_owner_writable(root: Path) -> None:
    """chmod -R u+w, skipping symlinks."""
    _add_owner_write(root)
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            _add_owner_write(Path(dirpath) / name)


def _add_owner_write(path: Path) -> None:
    if path.is_symlink():
        return
    mode = path.stat().st_mode
    if not mode & stat.S_IWUSR:
        path.chmod(stat.S_IMODE(mode) | stat.S_IWUSR)


def build_target_packages(
    environment: BuildEnvironment,
    config: BazelConfig,
    runner: ICommandRunner,
    dest_path: str,
    compile_mode: str,
    description: str,
    logger: ILogger | None = None,
) -> None:
    """Build the packages into dest_path (see PackageBuilder.build)."""
    PackageBuilder(environment, config, runner, logger=logger).build(dest_path, compile_mode, description)

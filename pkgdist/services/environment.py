"""
Build environment handle.

Holds everything the package build needs to know about the workspace: the
project root, the build tool's binary output root, the invocation prefix and
the entry script. Created once per invocation and passed to the builder.
"""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.settings import config_root

if TYPE_CHECKING:
    from ..core.interfaces.command import ICommandRunner
    from ..core.settings import PkgdistSettings


def resolve_project_root(
    settings: PkgdistSettings,
    explicit: str | Path | None = None,
    cwd: Path | None = None,
) -> Path:
    """Find the project root.

    Order: explicit path, the directory owning the loaded config file, the git
    top-level containing cwd, then cwd itself.
    """
    if explicit is not None:
        return Path(explicit).resolve()

    if settings.config_file is not None:
        return config_root(settings.config_file).resolve()

    cwd = cwd or Path.cwd()
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            stderr=subprocess.DEVNULL,
        )
        root = out.decode().strip()
        if root:
            return Path(root).resolve()
    except (OSError, subprocess.CalledProcessError):
        pass
    return cwd.resolve()


@dataclass(frozen=True)
class BuildEnvironment:
    """Resolved workspace facts shared by every build step.

    Attributes:
        project_root: Absolute path to the project root directory
        bazel_bin: Absolute path to the build tool's binary output root
        bazel_cmd: Command prefix used to invoke the build tool
        script_path: Entry script path, relative to project_root
    """

    project_root: Path
    bazel_bin: Path
    bazel_cmd: str
    script_path: str

    @classmethod
    def create(
        cls,
        settings: PkgdistSettings,
        runner: ICommandRunner,
        project_root: str | Path | None = None,
        script: str | Path | None = None,
    ) -> BuildEnvironment:
        """Query the build tool for its output root and assemble the handle.

        Without project_root the root is found by resolve_project_root().

        Raises:
            CommandFailedError: If `<bazel> info bazel-bin` fails
        """
        root = resolve_project_root(settings, explicit=project_root)
        bazel_cmd = settings.bazel.command

        bazel_bin = runner.execute(f"{bazel_cmd} info bazel-bin", capture_output=True) or ""
        bin_path = Path(bazel_bin)
        if not bin_path.is_absolute():
            bin_path = root / bin_path

        if script is None:
            script = sys.argv[0] if sys.argv and sys.argv[0] else "pkgdist"
        script_path = os.path.relpath(Path(script).resolve(), root)

        return cls(
            project_root=root,
            bazel_bin=bin_path,
            bazel_cmd=bazel_cmd,
            script_path=script_path,
        )

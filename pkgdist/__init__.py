"""
pkgdist: build release npm packages with Bazel and lay them out in a dist tree.

Library usage:
    from pkgdist import (
        BuildEnvironment,
        PackageBuilder,
        ShellCommandRunner,
        load_settings,
        resolve_project_root,
    )

    settings = load_settings()
    root = resolve_project_root(settings)
    runner = ShellCommandRunner(cwd=str(root))
    env = BuildEnvironment.create(settings, runner, root)
    PackageBuilder(env, settings.bazel, runner).build("dist/packages-dist", "legacy", "Production")
"""

from .core.exceptions import (
    CommandFailedError,
    InvalidDestinationError,
    InvalidTargetError,
    PkgdistException,
)
from .core.settings import PkgdistSettings, load_settings
from .services.builder import PackageBuilder, build_target_packages
from .services.command_runner import ShellCommandRunner
from .services.environment import BuildEnvironment, resolve_project_root

__all__ = [
    "BuildEnvironment",
    "CommandFailedError",
    "InvalidDestinationError",
    "InvalidTargetError",
    "PackageBuilder",
    "PkgdistException",
    "PkgdistSettings",
    "ShellCommandRunner",
    "build_target_packages",
    "load_settings",
    "resolve_project_root",
]

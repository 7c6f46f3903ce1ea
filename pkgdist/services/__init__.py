"""
Services driving the build tool and laying out the package tree.
"""

from .builder import PackageBuilder, build_target_packages
from .command_runner import ShellCommandRunner
from .environment import BuildEnvironment, resolve_project_root

__all__ = [
    "BuildEnvironment",
    "PackageBuilder",
    "ShellCommandRunner",
    "build_target_packages",
    "resolve_project_root",
]

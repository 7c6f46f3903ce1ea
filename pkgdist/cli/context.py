"""
Click context extension for the pkgdist CLI.

Provides the PkgdistContext dataclass that holds settings and lazily built
services, passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..core.interfaces.command import ICommandRunner
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.settings import PkgdistSettings, load_settings
from ..presenters.console import ConsolePresenter
from ..services.builder import PackageBuilder
from ..services.command_runner import ShellCommandRunner
from ..services.environment import BuildEnvironment, resolve_project_root
from ..services.logging import NullLogger, PkgdistLogger


@dataclass
class PkgdistContext:
    """Context passed through the Click command chain.

    Created once at CLI startup. The build environment is only resolved when
    a command needs it, since doing so runs the build tool.

    Attributes:
        settings: Loaded configuration
        project_root: Resolved project root directory
        presenter: User-facing output
        runner: Command runner used for every build-tool call
        logger: Diagnostic logger handed to every service
    """

    settings: PkgdistSettings
    project_root: Path
    presenter: IPresenter
    runner: ICommandRunner
    logger: ILogger = field(default_factory=NullLogger)
    _environment: BuildEnvironment | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        project_root: str | Path | None = None,
        verbose: bool = False,
        cwd: Path | None = None,
    ) -> PkgdistContext:
        """Load settings, configure logging and build the default services.

        Args:
            project_root: Explicit project root override
            verbose: Log debug output to stderr
            cwd: Directory to start searching for config (defaults to Path.cwd())
        """
        cwd = cwd or Path.cwd()
        start_dir = Path(project_root) if project_root else cwd
        settings = load_settings(start_dir=start_dir)

        logger = PkgdistLogger.from_config(settings.logging, console=True if verbose else None)
        if verbose:
            logger.set_level("debug")
        logger.debug("Loaded settings from %s", settings.config_file or "defaults")

        root = resolve_project_root(settings, explicit=project_root, cwd=cwd)
        return cls(
            settings=settings,
            project_root=root,
            presenter=ConsolePresenter(),
            runner=ShellCommandRunner(logger=logger, cwd=str(root)),
            logger=logger,
        )

    @property
    def environment(self) -> BuildEnvironment:
        """Build environment, resolved on first use."""
        if self._environment is None:
            self._environment = BuildEnvironment.create(
                self.settings, self.runner, self.project_root
            )
        return self._environment

    def create_builder(self) -> PackageBuilder:
        return PackageBuilder(
            self.environment,
            self.settings.bazel,
            self.runner,
            presenter=self.presenter,
            logger=self.logger,
        )

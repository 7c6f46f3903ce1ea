"""
Shared pytest fixtures for pkgdist tests.

- fake_runner: records build-tool commands and answers query / info calls
- bazel_bin: empty build-tool output root under tmp_path
- build_env: BuildEnvironment pointing at tmp_path directories
- make_package: helper writing a fake package output directory
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from pkgdist.core.exceptions import CommandFailedError
from pkgdist.core.interfaces.command import ICommandRunner
from pkgdist.presenters.console import ConsolePresenter
from pkgdist.services.environment import BuildEnvironment


class FakeRunner(ICommandRunner):
    """Command runner that never spawns processes."""

    def __init__(
        self,
        query_output: str = "",
        bazel_bin: str = "/bazel-bin",
        fail_on: str | None = None,
        returncode: int = 1,
    ) -> None:
        self.query_output = query_output
        self.bazel_bin = bazel_bin
        self.fail_on = fail_on
        self.returncode = returncode
        self.calls: list[tuple[str, bool]] = []

    @property
    def commands(self) -> list[str]:
        return [cmd for cmd, _ in self.calls]

    def execute(self, command: str, capture_output: bool = False) -> str | None:
        self.calls.append((command, capture_output))
        if self.fail_on and self.fail_on in command:
            raise CommandFailedError(command, self.returncode)
        if not capture_output:
            return None
        if " query " in command:
            return self.query_output.strip()
        if " info bazel-bin" in command:
            return self.bazel_bin
        return ""


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def bazel_bin(tmp_path: Path) -> Path:
    path = tmp_path / "bazel-out" / "bin"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def build_env(project_root: Path, bazel_bin: Path) -> BuildEnvironment:
    return BuildEnvironment(
        project_root=project_root,
        bazel_bin=bazel_bin,
        bazel_cmd="bazel",
        script_path="scripts/build-packages-dist.py",
    )


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def presenter(output: io.StringIO) -> ConsolePresenter:
    return ConsolePresenter(use_color=False, file=output)


@pytest.fixture
def make_package(bazel_bin: Path) -> Callable[..., Path]:
    """Write bazel-bin/packages/<pkg>/npm_package with the given files."""

    def _make(pkg: str, files: dict[str, str] | None = None) -> Path:
        pkg_dir = bazel_bin / "packages" / pkg / "npm_package"
        pkg_dir.mkdir(parents=True)
        for rel, content in (files or {"package.json": f'{{"name": "@angular/{pkg}"}}'}).items():
            target = pkg_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return pkg_dir

    return _make

"""Integration test fixtures: a fake build tool driven through the real CLI."""

import os
import stat
import subprocess
import sys
from pathlib import Path

import pytest

FAKE_BAZEL = r"""#!/bin/sh
# Minimal stand-in for `bazel`: answers info/query and fakes a build.
case "$1" in
  info)
    echo "$FAKE_BAZEL_BIN"
    ;;
  query)
    printf '//packages/core:npm_package\r\n//packages/common:npm_package\n'
    ;;
  build)
    echo "$@" > "$FAKE_BAZEL_LOG"
    if [ -n "$FAKE_BAZEL_FAIL" ]; then
      echo "ERROR: build failed" 1>&2
      exit "$FAKE_BAZEL_FAIL"
    fi
    mkdir -p "$FAKE_BAZEL_BIN/packages/core/npm_package/bundles"
    echo '{"name": "@angular/core"}' > "$FAKE_BAZEL_BIN/packages/core/npm_package/package.json"
    echo 'umd' > "$FAKE_BAZEL_BIN/packages/core/npm_package/bundles/core.umd.js"
    chmod -R a-w "$FAKE_BAZEL_BIN/packages/core/npm_package/package.json"
    ;;
  *)
    echo "unexpected command: $*" 1>&2
    exit 64
    ;;
esac
"""


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A project root with .pkgdist/config.toml pointing at the fake build tool."""
    tool = tmp_path / "fake-bazel.sh"
    tool.write_text(FAKE_BAZEL)
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR)

    root = tmp_path / "workspace"
    config = root / ".pkgdist" / "config.toml"
    config.parent.mkdir(parents=True)
    config.write_text(f'[bazel]\ncommand = "sh {tool}"\n')
    return root


@pytest.fixture
def run_pkgdist(tmp_path: Path, workspace: Path):
    """Run `python -m pkgdist` inside the workspace with the fake tool's env."""

    def _run(*args: str, fail: int | None = None) -> subprocess.CompletedProcess:
        env = dict(os.environ)
        env["FAKE_BAZEL_BIN"] = str(tmp_path / "bazel-out" / "bin")
        env["FAKE_BAZEL_LOG"] = str(tmp_path / "bazel-build.log")
        env.pop("FAKE_BAZEL_FAIL", None)
        if fail is not None:
            env["FAKE_BAZEL_FAIL"] = str(fail)
        return subprocess.run(
            [sys.executable, "-m", "pkgdist", *args],
            cwd=workspace,
            env=env,
            capture_output=True,
            text=True,
        )

    return _run

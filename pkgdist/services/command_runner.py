"""
Shell command runner.

Runs build-tool commands synchronously, either streaming their output to the
current process' stdout or capturing it for the caller.
"""

from __future__ import annotations

import subprocess
import sys
from typing import BinaryIO

from ..core.exceptions import CommandFailedError
from ..core.interfaces.command import ICommandRunner
from ..core.interfaces.logger import ILogger
from .logging import NullLogger


class ShellCommandRunner(ICommandRunner):
    """
    Runs commands through the shell and blocks until they exit.

    By default the child writes straight to our stdout, which keeps colors and
    in-place progress output working. With capture_output the child's stdout
    is collected, echoed byte for byte once it exits, and returned trimmed.
    stdin and stderr are always inherited.
    """

    def __init__(
        self,
        logger: ILogger | None = None,
        stdout: BinaryIO | None = None,
        cwd: str | None = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            logger: Diagnostic logger (defaults to NullLogger)
            stdout: Binary stream captured output is echoed to
                (defaults to sys.stdout.buffer)
            cwd: Working directory for child processes (defaults to ours)
        """
        self._logger = logger or NullLogger()
        self._stdout = stdout
        self._cwd = cwd

    def execute(self, command: str, capture_output: bool = False) -> str | None:
        """Run a command, returning its trimmed stdout when capturing."""
        self._logger.debug("Running command (capture=%s): %s", capture_output, command)

        # Note: shell=True since the build tool prefix and query expression
        # are plain shell strings with their own quoting.
        result = subprocess.run(
            command,
            shell=True,
            cwd=self._cwd,
            stdout=subprocess.PIPE if capture_output else None,
        )

        if result.returncode != 0:
            self._logger.error("Command exited with %d: %s", result.returncode, command)
            raise CommandFailedError(command, result.returncode)

        if not capture_output:
            return None

        output: bytes = result.stdout or b""
        self._echo(output)
        return output.decode(errors="replace").strip()

    def _echo(self, output: bytes) -> None:
        if self._stdout is not None:
            self._stdout.write(output)
            self._stdout.flush()
            return

        # Text written through sys.stdout must land before the raw bytes.
        sys.stdout.flush()
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()

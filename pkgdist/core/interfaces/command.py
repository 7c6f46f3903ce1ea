"""
Command runner interface.

The build tool is only ever reached through this contract, so the package
builder can be driven by a fake runner in tests.
"""

from abc import ABC, abstractmethod


class ICommandRunner(ABC):
    """Runs shell commands synchronously on behalf of the builder."""

    @abstractmethod
    def execute(self, command: str, capture_output: bool = False) -> str | None:
        """
        Run a shell command and block until it exits.

        Args:
            command: Shell command line
            capture_output: Collect stdout and return it instead of streaming it

        Returns:
            The trimmed stdout when capture_output is True, otherwise None

        Raises:
            CommandFailedError: If the command exits with a non-zero status
        """
        pass

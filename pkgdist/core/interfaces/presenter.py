"""
Presenter interface definitions for output formatting.

Keeps user-facing progress output separate from diagnostic logging.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations handle formatting and displaying output
    to the user.
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_banner(self, lines: list[str]) -> None:
        """
        Print a block of lines framed by separator rows.

        Args:
            lines: Lines to show inside the frame
        """
        pass

    @abstractmethod
    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a table.

        Args:
            headers: Column headers
            rows: Table rows (list of row values)
        """
        pass

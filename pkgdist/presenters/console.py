"""
Console presenter for terminal output.

Implements human-readable output formatting for the CLI.
"""

import sys

from ..core.interfaces.presenter import IPresenter

BANNER_RULE = "#" * 34


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Formats output for human-readable terminal display.
    """

    def __init__(self, use_color: bool = True, file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes
            file: Output file (defaults to sys.stdout)
        """
        self._file = file or sys.stdout
        self._use_color = use_color and self._file.isatty()

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self._file, flush=True)

    def print_banner(self, lines: list[str]) -> None:
        self.print(BANNER_RULE)
        for line in lines:
            self.print(line)
        self.print(BANNER_RULE)

    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a formatted table.

        Args:
            headers: Column headers
            rows: Table rows
        """
        if not rows:
            return

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))

        header_line = "  ".join(str(h).ljust(widths[i]) for i, h in enumerate(headers))
        if self._use_color:
            print(f"\033[1m{header_line}\033[0m", file=self._file)
        else:
            print(header_line, file=self._file)
        print("  ".join("-" * w for w in widths), file=self._file)

        for row in rows:
            line = "  ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row) if i < len(widths))
            print(line.rstrip(), file=self._file)

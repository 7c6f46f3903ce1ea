"""
Logger implementation for pkgdist internal diagnostics.

Wraps stdlib logging with configurable handlers for console (stderr) and file.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig


class PkgdistLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    Supports dual output to stderr and a rotating log file.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "pkgdist",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        file_path: str | Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable file output
            file_path: Log file location (required when file_enabled)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # Let handlers filter
        self._logger.handlers.clear()
        self._logger.propagate = False

        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        log_level = self.LEVEL_MAP.get(level.lower(), logging.WARNING)

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(log_level)
            console.setFormatter(formatter)
            self._logger.addHandler(console)
            self._console_handler = console

        if file_enabled and file_path:
            self._setup_file_handler(Path(file_path).expanduser(), formatter, log_level)

        # Keep logging's last-resort stderr handler out of the build output
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    def _setup_file_handler(
        self, path: Path, formatter: logging.Formatter, level: int
    ) -> None:
        """Set up rotating file handler."""
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)
        self._file_handler = file_handler

    @classmethod
    def from_config(cls, config: LoggingConfig, console: bool | None = None) -> PkgdistLogger:
        """Build a logger from the [logging] config section."""
        return cls(
            level=config.level,
            console_enabled=config.console if console is None else console,
            file_enabled=config.file,
            file_path=config.file_path,
        )

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level for all handlers."""
        lvl = self.LEVEL_MAP.get(level.lower(), logging.WARNING)
        if self._console_handler:
            self._console_handler.setLevel(lvl)
        if self._file_handler:
            self._file_handler.setLevel(lvl)


class NullLogger(ILogger):
    """No-op logger for testing or when logging is disabled."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def set_level(self, level: str) -> None:
        """No-op."""
        pass

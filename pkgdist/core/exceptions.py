"""
Custom exception hierarchy for pkgdist.

Every error raised by the library derives from PkgdistException so that the
CLI can map it to an exit status in one place.
"""

from __future__ import annotations


class PkgdistException(Exception):
    """
    Base exception for all pkgdist errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (commands, paths, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class PkgdistConfigError(PkgdistException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(PkgdistConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors and unreadable files.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(PkgdistConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class PkgdistExecutionError(PkgdistException):
    """Base class for errors raised while driving the build tool."""

    pass


class CommandFailedError(PkgdistExecutionError):
    """
    A child process exited with a non-zero status.

    The exit code mirrors the child's status so the CLI can exit with it.
    Signals (negative return codes) map to exit code 1.
    """

    def __init__(
        self,
        command: str,
        returncode: int,
        *,
        context: dict | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.exit_code = returncode if returncode > 0 else 1
        ctx = context or {}
        ctx["returncode"] = returncode
        super().__init__(f"Command failed: {command}", context=ctx)


class InvalidTargetError(PkgdistExecutionError):
    """
    A target label does not have the expected package-target shape.

    Raised when a queried label cannot be mapped to a package name.
    """

    def __init__(
        self,
        target: str,
        *,
        expected: str | None = None,
        context: dict | None = None,
    ) -> None:
        self.target = target
        ctx = context or {}
        if expected:
            ctx["expected"] = expected
        super().__init__(f"Unexpected target label: {target!r}", context=ctx)


class InvalidDestinationError(PkgdistExecutionError, ValueError):
    """
    The output directory is not a path relative to the project root.

    Absolute paths would place packages outside the project tree.
    """

    def __init__(self, dest_path: str, *, context: dict | None = None) -> None:
        self.dest_path = dest_path
        super().__init__(
            f"Destination must be a non-empty path relative to the project root: {dest_path!r}",
            context=context,
        )

"""
Click decorators for pkgdist CLI commands.

- handle_errors: maps pkgdist exceptions to exit statuses
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import CommandFailedError, PkgdistException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator translating pkgdist errors into CLI exits.

    A failed child process exits with the child's status and no extra
    message, since the build tool has already reported on stderr. Other
    pkgdist errors are shown as a ClickException.

    Usage:
        @cli.command()
        @click.pass_obj
        @handle_errors
        def build(ctx: PkgdistContext):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except CommandFailedError as e:
            raise SystemExit(e.exit_code) from e
        except PkgdistException as e:
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]

"""
Click-based CLI for pkgdist.

Usage:
    from pkgdist.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import PkgdistException
from .context import PkgdistContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pkgdist")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pkgdist")
@click.option(
    "--project-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (defaults to the config file's project, then the git top-level)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostic output to stderr")
@click.pass_context
def cli(ctx: click.Context, project_root: Path | None, verbose: bool) -> None:
    """pkgdist - build npm packages with Bazel into a dist tree

    \b
    Commands:
        pkgdist build [DEST]   Build packages and copy them to DEST
        pkgdist targets        List release package targets
        pkgdist info           Show the resolved build environment
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = PkgdistContext.create(project_root=project_root, verbose=verbose)
    except PkgdistException as e:
        raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "PkgdistContext",
    "__version__",
    "cli",
    "register_commands",
]

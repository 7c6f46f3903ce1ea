"""
Native Click implementation of the build command.

Usage: pkgdist build [options] [DEST]
"""

from __future__ import annotations

import click

from ...core.models.config import COMPILE_MODES
from ..context import PkgdistContext
from ..decorators import handle_errors


@click.command("build")
@click.argument("dest", required=False)
@click.option(
    "-p", "--profile", default="default", show_default=True, help="Build profile to start from"
)
@click.option(
    "-m", "--mode", type=click.Choice(COMPILE_MODES), default=None, help="Compile mode"
)
@click.option("-d", "--description", default=None, help="Human-readable build description")
@click.pass_obj
@handle_errors
def build(
    ctx: PkgdistContext,
    dest: str | None,
    profile: str,
    mode: str | None,
    description: str | None,
) -> None:
    """Build the release npm packages and copy them into DEST.

    DEST is relative to the project root. Values not given on the command
    line come from the selected profile.

    \b
    Examples:
        pkgdist build
        pkgdist build --profile ivy-aot
        pkgdist build dist/packages-dist-ivy-aot --mode aot --description "Ivy AOT"
    """
    preset = ctx.settings.get_profile(profile)

    ctx.create_builder().build(
        dest or preset.dest,
        mode or preset.mode,
        description if description is not None else preset.description,
    )

"""
Native Click implementation of the info command.

Usage: pkgdist info
"""

from __future__ import annotations

import click

from ..context import PkgdistContext
from ..decorators import handle_errors


@click.command("info")
@click.pass_obj
@handle_errors
def info(ctx: PkgdistContext) -> None:
    """Show the resolved build environment."""
    env = ctx.environment
    config_file = ctx.settings.config_file

    click.echo(f"Project root: {env.project_root}")
    click.echo(f"Bazel bin:    {env.bazel_bin}")
    click.echo(f"Bazel cmd:    {env.bazel_cmd}")
    click.echo(f"Script:       {env.script_path}")
    click.echo(f"Config file:  {config_file if config_file else '(defaults)'}")

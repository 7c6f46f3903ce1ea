"""
Native Click implementation of the targets command.

Usage: pkgdist targets
"""

from __future__ import annotations

import click

from ...services.targets import package_name
from ..context import PkgdistContext
from ..decorators import handle_errors


@click.command("targets")
@click.pass_obj
@handle_errors
def targets(ctx: PkgdistContext) -> None:
    """List release package targets and the package names they map to."""
    builder = ctx.create_builder()
    labels = builder.discover_targets()

    if not labels:
        click.echo("No release package targets found.")
        return

    bazel = ctx.settings.bazel
    rows = []
    for label in labels:
        pkg = package_name(label, bazel.source_root, bazel.package_target)
        built = "yes" if builder.source_dir(pkg).is_dir() else "no"
        rows.append([pkg, label, built])

    click.echo("")
    ctx.presenter.print_table(["Package", "Target", "Built"], rows)

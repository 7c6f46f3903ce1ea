"""
Target label handling for the package build.

Renders the two build-tool command lines (query and build) and maps the
queried target labels to package names.
"""

from __future__ import annotations

import re

from ..core.exceptions import InvalidTargetError
from ..core.models.config import BazelConfig

_LINE_BREAK = re.compile(r"\r?\n")


def parse_targets(output: str) -> list[str]:
    """
    Split query output into target labels, in order.

    Both \\n and \\r\\n line endings are accepted. Stray carriage returns
    would otherwise end up in the label and the build tool would reject it.
    Blank lines are dropped.
    """
    targets: list[str] = []
    for line in _LINE_BREAK.split(output):
        line = line.strip()
        if line:
            targets.append(line)
    return targets


def package_name(target: str, source_root: str = "packages", package_target: str = "npm_package") -> str:
    """
    Derive a package name from a target label.

    //packages/core:npm_package -> core
    //packages/common/http:npm_package -> common/http

    Raises:
        InvalidTargetError: If the label is not //<source_root>/<pkg>:<package_target>
    """
    prefix = f"//{source_root}/"
    suffix = f":{package_target}"
    if not (target.startswith(prefix) and target.endswith(suffix)):
        raise InvalidTargetError(target, expected=f"{prefix}<package>{suffix}")

    name = target[len(prefix) : -len(suffix)]
    if not name or ":" in name:
        raise InvalidTargetError(target, expected=f"{prefix}<package>{suffix}")
    return name


def build_query_expression(config: BazelConfig) -> str:
    """Query selecting release-eligible package targets under the source root."""
    scope = f"//{config.source_root}/..."
    tags = f"attr('tags', '\\[.*{config.release_tag}.*\\]', {scope})"
    kind = f"kind('{config.package_kind}', {scope})"
    return f"{tags} intersect {kind}"


def query_command(bazel_cmd: str, config: BazelConfig) -> str:
    return f'{bazel_cmd} query --output=label "{build_query_expression(config)}"'


def build_command(
    bazel_cmd: str,
    targets: list[str],
    compile_mode: str,
    release_config: str = "release",
) -> str:
    """Build every target in one invocation with the compile mode as a --define."""
    parts = [
        bazel_cmd,
        "build",
        f"--config={release_config}",
        f"--define=compile={compile_mode}",
        *targets,
    ]
    return " ".join(parts)

"""Paths command implementation.

Prints the pre-order path sequence of a tree.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from pathtree.cli.types import OutputFormat, build_tree_or_exit, get_config


def paths(
    ctx: typer.Context,
    path: Annotated[
        Path,
        typer.Argument(help="File or directory to list."),
    ] = Path("."),
    git_ignore: Annotated[
        bool | None,
        typer.Option(
            "--git-ignore/--no-git-ignore",
            help="Respect ignore files (accepted, no effect yet).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: text or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
) -> None:
    """List every path of the tree in pre-order, one per line."""
    config = get_config(ctx)
    use_git_ignore = config.use_git_ignore if git_ignore is None else git_ignore

    tree = build_tree_or_exit(path, use_git_ignore)
    # Plain echo keeps the output pipeable; Rich would wrap long paths
    tree_paths = [str(p) for p in tree.paths()]

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(tree_paths, indent=2))
        return

    for tree_path in tree_paths:
        typer.echo(tree_path)

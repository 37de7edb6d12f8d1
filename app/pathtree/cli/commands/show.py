"""Show command implementation.

Renders the tree of a file or directory.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathtree.cli.types import build_tree_or_exit, get_config
from pathtree.utils.formatting import console, count_entries, render_tree


def show(
    ctx: typer.Context,
    path: Annotated[
        Path,
        typer.Argument(help="File or directory to display."),
    ] = Path("."),
    git_ignore: Annotated[
        bool | None,
        typer.Option(
            "--git-ignore/--no-git-ignore",
            help="Respect ignore files (accepted, no effect yet).",
        ),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth",
            "-d",
            min=0,
            help="Limit rendered depth below the root.",
        ),
    ] = None,
    all_entries: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Show dot-prefixed entries even if hidden by config.",
        ),
    ] = False,
) -> None:
    """Display a file or directory as a tree.

    Examples:
        pathtree show                   # Current directory
        pathtree show src --max-depth 2 # Two levels below src
    """
    config = get_config(ctx)
    use_git_ignore = config.use_git_ignore if git_ignore is None else git_ignore
    depth = config.max_depth if max_depth is None else max_depth

    tree = build_tree_or_exit(path, use_git_ignore)

    show_hidden = all_entries or config.show_hidden
    console.print(render_tree(tree, max_depth=depth, show_hidden=show_hidden))

    directories, files = count_entries(tree)
    console.print(f"\n[dim]{directories} directories, {files} files[/dim]")

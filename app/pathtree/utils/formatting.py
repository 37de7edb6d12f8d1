"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree as RichTree

from pathtree.core.theme import get_theme
from pathtree.tree.models import NodeId, Tree, TreeNode


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def _node_label(node: TreeNode, is_root: bool) -> str:
    if is_root:
        return f"[tree.root]{escape(str(node.data.path))}[/]"
    if node.data.is_file:
        return f"[tree.file]{escape(node.data.name)}[/]"
    return f"[tree.directory]{escape(node.data.name)}/[/]"


def render_tree(
    tree: Tree,
    *,
    max_depth: int | None = None,
    show_hidden: bool = True,
) -> RichTree:
    """Build a Rich tree renderable from a file tree.

    Args:
        tree: Tree to render. Must have a root.
        max_depth: Deepest level to render below the root (None = all).
        show_hidden: Include entries whose name starts with a dot.

    Returns:
        Rich Tree ready to print.

    Raises:
        ValueError: If the tree has no root.
    """
    root_id = tree.root_node_id
    if root_id is None:
        msg = "Cannot render an empty tree"
        raise ValueError(msg)

    rich_root = RichTree(_node_label(tree.get(root_id), is_root=True), guide_style="tree.guide")
    stack: list[tuple[NodeId, RichTree, int]] = [(root_id, rich_root, 0)]

    while stack:
        node_id, branch, depth = stack.pop()
        if max_depth is not None and depth >= max_depth:
            continue
        for child_id in tree.children_ids(node_id):
            child = tree.get(child_id)
            if not show_hidden and child.data.name.startswith("."):
                continue
            child_branch = branch.add(_node_label(child, is_root=False))
            if not child.data.is_file:
                stack.append((child_id, child_branch, depth + 1))

    return rich_root


def count_entries(tree: Tree) -> tuple[int, int]:
    """Count directories and files below the root.

    Returns:
        Tuple of (directories, files), excluding the root node.
    """
    directories = 0
    files = 0
    for node in tree.traverse_pre_order():
        if node.parent is None:
            continue
        if node.data.is_file:
            files += 1
        else:
            directories += 1
    return directories, files


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")

"""pathtree - Build deterministic in-memory trees from filesystem paths."""

from pathtree.tree import (
    BuildError,
    Entry,
    NodeId,
    OrphanEntryError,
    PathTreeError,
    Tree,
    TreeInsertionError,
    TreeNode,
    WalkError,
    create_file_tree,
    create_file_tree_sync,
)

__version__ = "0.1.0"

__all__ = [
    "BuildError",
    "Entry",
    "NodeId",
    "OrphanEntryError",
    "PathTreeError",
    "Tree",
    "TreeInsertionError",
    "TreeNode",
    "WalkError",
    "__version__",
    "create_file_tree",
    "create_file_tree_sync",
]

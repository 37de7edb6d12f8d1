"""Filesystem tree construction.

This package collects the entries below a root path and rebuilds them
into a rooted, deterministically ordered tree.
"""

from pathtree.tree.builder import build, path_key
from pathtree.tree.collector import collect
from pathtree.tree.errors import (
    BuildError,
    OrphanEntryError,
    PathTreeError,
    TreeInsertionError,
    WalkError,
)
from pathtree.tree.models import Entry, NodeId, Tree, TreeNode
from pathtree.tree.service import create_file_tree, create_file_tree_sync

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
    "build",
    "collect",
    "create_file_tree",
    "create_file_tree_sync",
    "path_key",
]

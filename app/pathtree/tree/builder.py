"""Tree reconstruction from a flat list of entries.

Entries arrive in whatever order the collector discovered them. They are
sorted by depth so every parent is inserted before its children, then
attached one by one through a path-to-handle index that lives only for
the duration of a single build() call.
"""

import logging
from collections.abc import Sequence
from pathlib import PurePath

from pathtree.tree.errors import OrphanEntryError, TreeInsertionError
from pathtree.tree.models import Entry, NodeId, Tree, TreeNode

logger = logging.getLogger(__name__)


def path_key(path: PurePath) -> str:
    """Return the canonical key of a path.

    The key is the path's segments joined by '/', without a trailing
    separator, so "testdata/" and "testdata" map to the same key.

    Args:
        path: Path to convert.

    Returns:
        Slash-joined path string.
    """
    return path.as_posix()


def _node_key(node: TreeNode) -> str:
    return path_key(node.data.path)


def build(root: PurePath, entries: Sequence[Entry]) -> Tree:
    """Build a tree from the root path and every entry below it.

    The root node is always created as a directory from ``root``. Each
    entry is attached under the node of its parent path, and the parent's
    children are re-sorted by canonical path key after every insertion.

    Args:
        root: Path the entries were collected from.
        entries: Every entry below root, in any order.

    Returns:
        The completed tree.

    Raises:
        OrphanEntryError: If an entry's parent path has no node.
        TreeInsertionError: If an entry duplicates a path already in the tree.
    """
    # Parents have strictly fewer segments than their children
    ordered = sorted(entries, key=lambda entry: len(entry.path.parts))

    tree = Tree()
    index: dict[str, NodeId] = {}

    root_id = tree.insert_root(Entry(path=root, is_file=False))
    index[path_key(root)] = root_id

    for entry in ordered:
        key = path_key(entry.path)
        if key in index:
            msg = f"Duplicate entry for {entry.path}"
            raise TreeInsertionError(msg)

        parent = entry.path.parent
        parent_id = index.get(path_key(parent))
        if parent_id is None:
            raise OrphanEntryError(entry.path, parent)

        node_id = tree.insert_under(parent_id, entry)
        tree.sort_children_by_key(parent_id, _node_key)
        index[key] = node_id

    logger.debug("Built tree for %s with %d nodes", root, len(tree))
    return tree

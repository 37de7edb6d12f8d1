"""Tree domain models.

This module defines the immutable Entry record produced by the collector
and an arena-backed Tree whose nodes are addressed by opaque NodeId
handles. Nodes never hold references to each other directly; parent and
child links are stored as handles into the tree's flat node table.
"""

import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from pathtree.tree.errors import TreeInsertionError

# Distinguishes handles issued by different Tree instances
_tree_tokens = itertools.count()


@dataclass(frozen=True, slots=True)
class Entry:
    """A discovered filesystem object.

    Attributes:
        path: Filesystem path, used as the entry's identity.
        is_file: True for regular files, False for directories.
    """

    path: Path
    is_file: bool

    @property
    def name(self) -> str:
        """Final path component, or the full path for roots like '.' or '/'."""
        return self.path.name or str(self.path)


@dataclass(frozen=True, slots=True)
class NodeId:
    """Opaque handle to a node stored in a Tree.

    Attributes:
        tree_token: Identifier of the tree that issued the handle.
        index: Slot of the node in the tree's node table.
    """

    tree_token: int
    index: int


class TreeNode:
    """A single node of a Tree, wrapping one Entry.

    Nodes compare by identity only. Children are exposed as a tuple of
    handles in their current sorted order.
    """

    __slots__ = ("_children", "_data", "_parent")

    def __init__(self, data: Entry, parent: NodeId | None) -> None:
        self._data = data
        self._parent = parent
        self._children: list[NodeId] = []

    @property
    def data(self) -> Entry:
        """Entry held by this node."""
        return self._data

    @property
    def parent(self) -> NodeId | None:
        """Handle of the parent node, None for the root."""
        return self._parent

    @property
    def children(self) -> tuple[NodeId, ...]:
        """Handles of the child nodes in order."""
        return tuple(self._children)

    def _append_child(self, child: NodeId) -> None:
        self._children.append(child)

    def _sort_children(self, key: Callable[[NodeId], str]) -> None:
        self._children.sort(key=key)

    def __repr__(self) -> str:
        return f"TreeNode({self._data.path!s}, is_file={self._data.is_file})"


class Tree:
    """Rooted tree of Entry nodes stored in a flat arena.

    Nodes are created through insert_root() and insert_under() and are
    referenced by the NodeId handles those methods return. Handles from
    another Tree are rejected.
    """

    def __init__(self) -> None:
        self._token = next(_tree_tokens)
        self._nodes: list[TreeNode] = []
        self._root: NodeId | None = None

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return (
            isinstance(node_id, NodeId)
            and node_id.tree_token == self._token
            and 0 <= node_id.index < len(self._nodes)
        )

    @property
    def root_node_id(self) -> NodeId | None:
        """Handle of the root node, or None if the tree is empty."""
        return self._root

    def insert_root(self, entry: Entry) -> NodeId:
        """Insert the root node.

        Args:
            entry: Entry for the root node.

        Returns:
            Handle of the new root.

        Raises:
            TreeInsertionError: If the tree already has a root.
        """
        if self._root is not None:
            msg = f"Tree already has a root, cannot add {entry.path} as root"
            raise TreeInsertionError(msg)
        self._root = self._add(entry, parent=None)
        return self._root

    def insert_under(self, parent_id: NodeId, entry: Entry) -> NodeId:
        """Insert a node as the last child of an existing node.

        Args:
            parent_id: Handle of the parent node.
            entry: Entry for the new node.

        Returns:
            Handle of the new node.

        Raises:
            TreeInsertionError: If parent_id does not belong to this tree.
        """
        if parent_id not in self:
            msg = f"Parent handle {parent_id} does not belong to this tree"
            raise TreeInsertionError(msg)
        parent = self._nodes[parent_id.index]
        node_id = self._add(entry, parent=parent_id)
        parent._append_child(node_id)
        return node_id

    def sort_children_by_key(self, node_id: NodeId, key: Callable[[TreeNode], str]) -> None:
        """Sort the children of a node in place by a key of the child node."""
        node = self._node(node_id)
        node._sort_children(lambda child: key(self._nodes[child.index]))

    def get(self, node_id: NodeId) -> TreeNode:
        """Return the node for a handle.

        Raises:
            KeyError: If node_id does not belong to this tree.
        """
        return self._node(node_id)

    def children_ids(self, node_id: NodeId) -> tuple[NodeId, ...]:
        """Return the child handles of a node in sorted order."""
        return self._node(node_id).children

    def parent_id(self, node_id: NodeId) -> NodeId | None:
        """Return the parent handle of a node, None for the root."""
        return self._node(node_id).parent

    def depth(self, node_id: NodeId) -> int:
        """Return the number of ancestors of a node (0 for the root)."""
        depth = 0
        parent = self._node(node_id).parent
        while parent is not None:
            depth += 1
            parent = self._nodes[parent.index].parent
        return depth

    def traverse_pre_order_ids(self, node_id: NodeId | None = None) -> Iterator[NodeId]:
        """Iterate handles in pre-order, starting at node_id or the root.

        Raises:
            KeyError: If node_id does not belong to this tree.
        """
        start = node_id if node_id is not None else self._root
        if start is None:
            return iter(())
        self._node(start)
        return self._pre_order(start)

    def traverse_pre_order(self, node_id: NodeId | None = None) -> Iterator[TreeNode]:
        """Iterate nodes in pre-order, starting at node_id or the root.

        Raises:
            KeyError: If node_id does not belong to this tree.
        """
        return (self._nodes[current.index] for current in self.traverse_pre_order_ids(node_id))

    def _pre_order(self, start: NodeId) -> Iterator[NodeId]:
        stack = [start]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self._nodes[current.index].children))

    def paths(self) -> list[Path]:
        """Return the pre-order sequence of entry paths."""
        return [node.data.path for node in self.traverse_pre_order()]

    def _add(self, entry: Entry, parent: NodeId | None) -> NodeId:
        node_id = NodeId(tree_token=self._token, index=len(self._nodes))
        self._nodes.append(TreeNode(entry, parent))
        return node_id

    def _node(self, node_id: NodeId) -> TreeNode:
        if node_id not in self:
            raise KeyError(node_id)
        return self._nodes[node_id.index]

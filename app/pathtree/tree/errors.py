"""Exceptions raised while collecting entries and building trees."""

from pathlib import Path


class PathTreeError(Exception):
    """Base exception for pathtree errors."""


class WalkError(PathTreeError):
    """Raised when the filesystem cannot be read during traversal.

    Attributes:
        path: Path whose contents or metadata could not be read.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {message}")


class BuildError(PathTreeError):
    """Base exception for tree construction failures."""


class OrphanEntryError(BuildError):
    """Raised when an entry's parent has no node at insertion time.

    Attributes:
        path: Path of the entry that could not be attached.
        parent: Parent path that was missing from the tree.
    """

    def __init__(self, path: Path, parent: Path) -> None:
        self.path = path
        self.parent = parent
        super().__init__(f"Parent {parent} of {path} is not in the tree")


class TreeInsertionError(BuildError):
    """Raised when a node cannot be inserted into the tree."""

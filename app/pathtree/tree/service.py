"""Public entry point for building file trees."""

import asyncio
import logging
import stat
from pathlib import Path

from pathtree.tree.builder import build
from pathtree.tree.collector import collect
from pathtree.tree.errors import WalkError
from pathtree.tree.models import Entry, Tree

logger = logging.getLogger(__name__)


def _is_file(path: Path) -> bool:
    """Check whether an existing path is a regular file.

    Raises:
        FileNotFoundError: If path does not exist.
        WalkError: If the path's metadata cannot be read.
    """
    try:
        mode = path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError) as e:
        msg = f"Path does not exist: {path}"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        raise WalkError(path, e.strerror or str(e)) from e
    return stat.S_ISREG(mode)


async def create_file_tree(path: Path, use_git_ignore: bool = False) -> Tree:
    """Build a tree for a file or directory.

    A file produces a single-node tree. A directory is walked completely
    before the tree is built, so a failure anywhere aborts the whole call.

    Args:
        path: Existing file or directory.
        use_git_ignore: Reserved for ignore-file filtering. Accepted but
            currently has no effect.

    Returns:
        The constructed tree.

    Raises:
        FileNotFoundError: If path does not exist.
        WalkError: If the filesystem cannot be read.
        BuildError: If the collected entries cannot form a tree.
    """
    is_file = _is_file(path)

    if use_git_ignore:
        # TODO: filter entries through .gitignore rules once supported
        logger.debug("Ignore-file filtering is not implemented, including all entries")

    if is_file:
        tree = Tree()
        tree.insert_root(Entry(path=path, is_file=True))
        return tree

    entries = await collect(path)
    return build(path, entries)


def create_file_tree_sync(path: Path, use_git_ignore: bool = False) -> Tree:
    """Run create_file_tree() to completion in a new event loop.

    Must not be called from a running event loop.
    """
    return asyncio.run(create_file_tree(path, use_git_ignore))

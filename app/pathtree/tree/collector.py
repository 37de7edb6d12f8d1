"""Entry collection for a filesystem subtree.

Walks a root path and returns one Entry per file or directory below it.
Each directory read runs in a worker thread via asyncio.to_thread, so the
calling task suspends while waiting on the filesystem. The returned order
is unspecified; ordering is imposed by the tree builder.
"""

import asyncio
import logging
import os
from pathlib import Path

from pathtree.tree.errors import WalkError
from pathtree.tree.models import Entry

logger = logging.getLogger(__name__)


def _read_directory(directory: Path) -> list[tuple[Entry, bool]]:
    """Read one directory.

    The scandir handle is opened and closed within this call.

    Args:
        directory: Directory to list.

    Returns:
        Tuples of (entry, descend) where descend is True for real
        directories that should be walked further.

    Raises:
        WalkError: If the directory or an entry's metadata cannot be read.
    """
    results: list[tuple[Entry, bool]] = []
    try:
        with os.scandir(directory) as it:
            for dir_entry in it:
                path = Path(dir_entry.path)
                try:
                    # Directory symlinks are listed but not followed
                    descend = dir_entry.is_dir(follow_symlinks=False)
                    is_file = dir_entry.is_file()
                except OSError as e:
                    raise WalkError(path, e.strerror or str(e)) from e
                results.append((Entry(path=path, is_file=is_file), descend))
    except OSError as e:
        raise WalkError(directory, e.strerror or str(e)) from e
    return results


async def collect(root: Path) -> list[Entry]:
    """Collect every entry below a root path.

    A file root yields a single file entry. A directory root yields one
    entry per descendant at any depth; the root itself is not included.

    Args:
        root: Existing file or directory to walk.

    Returns:
        Entries in unspecified order.

    Raises:
        WalkError: If any directory or metadata read fails. No partial
            result is returned.
    """
    try:
        if root.is_file():
            return [Entry(path=root, is_file=True)]
    except OSError as e:
        raise WalkError(root, e.strerror or str(e)) from e

    entries: list[Entry] = []
    pending = [root]

    while pending:
        directory = pending.pop()
        logger.debug("Reading directory %s", directory)
        for entry, descend in await asyncio.to_thread(_read_directory, directory):
            entries.append(entry)
            if descend:
                pending.append(entry.path)

    logger.debug("Collected %d entries below %s", len(entries), root)
    return entries

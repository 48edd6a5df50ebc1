from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from ._typing import DirNode

logger = logging.getLogger(__name__)


def _partition(dir_path: str) -> tuple[set[str], set[str]]:
    dirs: set[str] = set()
    files: set[str] = set()
    try:
        with os.scandir(dir_path) as it:
            for entry in it:
                # is_dir() follows symlinks, like the platform listing does.
                if entry.is_dir():
                    dirs.add(entry.name)
                else:
                    files.add(entry.name)
    except OSError as exc:
        logger.warning("Cannot list directory '%s': %s", dir_path, exc)
    return dirs, files


def iter_dir(root: str) -> Iterator[DirNode]:
    """Walk the tree under *root* in pre-order.

    Yields one :class:`DirNode` per directory, *root* first. Each node is
    listed when it is reached, not ahead of time, so the consumer may stop
    early. A missing or non-directory *root* yields nothing.

    .. warning::
        No cycle detection: a symlink pointing at an ancestor directory makes
        the walk unbounded.
    """
    if not os.path.isdir(root):
        return
    stack = [root]
    while stack:
        dir_path = stack.pop()
        dirs, files = _partition(dir_path)
        # Taken before the yield: consumers mutating the record do not steer the walk.
        children = [os.path.join(dir_path, name) for name in sorted(dirs, reverse=True)]
        yield DirNode(dir_path, dirs, files)
        stack.extend(children)


def delete_tree(root: str) -> None:
    """Delete *root* and everything below it, children before parents.

    Symbolic links are unlinked, never descended into. Uses an explicit
    stack, so depth is not bounded by the recursion limit.
    """
    if not _is_real_dir(root):
        os.remove(root)
        return
    stack = [(root, False)]
    while stack:
        dir_path, emptied = stack.pop()
        if emptied:
            os.rmdir(dir_path)
            continue
        stack.append((dir_path, True))
        for name in os.listdir(dir_path):
            child = os.path.join(dir_path, name)
            if _is_real_dir(child):
                stack.append((child, False))
            else:
                os.remove(child)


def _is_real_dir(path: str) -> bool:
    return os.path.isdir(path) and not os.path.islink(path)

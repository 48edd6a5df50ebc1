from __future__ import annotations

import logging
import os

from ._exceptions import PathNotFoundError
from ._typing import PathLike

logger = logging.getLogger(__name__)


class WorkingDirectory:
    """Simulated current directory used to resolve relative paths.

    The process-wide working directory is never touched; only paths resolved
    through this object see the change.

    .. warning::
        Not thread-safe. Callers sharing one instance across threads must
        serialize :meth:`change` against :meth:`resolve` themselves.
    """

    __slots__ = ("_path",)

    def __init__(self, path: PathLike | None = None) -> None:
        if path is None:
            self._path: str = os.path.realpath(os.getcwd())
            return
        initial = os.path.abspath(os.fspath(path))
        if not os.path.isdir(initial):
            raise ValueError(f"Working directory must be an existing directory: '{initial}'")
        self._path = initial

    @property
    def path(self) -> str:
        return self._path

    def resolve(self, path: PathLike, *paths: PathLike) -> str:
        """Return *path* joined with *paths*, made absolute against this directory.

        A bare ``"."`` stands for the current directory. The join is a single
        :func:`os.path.join`; nothing is normalized and existence is not checked.
        """
        head = os.fspath(path)
        if head == ".":
            head = self._path
        joined = os.path.join(head, *(os.fspath(p) for p in paths))
        if os.path.isabs(joined):
            return joined
        return os.path.join(self._path, joined)

    def change(self, path: PathLike) -> str:
        target = self.resolve(path)
        if not os.path.exists(target):
            raise PathNotFoundError(target)
        if not os.path.isdir(target):
            raise NotADirectoryError(f"Not a directory: '{target}'")
        logger.debug("Working directory changed: %s -> %s", self._path, target)
        self._path = target
        return target

    def __repr__(self) -> str:
        return f"WorkingDirectory({self._path!r})"


def split_path(path: str) -> list[str]:
    """Split *path* on the platform separator.

    A leading separator yields a leading empty component, so
    ``split_path("/a/b") == ["", "a", "b"]``.
    """
    return path.split(os.sep)


def split_ext(base: str) -> tuple[str, str | None]:
    # A dot in first position marks a hidden file, not an extension.
    i = base.rfind(".")
    if i > 0:
        return base[:i], base[i + 1:]
    return base, None

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import time
from collections.abc import Callable, Iterator
from typing import TypeVar

from ._archive import decompress_bzip2, decompress_gzip, extract_tar, extract_zip
from ._exceptions import DestinationIsFileError, PathNotFoundError
from ._glob import compile_glob
from ._mode import parse_mode
from ._path import WorkingDirectory, split_ext, split_path
from ._typing import DirNode, PathLike, StatResult
from ._walk import delete_tree, iter_dir

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COPY_BUFSIZE = 64 * 1024


class FileSystem:
    """Filesystem helpers that resolve relative paths against a simulated cwd.

    Every path argument goes through :meth:`resolve`, so ``"."`` and relative
    paths refer to :attr:`cwd` rather than the process working directory.
    Paths returned by the helpers are absolute strings.
    """

    def __init__(self, cwd: PathLike | None = None) -> None:
        self._cwd = WorkingDirectory(cwd)

    def __repr__(self) -> str:
        return f"FileSystem(cwd={self._cwd.path!r})"

    # -- working directory --

    @property
    def cwd(self) -> str:
        return self._cwd.path

    @property
    def working_directory(self) -> WorkingDirectory:
        return self._cwd

    def chdir(self, path: PathLike) -> str:
        """Change :attr:`cwd`. The process working directory is left alone."""
        return self._cwd.change(path)

    def resolve(self, path: PathLike, *paths: PathLike) -> str:
        return self._cwd.resolve(path, *paths)

    def _assert_exists(self, path: str) -> None:
        if not os.path.exists(path):
            raise PathNotFoundError(path)

    def _assert_distinct(self, src: str, dst: str) -> None:
        if dst == src or (os.path.exists(dst) and os.path.samefile(src, dst)):
            raise shutil.SameFileError(f"'{src}' and '{dst}' are the same file")

    # -- path helpers --

    def absolute_path(self, path: PathLike) -> str:
        return self.resolve(path)

    def normalized_path(self, path: PathLike) -> str:
        """Return the canonical path: symlinks, ``.`` and ``..`` resolved."""
        return os.path.realpath(self.resolve(path))

    def base_name(self, path: PathLike) -> str:
        return os.path.basename(self.resolve(path).rstrip(os.sep))

    def parent(self, path: PathLike) -> str | None:
        p = self.resolve(path).rstrip(os.sep) or os.sep
        head = os.path.dirname(p)
        if head == p:
            return None
        return head

    def split(self, path: PathLike) -> list[str]:
        return split_path(os.fspath(path))

    def split_ext(self, path: PathLike) -> tuple[str, str | None]:
        """Return ``(name, extension)`` of the base name; extension may be None."""
        return split_ext(self.base_name(path))

    def extension(self, path: PathLike) -> str | None:
        return self.split_ext(path)[1]

    def name(self, path: PathLike) -> str:
        return self.split_ext(path)[0]

    @staticmethod
    def home() -> str:
        return os.path.expanduser("~")

    # -- queries --

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(self.resolve(path))

    def is_dir(self, path: PathLike) -> bool:
        return os.path.isdir(self.resolve(path))

    def is_file(self, path: PathLike) -> bool:
        return os.path.isfile(self.resolve(path))

    def readable(self, path: PathLike) -> bool:
        return os.access(self.resolve(path), os.R_OK)

    def writeable(self, path: PathLike) -> bool:
        return os.access(self.resolve(path), os.W_OK)

    def executable(self, path: PathLike) -> bool:
        return os.access(self.resolve(path), os.X_OK)

    def list_dir(self, path: PathLike = ".") -> list[str]:
        return os.listdir(self.resolve(path))

    def mod_time(self, path: PathLike) -> float:
        return os.path.getmtime(self.resolve(path))

    def size(self, path: PathLike) -> int:
        return os.path.getsize(self.resolve(path))

    def stat(self, path: PathLike) -> StatResult:
        p = self.resolve(path)
        try:
            st = os.stat(p)
        except FileNotFoundError:
            raise PathNotFoundError(p) from None
        return StatResult(
            size=st.st_size,
            modified_at=st.st_mtime,
            is_dir=os.path.isdir(p),
            is_file=os.path.isfile(p),
            mode=st.st_mode,
        )

    # -- creation / removal --

    def mkdir(self, path: PathLike) -> str:
        """Create one directory. Existing directories are left as they are."""
        p = self.resolve(path)
        try:
            os.mkdir(p)
        except FileExistsError:
            if not os.path.isdir(p):
                raise
        return p

    def mkdirs(self, path: PathLike) -> str:
        p = self.resolve(path)
        os.makedirs(p, exist_ok=True)
        return p

    def touch(self, path: PathLike, mtime: float | None = None) -> str:
        """Create *path* if missing and set its modification time (default: now)."""
        p = self.resolve(path)
        if not os.path.exists(p):
            with open(p, "xb"):
                pass
        stamp = time.time() if mtime is None else mtime
        os.utime(p, (os.stat(p).st_atime, stamp))
        return p

    def delete(self, path: PathLike) -> str:
        """Delete a file, a symlink or an empty directory."""
        p = self.resolve(path)
        if not os.path.lexists(p):
            raise PathNotFoundError(p)
        if os.path.isdir(p) and not os.path.islink(p):
            os.rmdir(p)
        else:
            os.remove(p)
        return p

    def delete_dir(self, path: PathLike) -> str:
        """Delete a directory tree, children before parents."""
        p = self.resolve(path)
        if not os.path.lexists(p):
            raise PathNotFoundError(p)
        delete_tree(p)
        logger.debug("Deleted tree '%s'", p)
        return p

    def rename(self, old_path: PathLike, new_path: PathLike) -> str:
        dst = self.resolve(new_path)
        os.rename(self.resolve(old_path), dst)
        return dst

    def temp_file(
        self,
        prefix: str = "-fs-",
        suffix: str = "",
        directory: PathLike | None = None,
    ) -> str:
        where = self.resolve(directory) if directory is not None else None
        fd, p = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=where)
        os.close(fd)
        return p

    def temp_dir(self, root: PathLike | None = None) -> str:
        where = self.resolve(root) if root is not None else None
        return tempfile.mkdtemp(prefix="-fs-", dir=where)

    # -- permissions --

    def chmod(self, mode: str, path: PathLike) -> str:
        """Change permissions of *path* using the ``[u](+|-)[rwx]{1,3}`` syntax.

        ``chmod("+x", p)`` makes *p* executable for everyone;
        ``chmod("u-wx", p)`` removes write and execute from the owner only.
        """
        p = self.resolve(path)
        self._assert_exists(p)
        change = parse_mode(mode)
        new_mode = change.apply(os.stat(p).st_mode)
        os.chmod(p, new_mode)
        logger.debug("chmod %s '%s' -> %o", mode, p, new_mode)
        return p

    # -- copying --

    def copy(self, src: PathLike, dst: PathLike) -> str:
        s = self.resolve(src)
        d = self.resolve(dst)
        self._assert_exists(s)
        self._assert_distinct(s, d)
        with open(s, "rb") as fsrc, open(d, "wb") as fdst:
            shutil.copyfileobj(fsrc, fdst, _COPY_BUFSIZE)
        return d

    def copy_plus(self, src: PathLike, dst: PathLike) -> str:
        """Copy a file, creating the destination's parent directories first."""
        d = self.resolve(dst)
        os.makedirs(os.path.dirname(d), exist_ok=True)
        return self.copy(src, d)

    def copy_dir(self, src: PathLike, dst: PathLike) -> str:
        """Copy the tree at *src* and return the destination root.

        When *dst* is an existing directory the tree is copied into
        ``dst/<basename of src>``; otherwise *dst* becomes the new root.
        Partial copies are not rolled back.
        """
        s = self.resolve(src)
        d = self.resolve(dst)
        self._assert_exists(s)
        if not os.path.isdir(s):
            raise NotADirectoryError(f"Not a directory: '{s}'")
        if os.path.isdir(d):
            dest_root = os.path.join(d, self.base_name(s))
        elif os.path.exists(d):
            raise DestinationIsFileError(d)
        else:
            dest_root = d

        real_src = os.path.realpath(s)
        real_dest = os.path.realpath(dest_root)
        if real_dest == real_src or real_dest.startswith(real_src.rstrip(os.sep) + os.sep):
            raise ValueError(f"Cannot copy '{s}' into itself: '{dest_root}'")

        os.makedirs(dest_root, exist_ok=True)
        for root, dirs, files in iter_dir(s):
            rel = os.path.relpath(root, s)
            target = dest_root if rel == os.curdir else os.path.join(dest_root, rel)
            for name in dirs:
                os.makedirs(os.path.join(target, name), exist_ok=True)
            for name in files:
                self.copy_plus(os.path.join(root, name), os.path.join(target, name))
        logger.debug("Copied tree '%s' to '%s'", s, dest_root)
        return dest_root

    # -- traversal --

    def glob(self, pattern: str) -> list[str]:
        """Return the sorted entries of one directory whose names match *pattern*.

        Everything before the last separator names the directory to search
        (the current directory when there is no separator); only the final
        component is a glob. The search is not recursive. Trailing separators
        are ignored, so ``"sub/"`` matches the entry ``sub``.
        """
        head, sep, last = (pattern.rstrip(os.sep) or pattern).rpartition(os.sep)
        matcher = compile_glob(last)
        root = self.resolve(head or os.sep) if sep else self._cwd.path
        try:
            names = os.listdir(root)
        except (FileNotFoundError, NotADirectoryError):
            return []
        return sorted(os.path.join(root, n) for n in names if matcher.match(n))

    def walk(self, path: PathLike = ".") -> Iterator[DirNode]:
        """Lazily yield ``(root, dirs, files)`` for *path* and every directory below it.

        *path* comes first (pre-order). ``dirs`` and ``files`` are sets of
        names. A missing or non-directory *path* yields nothing.
        """
        return iter_dir(self.resolve(path))

    def walk_apply(
        self, func: Callable[[str, set[str], set[str]], T], path: PathLike = "."
    ) -> Iterator[T]:
        for node in self.walk(path):
            yield func(*node)

    # -- archives --

    def _default_target(self, source: PathLike, target: PathLike | None) -> str:
        if target is None:
            return self.resolve(self.name(source))
        return self.resolve(target)

    def unzip(self, source: PathLike, target_dir: PathLike | None = None) -> str:
        """Extract a zip archive. Defaults to a directory named after the archive."""
        src = self.resolve(source)
        self._assert_exists(src)
        return extract_zip(src, self._default_target(source, target_dir))

    def untar(self, source: PathLike, target_dir: PathLike | None = None) -> str:
        src = self.resolve(source)
        self._assert_exists(src)
        return extract_tar(src, self._default_target(source, target_dir))

    def gunzip(self, source: PathLike, target: PathLike | None = None) -> str:
        """Decompress a gzip file. Raises :class:`shutil.SameFileError` if the
        target would overwrite the source (e.g. ``data`` with no extension)."""
        src = self.resolve(source)
        self._assert_exists(src)
        dst = self._default_target(source, target)
        self._assert_distinct(src, dst)
        return decompress_gzip(src, dst)

    def bunzip2(self, source: PathLike, target: PathLike | None = None) -> str:
        src = self.resolve(source)
        self._assert_exists(src)
        dst = self._default_target(source, target)
        self._assert_distinct(src, dst)
        return decompress_bzip2(src, dst)

"""Archive extraction: zip, tar, gzip and bzip2.

Callers pass absolute paths. Every entry is stream-copied through a
``with``-scoped handle pair. Nothing is rolled back: if one entry fails,
the entries already written stay on disk.
"""

from __future__ import annotations

import bz2
import gzip
import logging
import os
import shutil
import tarfile
import zipfile
from typing import IO

from ._exceptions import UnsafeArchiveError

logger = logging.getLogger(__name__)

_COPY_BUFSIZE = 64 * 1024


def _entry_target(target_dir: str, entry_name: str) -> str:
    """Return where *entry_name* lands under *target_dir*, rejecting escapes."""
    name = entry_name.replace("\\", "/")
    if name.startswith("/") or os.path.isabs(name):
        raise UnsafeArchiveError(entry_name, target_dir)
    if ".." in name.split("/"):
        raise UnsafeArchiveError(entry_name, target_dir)
    return os.path.join(target_dir, *[p for p in name.split("/") if p])


def _write_stream(src: IO[bytes], out_path: str) -> None:
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(out_path, "wb") as dst:
        shutil.copyfileobj(src, dst, _COPY_BUFSIZE)


def extract_zip(source: str, target_dir: str) -> str:
    count = 0
    with zipfile.ZipFile(source) as zf:
        for info in zf.infolist():
            if info.is_dir():
                continue
            out_path = _entry_target(target_dir, info.filename)
            with zf.open(info) as src:
                _write_stream(src, out_path)
            count += 1
    logger.debug("Extracted %d entries from '%s' into '%s'", count, source, target_dir)
    return target_dir


def extract_tar(source: str, target_dir: str) -> str:
    count = 0
    with tarfile.open(source, "r:*") as tf:
        for member in tf:
            if member.isdir():
                continue
            if not member.isfile():
                logger.debug("Skipping non-regular tar member '%s'", member.name)
                continue
            out_path = _entry_target(target_dir, member.name)
            src = tf.extractfile(member)
            if src is None:
                continue
            with src:
                _write_stream(src, out_path)
            count += 1
    logger.debug("Extracted %d entries from '%s' into '%s'", count, source, target_dir)
    return target_dir


def decompress_gzip(source: str, target: str) -> str:
    with gzip.open(source, "rb") as src:
        _write_stream(src, target)
    logger.debug("Decompressed '%s' to '%s'", source, target)
    return target


def decompress_bzip2(source: str, target: str) -> str:
    with bz2.open(source, "rb") as src:
        _write_stream(src, target)
    logger.debug("Decompressed '%s' to '%s'", source, target)
    return target

from ._exceptions import (
    DestinationIsFileError,
    InvalidModeError,
    InvalidPatternError,
    PathNotFoundError,
    UnsafeArchiveError,
)
from ._fs import FileSystem
from ._glob import GlobPattern, compile_glob
from ._mode import PermissionChange, parse_mode
from ._path import WorkingDirectory
from ._typing import DirNode, StatResult

__all__ = [
    "FileSystem",
    "WorkingDirectory",
    "GlobPattern",
    "compile_glob",
    "PermissionChange",
    "parse_mode",
    "DirNode",
    "StatResult",
    "PathNotFoundError",
    "InvalidPatternError",
    "InvalidModeError",
    "DestinationIsFileError",
    "UnsafeArchiveError",
]
__version__ = "0.1.0"

import os
from typing import NamedTuple, TypedDict, Union

PathLike = Union[str, "os.PathLike[str]"]


class DirNode(NamedTuple):
    root: str
    dirs: set[str]
    files: set[str]


class StatResult(TypedDict):
    size: int
    modified_at: float
    is_dir: bool
    is_file: bool
    mode: int

import pytest

from cwdfs import FileSystem
from cwdfs._pytest_plugin import fs  # noqa: F401
from tests.helpers.tree import make_tree


@pytest.fixture
def tree(fs: FileSystem) -> str:
    """Sample tree ``root/{a/{x.txt}, b/y.txt}`` under the fixture cwd."""
    return make_tree(
        fs.resolve("root"),
        {
            "a/x.txt": b"x-data",
            "b/y.txt": b"y-data",
        },
    )

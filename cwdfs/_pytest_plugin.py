"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["cwdfs._pytest_plugin"]

This makes the ``fs`` fixture automatically available::

    def test_something(fs):
        fs.touch("a.txt")
        assert fs.exists("a.txt")
"""

import pytest

from ._fs import FileSystem


@pytest.fixture
def fs(tmp_path) -> FileSystem:
    """A :class:`FileSystem` whose working directory is ``tmp_path``.

    Provides an independent instance per test (function scope).
    """
    return FileSystem(cwd=tmp_path)

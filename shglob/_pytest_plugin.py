"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["shglob._pytest_plugin"]

This makes the ``memfs`` fixture automatically available::

    def test_something(memfs):
        memfs.import_tree(["src/", "src/a.py"])
        assert list(shglob.traverse("src/*.py", fs=memfs)) == ["src/a.py"]
"""

import pytest

from ._fs import MemoryFileSystem


@pytest.fixture
def memfs() -> MemoryFileSystem:
    """An empty :class:`MemoryFileSystem`.

    Provides an independent instance per test (function scope).
    """
    return MemoryFileSystem()


@pytest.fixture
def memfs_tree():
    """Factory building a :class:`MemoryFileSystem` from a list of paths.

    Paths ending in ``/`` become directories, the rest empty files::

        def test_logs(memfs_tree):
            fs = memfs_tree(["logs/a.log", "logs/old/"])
    """

    def build(paths, max_nodes: int | None = None) -> MemoryFileSystem:
        fs = MemoryFileSystem(max_nodes=max_nodes)
        fs.import_tree(paths)
        return fs

    return build

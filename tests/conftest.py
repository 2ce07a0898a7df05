import pytest
from shglob import MemoryFileSystem
from shglob._pytest_plugin import memfs, memfs_tree  # noqa: F401

from tests.helpers.tree import REFERENCE_TREE, build_on_disk


@pytest.fixture
def ref_memfs(memfs_tree) -> MemoryFileSystem:
    """An in-memory copy of the reference tree."""
    return memfs_tree(REFERENCE_TREE)


@pytest.fixture
def ref_dir(tmp_path, monkeypatch):
    """The reference tree on disk, with the working directory set to its root."""
    build_on_disk(tmp_path)
    monkeypatch.chdir(tmp_path)
    return tmp_path

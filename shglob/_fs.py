from __future__ import annotations

import os
import posixpath
import threading
from collections.abc import Iterable

from ._exceptions import NodeLimitExceededError
from ._path import (
    CURDIR,
    PARDIR,
    SEPARATORS,
    join_path,
    normalize_path,
    split_root,
)
from ._typing import ChildEntry

# ---------------------------------------------------------------------------
#  OS filesystem
# ---------------------------------------------------------------------------


def _entry_is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


class OSFileSystem:
    """The real filesystem, through :mod:`os`."""

    separators = SEPARATORS

    def list_children(self, path: str) -> list[ChildEntry] | None:
        try:
            with os.scandir(path) as it:
                return [ChildEntry(entry.name, _entry_is_dir(entry)) for entry in it]
        except OSError:
            return None

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def join(self, base: str, name: str) -> str:
        return join_path(base, name, os.sep, SEPARATORS)

    def split_root(self, pattern: str) -> tuple[str | None, int]:
        return split_root(pattern, SEPARATORS, os.path.splitdrive)

    def scope(self, root: str | None) -> str:
        if root is None:
            return CURDIR
        if root[-1] not in SEPARATORS:
            # Drive-relative ("C:foo") resolves against that drive's cwd.
            return os.path.abspath(root)
        return root

    def is_verbatim(self, root: str) -> bool:
        return os.name == "nt" and root.startswith("\\\\?\\")


# ---------------------------------------------------------------------------
#  In-memory filesystem
# ---------------------------------------------------------------------------

_POSIX_SEPS = frozenset("/")


class DirNode:
    __slots__ = ("node_id", "children", "readable")

    def __init__(self, node_id: int) -> None:
        self.node_id: int = node_id
        self.children: dict[str, int] = {}
        self.readable: bool = True


class FileNode:
    __slots__ = ("node_id",)

    def __init__(self, node_id: int) -> None:
        self.node_id: int = node_id


Node = DirNode | FileNode


class MemoryFileSystem:
    """A directory tree held in memory, with POSIX separators.

    Relative paths are resolved from the root, so ``"a/b"`` and ``"/a/b"``
    name the same node. ``..`` steps to the real parent while resolving, so
    ``file.txt/..`` does not exist.
    """

    separators = _POSIX_SEPS

    def __init__(self, max_nodes: int | None = None) -> None:
        if max_nodes is not None and max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {max_nodes!r}.")
        self._global_lock = threading.RLock()
        self._max_nodes: int | None = max_nodes
        self._nodes: dict[int, Node] = {}
        self._next_node_id: int = 0
        # Root directory
        self._root = self._alloc(DirNode)

    # -- node allocation helpers --

    def _alloc(self, node_type: type[DirNode] | type[FileNode]) -> Node:
        if self._max_nodes is not None and len(self._nodes) >= self._max_nodes:
            raise NodeLimitExceededError(len(self._nodes), self._max_nodes)
        nid = self._next_node_id
        self._next_node_id += 1
        node = node_type(nid)
        self._nodes[nid] = node
        return node

    # -- path helpers --

    def _resolve(self, path: str) -> Node | None:
        trail: list[Node] = [self._root]
        for part in path.replace("\\", "/").split("/"):
            current = trail[-1]
            if not isinstance(current, DirNode):
                return None
            if not part or part == CURDIR:
                continue
            if part == PARDIR:
                if len(trail) > 1:
                    trail.pop()
                continue
            child_id = current.children.get(part)
            if child_id is None:
                return None
            trail.append(self._nodes[child_id])
        return trail[-1]

    def _parts(self, path: str) -> list[str]:
        return [p for p in normalize_path(path).split("/") if p]

    def _parent_of(self, path: str) -> tuple[DirNode, str]:
        parts = self._parts(path)
        if not parts:
            raise ValueError(f"The root directory has no parent: '{path}'")
        parent = self._resolve("/" + "/".join(parts[:-1]))
        if parent is None:
            raise FileNotFoundError(f"Parent directory does not exist: '{path}'")
        if not isinstance(parent, DirNode):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        return parent, parts[-1]

    # -- mutation --

    def mkdir(self, path: str, exist_ok: bool = False) -> None:
        """Create directory *path* and any missing parents."""
        with self._global_lock:
            node = self._resolve(normalize_path(path))
            if node is not None:
                if isinstance(node, DirNode):
                    if not exist_ok:
                        raise FileExistsError(f"Directory exists: '{path}'")
                    return
                raise FileExistsError(f"File exists at path: '{path}'")
            current = self._root
            for part in self._parts(path):
                child_id = current.children.get(part)
                if child_id is None:
                    new_dir = self._alloc(DirNode)
                    current.children[part] = new_dir.node_id
                    current = new_dir
                    continue
                child = self._nodes[child_id]
                if not isinstance(child, DirNode):
                    raise FileExistsError(f"A file exists at path component: '{part}'")
                current = child

    def touch(self, path: str) -> None:
        """Create an empty file at *path*; its parent must exist."""
        with self._global_lock:
            parent, name = self._parent_of(path)
            child_id = parent.children.get(name)
            if child_id is not None:
                if isinstance(self._nodes[child_id], DirNode):
                    raise IsADirectoryError(f"Is a directory: '{path}'")
                return
            parent.children[name] = self._alloc(FileNode).node_id

    def remove(self, path: str) -> None:
        with self._global_lock:
            parent, name = self._parent_of(path)
            child_id = parent.children.get(name)
            if child_id is None:
                raise FileNotFoundError(f"No such file: '{path}'")
            node = self._nodes[child_id]
            if isinstance(node, DirNode):
                if node.children:
                    raise OSError(f"Directory not empty: '{path}'")
            del parent.children[name]
            del self._nodes[child_id]

    def import_tree(self, paths: Iterable[str]) -> None:
        """Create every path in *paths*, parents included.

        A trailing ``/`` makes the entry a directory, anything else is an
        empty file.
        """
        with self._global_lock:
            for path in paths:
                if path.endswith("/"):
                    self.mkdir(path, exist_ok=True)
                    continue
                parent = posixpath.dirname(normalize_path(path))
                self.mkdir(parent, exist_ok=True)
                self.touch(path)

    def set_readable(self, path: str, readable: bool) -> None:
        """Make listing directory *path* fail with PermissionError, or work again."""
        with self._global_lock:
            node = self._resolve(path)
            if not isinstance(node, DirNode):
                raise NotADirectoryError(f"Not a directory: '{path}'")
            node.readable = readable

    # -- queries --

    def listdir(self, path: str) -> list[str]:
        with self._global_lock:
            return [entry.name for entry in self._scan(path)]

    def _scan(self, path: str) -> list[ChildEntry]:
        node = self._resolve(path)
        if node is None:
            raise FileNotFoundError(f"No such directory: '{path}'")
        if not isinstance(node, DirNode):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        if not node.readable:
            raise PermissionError(f"Permission denied: '{path}'")
        return [
            ChildEntry(name, isinstance(self._nodes[child_id], DirNode))
            for name, child_id in node.children.items()
        ]

    def list_children(self, path: str) -> list[ChildEntry] | None:
        with self._global_lock:
            try:
                return self._scan(path)
            except OSError:
                return None

    def exists(self, path: str) -> bool:
        with self._global_lock:
            return self._resolve(path) is not None

    def is_dir(self, path: str) -> bool:
        with self._global_lock:
            return isinstance(self._resolve(path), DirNode)

    def is_file(self, path: str) -> bool:
        with self._global_lock:
            return isinstance(self._resolve(path), FileNode)

    # -- path syntax --

    def join(self, base: str, name: str) -> str:
        return join_path(base, name, "/", _POSIX_SEPS)

    def split_root(self, pattern: str) -> tuple[str | None, int]:
        return split_root(pattern, _POSIX_SEPS, posixpath.splitdrive)

    def scope(self, root: str | None) -> str:
        return CURDIR if root is None else root

    def is_verbatim(self, root: str) -> bool:
        return False

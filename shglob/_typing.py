from typing import NamedTuple, Protocol


class ChildEntry(NamedTuple):
    name: str
    is_dir: bool


class FileSystem(Protocol):
    """What traversal needs from a filesystem."""

    separators: frozenset[str]

    def list_children(self, path: str) -> list[ChildEntry] | None:
        """Entries of directory *path* in any order, or None if it cannot be read."""
        ...

    def exists(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def join(self, base: str, name: str) -> str: ...

    def split_root(self, pattern: str) -> tuple[str | None, int]:
        """Return ``(root, length)`` of the root prefix of *pattern*, or ``(None, 0)``."""
        ...

    def scope(self, root: str | None) -> str:
        """Directory a pattern with the given root is resolved against."""
        ...

    def is_verbatim(self, root: str) -> bool: ...

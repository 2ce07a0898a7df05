from __future__ import annotations

import os
import posixpath
from collections.abc import Callable, Collection

CURDIR = "."
PARDIR = ".."

SEPARATORS: frozenset[str] = frozenset(
    s for s in ("/", os.sep, os.altsep) if s is not None
)


def is_sep(c: str) -> bool:
    return c in SEPARATORS


def split_components(
    text: str, seps: Collection[str] = SEPARATORS
) -> list[tuple[int, str]]:
    """Split *text* on separators, returning ``(offset, component)`` pairs.

    A trailing separator does not produce an empty final component, so
    ``"a/"`` gives one component while ``"/"`` gives a single empty one.
    """
    parts: list[tuple[int, str]] = []
    start = 0
    for i, c in enumerate(text):
        if c in seps:
            parts.append((start, text[start:i]))
            start = i + 1
    if start < len(text):
        parts.append((start, text[start:]))
    return parts


def join_path(
    base: str, name: str, sep: str = "/", seps: Collection[str] = SEPARATORS
) -> str:
    # "." components vanish; ".." is kept as written.
    if not name or name == CURDIR:
        return base
    if base == CURDIR:
        return name
    if base and base[-1] in seps:
        return base + name
    return base + sep + name


def split_root(
    pattern: str,
    seps: Collection[str] = SEPARATORS,
    splitdrive: Callable[[str], tuple[str, str]] = os.path.splitdrive,
) -> tuple[str | None, int]:
    """Return the root prefix of *pattern* and its length.

    The root is the drive (if any) followed by one separator. A drive with
    no separator (``C:foo``) is returned on its own; a relative pattern has
    no root.
    """
    drive, rest = splitdrive(pattern)
    if rest and rest[0] in seps:
        root = drive + rest[0]
        return root, len(root)
    if drive:
        return drive, len(drive)
    return None, 0


def normalize_path(path: str) -> str:
    """Normalize an in-memory path to an absolute POSIX path.

    Relative paths are taken from the root; ``..`` above the root is an error.
    """
    converted = path.replace("\\", "/")
    if not converted:
        return "/"

    depth = 0
    for part in converted.split("/"):
        if part == PARDIR:
            depth -= 1
            if depth < 0:
                raise ValueError(f"Path escapes the root: '{path}'")
        elif part and part != CURDIR:
            depth += 1

    if not converted.startswith("/"):
        converted = "/" + converted
    return posixpath.normpath(converted)


def _current_user() -> str | None:
    return os.environ.get("USERNAME" if os.name == "nt" else "USER")


def _home_dir() -> str | None:
    home = os.path.expanduser("~")
    if home == "~":
        return None
    return home


def expand_tilde(pattern: str) -> str:
    """Replace a leading ``~`` or ``~<current user>`` with the home directory.

    Any other ``~name`` prefix, or a home directory that cannot be
    determined, leaves the pattern unchanged.
    """
    if not pattern.startswith("~"):
        return pattern
    end = 1
    while end < len(pattern) and not is_sep(pattern[end]):
        end += 1
    user = pattern[1:end]
    if user and user != _current_user():
        return pattern
    home = _home_dir()
    if home is None:
        return pattern
    return home + pattern[end:]

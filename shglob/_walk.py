"""Lazy filesystem traversal for glob patterns.

The traversal never recurses through the call stack between results: all
pending work lives in an explicit stack owned by the :class:`Paths` iterator,
so a caller can stop after any number of matches and simply drop it.
"""

from __future__ import annotations

from typing import NamedTuple

from loguru import logger

from ._exceptions import PatternError
from ._fs import OSFileSystem
from ._options import DEFAULT_OPTIONS, MatchOptions
from ._path import CURDIR, PARDIR, expand_tilde, split_components
from ._pattern import Pattern
from ._pattern import compile as compile_pattern
from ._typing import FileSystem

# Index of a stack entry that was fully checked when it was pushed.
_VERIFIED = -1


class _Todo(NamedTuple):
    path: str
    name: str | None
    index: int
    is_dir: bool | None


def _is_text(name: str) -> bool:
    # Undecodable bytes come back from os.scandir as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class Paths:
    """Iterator over the paths matching a pattern, in shell glob order.

    Within a directory, entries come out in ascending name order and a
    matching directory's descendants come before its later siblings.
    """

    def __init__(
        self,
        dir_patterns: list[Pattern],
        require_dir: bool,
        options: MatchOptions,
        fs: FileSystem,
        scope: str | None = None,
    ) -> None:
        self.dir_patterns = dir_patterns
        self.require_dir = require_dir
        self.options = options
        self._fs = fs
        self._todo: list[_Todo] = []
        if dir_patterns and scope is not None:
            self._fill_todo(0, scope, None)

    def __iter__(self) -> Paths:
        return self

    def __next__(self) -> str:
        patterns = self.dir_patterns
        last = len(patterns) - 1
        todo = self._todo

        while todo:
            path, name, idx, is_dir = todo.pop()

            if idx == _VERIFIED:
                if self._dir_ok(path, is_dir):
                    return path
                continue

            if name is None or not _is_text(name):
                logger.debug("Skipping entry with undecodable name: {!r}", path)
                continue

            pattern = patterns[idx]

            if pattern.is_recursive and idx == last:
                # Everything below a trailing ** matches.
                self._fill_todo(idx, path, is_dir)
                if self._dir_ok(path, is_dir):
                    return path
                continue

            if pattern.is_recursive:
                nxt = idx + 1
                while nxt <= last and patterns[nxt].is_recursive:
                    nxt += 1

                if nxt > last:
                    self._fill_todo(last, path, is_dir)
                    if self._dir_ok(path, is_dir):
                        return path
                    continue

                if not patterns[nxt].matches_with(name, self.options):
                    # Stay on the recursive component one level deeper.
                    self._fill_todo(nxt - 1, path, is_dir)
                    continue

                if nxt == last:
                    if self._dir_ok(path, is_dir):
                        return path
                else:
                    self._fill_todo(nxt + 1, path, is_dir)
                continue

            if not pattern.matches_with(name, self.options):
                continue
            if idx == last:
                if self._dir_ok(path, is_dir):
                    return path
            else:
                self._fill_todo(idx + 1, path, is_dir)

        raise StopIteration

    def _dir_ok(self, path: str, is_dir: bool | None) -> bool:
        if not self.require_dir:
            return True
        if is_dir is None:
            return self._fs.is_dir(path)
        return is_dir

    def _add(self, idx: int, path: str, is_dir: bool | None) -> None:
        if idx == len(self.dir_patterns) - 1:
            # "." and ".." can't be matched by name later, so never recheck.
            self._todo.append(_Todo(path, None, _VERIFIED, is_dir))
        else:
            self._fill_todo(idx + 1, path, is_dir)

    def _fill_todo(self, idx: int, base: str, base_is_dir: bool | None) -> None:
        """Push the candidates under *base* for ``dir_patterns[idx]``."""
        fs = self._fs
        pattern = self.dir_patterns[idx]

        literal = pattern.literal()
        if literal is not None:
            # No metacharacters: a single existence check replaces the listing.
            next_path = fs.join(base, literal)
            if literal in (CURDIR, PARDIR):
                found = fs.is_dir(base)
            else:
                found = fs.exists(next_path)
            if found:
                self._add(idx, next_path, None)
            return

        if base_is_dir is False:
            return
        children = fs.list_children(base)
        if children is None:
            logger.debug("Cannot list {!r}, skipping it", base)
            return

        children.sort(key=lambda entry: entry.name, reverse=True)
        self._todo.extend(
            _Todo(fs.join(base, entry.name), entry.name, idx, entry.is_dir)
            for entry in children
        )

        # Listings never include "." and "..", so a pattern that starts with
        # a literal dot is tried against them directly.
        if pattern.starts_with_literal_dot():
            for special in (CURDIR, PARDIR):
                if pattern.matches_with(special, self.options):
                    self._add(idx, fs.join(base, special), True)


def traverse(pattern: str, *, fs: FileSystem | None = None) -> Paths:
    """Return a lazy iterator of the paths matching *pattern*.

    Equivalent to ``traverse_with(pattern, default_options(), fs=fs)``.
    """
    return traverse_with(pattern, DEFAULT_OPTIONS, fs=fs)


def traverse_with(
    pattern: str, options: MatchOptions, *, fs: FileSystem | None = None
) -> Paths:
    """Return a lazy iterator of the paths matching *pattern* under *options*.

    The pattern may be absolute or relative to the current directory of
    *fs* (the real filesystem by default). ``require_literal_separator`` is
    always on while walking. A pattern ending in a separator only matches
    directories.

    Raises :class:`PatternError` before touching the filesystem if the
    pattern is invalid.
    """
    if fs is None:
        fs = OSFileSystem()
    if options.tilde_expansion:
        pattern = expand_tilde(pattern)

    compile_pattern(pattern)
    options = options.for_traversal()

    root, root_len = fs.split_root(pattern)
    if root is not None and fs.is_verbatim(root):
        logger.debug("Verbatim path prefix in {!r}, nothing to match", pattern)
        return Paths([], False, options, fs)

    dir_patterns: list[Pattern] = []
    for offset, component in split_components(pattern[root_len:], fs.separators):
        try:
            dir_patterns.append(compile_pattern(component))
        except PatternError as e:
            raise e.shifted(root_len + offset) from None

    require_dir = bool(pattern) and pattern[-1] in fs.separators
    scope = fs.scope(root)
    logger.debug(
        "Globbing {!r}: {} component(s) from {!r}", pattern, len(dir_patterns), scope
    )
    return Paths(dir_patterns, require_dir, options, fs, scope)

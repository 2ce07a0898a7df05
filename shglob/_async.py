"""Async wrapper around the traversal iterator.

Each step is delegated to :func:`asyncio.to_thread`, so directory reads
never block the event loop. One :class:`AsyncPaths` owns one work stack;
do not share it between concurrently running tasks.
"""

from __future__ import annotations

import asyncio

from ._options import DEFAULT_OPTIONS, MatchOptions
from ._typing import FileSystem
from ._walk import Paths, traverse_with

_EXHAUSTED = object()


class AsyncPaths:
    """Async iterator over the results of a :class:`Paths`."""

    def __init__(self, paths: Paths) -> None:
        self._paths = paths

    def __aiter__(self) -> AsyncPaths:
        return self

    async def __anext__(self) -> str:
        path = await asyncio.to_thread(next, self._paths, _EXHAUSTED)
        if path is _EXHAUSTED:
            raise StopAsyncIteration
        return path  # type: ignore[return-value]

    async def to_list(self, limit: int | None = None) -> list[str]:
        results: list[str] = []
        async for path in self:
            results.append(path)
            if limit is not None and len(results) >= limit:
                break
        return results


def atraverse(
    pattern: str,
    options: MatchOptions | None = None,
    *,
    fs: FileSystem | None = None,
) -> AsyncPaths:
    """Async counterpart of :func:`traverse_with`.

    The pattern is compiled immediately, so a :class:`PatternError` is raised
    here rather than on the first ``await``.
    """
    return AsyncPaths(
        traverse_with(pattern, options if options is not None else DEFAULT_OPTIONS, fs=fs)
    )

from typing import TYPE_CHECKING

from loguru import logger

from ._exceptions import (
    MalformedWildcardRunError,
    MisplacedRecursiveWildcardError,
    NodeLimitExceededError,
    PatternError,
    UnterminatedCharacterClassError,
)
from ._fs import MemoryFileSystem, OSFileSystem
from ._match import MatchResult, matches, matches_with
from ._options import MatchOptions, default_options
from ._pattern import (
    CharRange,
    Pattern,
    PatternToken,
    SingleChar,
    TokenKind,
    compile,
    escape,
)
from ._typing import ChildEntry, FileSystem
from ._walk import Paths, traverse, traverse_with

if TYPE_CHECKING:
    from ._async import AsyncPaths, atraverse

# Silent unless the application opts in with logger.enable("shglob").
logger.disable(__name__)


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name in ("AsyncPaths", "atraverse"):
        from ._async import AsyncPaths, atraverse

        globals()["AsyncPaths"] = AsyncPaths
        globals()["atraverse"] = atraverse
        return globals()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "compile",
    "escape",
    "matches",
    "matches_with",
    "default_options",
    "traverse",
    "traverse_with",
    "atraverse",
    "Pattern",
    "PatternToken",
    "TokenKind",
    "SingleChar",
    "CharRange",
    "MatchOptions",
    "MatchResult",
    "Paths",
    "AsyncPaths",
    "FileSystem",
    "ChildEntry",
    "OSFileSystem",
    "MemoryFileSystem",
    "PatternError",
    "MalformedWildcardRunError",
    "MisplacedRecursiveWildcardError",
    "UnterminatedCharacterClassError",
    "NodeLimitExceededError",
]
__version__ = "0.1.0"

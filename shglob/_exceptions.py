class PatternError(ValueError):
    """Raised when a glob pattern cannot be compiled. Subclass of ValueError.

    ``pos`` is the index into the original pattern string where the problem
    was detected and ``msg`` is a fixed diagnostic.
    """
    msg: str = "invalid pattern"

    def __init__(self, pos: int) -> None:
        self.pos = pos
        super().__init__(f"Pattern syntax error near position {pos}: {self.msg}")

    def shifted(self, offset: int) -> "PatternError":
        """Return the same error with its position moved by *offset*."""
        return type(self)(self.pos + offset)


class MalformedWildcardRunError(PatternError):
    """More than two consecutive ``*`` characters."""
    msg = "wildcards are either regular `*` or recursive `**`"


class MisplacedRecursiveWildcardError(PatternError):
    """A ``**`` that does not form a whole path component."""
    msg = "recursive wildcards must form a single path component"


class UnterminatedCharacterClassError(PatternError):
    """A ``[`` without a matching ``]``."""
    msg = "invalid range pattern"


class NodeLimitExceededError(OSError):
    """Raised when a MemoryFileSystem would exceed its node limit. Subclass of OSError."""
    def __init__(self, current: int, limit: int) -> None:
        self.current = current
        self.limit = limit
        super().__init__(
            f"node limit exceeded: current {current} nodes, limit is {limit}."
        )

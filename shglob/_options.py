from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchOptions:
    """Options read by the matcher and by traversal.

    ``case_sensitive``
        Compare characters exactly. When false, ASCII letters compare
        without regard to case.
    ``require_literal_separator``
        Path separators must be matched by a literal separator in the
        pattern, never by ``*``, ``?`` or a ``[...]`` class.
    ``require_literal_leading_dot``
        A ``.`` at the start of the candidate or right after a separator must
        be matched by a literal ``.``.
    ``tilde_expansion``
        Expand a leading ``~`` in the pattern before traversal. Ignored by
        plain string matching.
    """

    case_sensitive: bool = True
    require_literal_separator: bool = False
    require_literal_leading_dot: bool = False
    tilde_expansion: bool = False

    def for_traversal(self) -> MatchOptions:
        if self.require_literal_separator:
            return self
        return dataclasses.replace(self, require_literal_separator=True)


DEFAULT_OPTIONS = MatchOptions()


def default_options() -> MatchOptions:
    return DEFAULT_OPTIONS

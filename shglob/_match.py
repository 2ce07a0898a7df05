from __future__ import annotations

import enum
from collections.abc import Sequence

from ._options import DEFAULT_OPTIONS, MatchOptions
from ._path import is_sep
from ._pattern import CharSpecifier, Pattern, PatternToken, SingleChar, TokenKind
from ._pattern import compile as compile_pattern


class MatchResult(enum.Enum):
    """Outcome of one matching attempt.

    ``SUB_PATTERN_FAILS`` asks the caller to try another expansion of an
    enclosing ``*``; ``ENTIRE_PATTERN_FAILS`` means no expansion can succeed
    on what is left of the candidate, so the caller stops backtracking.
    """

    MATCH = "match"
    SUB_PATTERN_FAILS = "sub_pattern_fails"
    ENTIRE_PATTERN_FAILS = "entire_pattern_fails"


def chars_eq(a: str, b: str, case_sensitive: bool) -> bool:
    if is_sep(a) and is_sep(b):
        return True
    if not case_sensitive and a.isascii() and b.isascii():
        return a.lower() == b.lower()
    return a == b


def _is_ascii_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def in_char_specifiers(
    specifiers: Sequence[CharSpecifier], c: str, options: MatchOptions
) -> bool:
    for specifier in specifiers:
        if isinstance(specifier, SingleChar):
            if chars_eq(c, specifier.char, options.case_sensitive):
                return True
            continue

        low, high = specifier
        # Only a-z or A-Z style ranges fold case; [A-z] or [0-Z] stay exact.
        if (
            not options.case_sensitive
            and c.isascii()
            and _is_ascii_letter(low)
            and _is_ascii_letter(high)
            and low.islower() == high.islower()
        ):
            if low.lower() <= c.lower() <= high.lower():
                return True
        if low <= c <= high:
            return True
    return False


def _requires_literal(c: str, prev_char: str | None, options: MatchOptions) -> bool:
    if options.require_literal_separator and is_sep(c):
        return True
    if options.require_literal_leading_dot and c == ".":
        return prev_char is None or is_sep(prev_char)
    return False


def match_from(
    tokens: Sequence[PatternToken],
    index: int,
    prev_char: str | None,
    text: str,
    pos: int,
    options: MatchOptions,
) -> MatchResult:
    """Match ``tokens[index:]`` against ``text[pos:]``."""
    end = len(text)
    for ti in range(index, len(tokens)):
        token = tokens[ti]
        kind = token.kind

        if kind is TokenKind.ANY_SEQUENCE or kind is TokenKind.ANY_RECURSIVE_SEQUENCE:
            while True:
                result = match_from(tokens, ti + 1, prev_char, text, pos, options)
                if result is not MatchResult.SUB_PATTERN_FAILS:
                    return result
                if pos == end:
                    return MatchResult.ENTIRE_PATTERN_FAILS
                c = text[pos]
                if kind is TokenKind.ANY_SEQUENCE and _requires_literal(
                    c, prev_char, options
                ):
                    return MatchResult.SUB_PATTERN_FAILS
                prev_char = c
                pos += 1

        if pos == end:
            return MatchResult.ENTIRE_PATTERN_FAILS
        c = text[pos]

        if kind is TokenKind.CHAR:
            ok = chars_eq(c, token.char, options.case_sensitive)
        elif _requires_literal(c, prev_char, options):
            ok = False
        elif kind is TokenKind.ANY_CHAR:
            ok = True
        elif kind is TokenKind.ANY_WITHIN:
            ok = in_char_specifiers(token.specifiers, c, options)
        else:
            ok = not in_char_specifiers(token.specifiers, c, options)

        if not ok:
            return MatchResult.SUB_PATTERN_FAILS
        prev_char = c
        pos += 1

    if pos == end:
        return MatchResult.MATCH
    return MatchResult.SUB_PATTERN_FAILS


def matches_tokens(
    tokens: Sequence[PatternToken], candidate: str, options: MatchOptions
) -> bool:
    return match_from(tokens, 0, None, candidate, 0, options) is MatchResult.MATCH


def _as_pattern(pattern: Pattern | str) -> Pattern:
    if isinstance(pattern, Pattern):
        return pattern
    return compile_pattern(pattern)


def matches(pattern: Pattern | str, candidate: str) -> bool:
    """Return whether *candidate* matches *pattern* under the default options."""
    return matches_with(pattern, candidate, DEFAULT_OPTIONS)


def matches_with(
    pattern: Pattern | str, candidate: str, options: MatchOptions
) -> bool:
    return matches_tokens(_as_pattern(pattern).tokens, candidate, options)

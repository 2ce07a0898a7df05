"""Compilation of Unix shell style patterns.

``?`` matches any single character.

``*`` matches any (possibly empty) sequence of characters.

``**`` matches the current directory and arbitrary subdirectories. It must
form a whole path component, so both ``**a`` and ``b**`` are errors, as is a
run of more than two ``*``.

``[...]`` matches one character from the brackets; ``X-Y`` inside brackets is
an inclusive code point range. ``[!...]`` matches one character *not* in the
brackets. A ``]`` right after ``[`` or ``[!`` is a member of the class rather
than its end, so ``[]]`` and ``[!]]`` match ``]`` and anything but ``]``.
``-`` is matched literally when it is first or last, e.g. ``[abc-]``.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import NamedTuple

from ._exceptions import (
    MalformedWildcardRunError,
    MisplacedRecursiveWildcardError,
    UnterminatedCharacterClassError,
)
from ._options import DEFAULT_OPTIONS, MatchOptions
from ._path import is_sep


class SingleChar(NamedTuple):
    char: str


class CharRange(NamedTuple):
    low: str
    high: str


CharSpecifier = SingleChar | CharRange


class TokenKind(enum.IntEnum):
    CHAR = 0
    ANY_CHAR = 1
    ANY_SEQUENCE = 2
    ANY_RECURSIVE_SEQUENCE = 3
    ANY_WITHIN = 4
    ANY_EXCEPT = 5


@dataclass(frozen=True, order=True)
class PatternToken:
    kind: TokenKind
    char: str = ""
    specifiers: tuple[CharSpecifier, ...] = ()

    def __repr__(self) -> str:
        if self.kind is TokenKind.CHAR:
            return f"Char({self.char!r})"
        if self.specifiers:
            return f"{self.kind.name}({list(self.specifiers)!r})"
        return self.kind.name


ANY_CHAR = PatternToken(TokenKind.ANY_CHAR)
ANY_SEQUENCE = PatternToken(TokenKind.ANY_SEQUENCE)
ANY_RECURSIVE_SEQUENCE = PatternToken(TokenKind.ANY_RECURSIVE_SEQUENCE)


def char_token(c: str) -> PatternToken:
    return PatternToken(TokenKind.CHAR, char=c)


@dataclass(frozen=True, order=True)
class Pattern:
    """A compiled pattern. Build one with :func:`compile`."""

    original: str
    tokens: tuple[PatternToken, ...]
    is_recursive: bool = False

    def __str__(self) -> str:
        return self.original

    def as_str(self) -> str:
        return self.original

    def literal(self) -> str | None:
        """The pattern as a plain string, or None if it has any metacharacter."""
        chars = []
        for token in self.tokens:
            if token.kind is not TokenKind.CHAR:
                return None
            chars.append(token.char)
        return "".join(chars)

    def starts_with_literal_dot(self) -> bool:
        return bool(self.tokens) and self.tokens[0] == char_token(".")

    def matches(self, candidate: str, options: MatchOptions | None = None) -> bool:
        from ._match import matches_tokens

        return matches_tokens(
            self.tokens, candidate, options if options is not None else DEFAULT_OPTIONS
        )

    def matches_with(self, candidate: str, options: MatchOptions) -> bool:
        return self.matches(candidate, options)

    def matches_path(
        self, path: str | os.PathLike[str], options: MatchOptions | None = None
    ) -> bool:
        return self.matches(os.fspath(path), options)


def _parse_char_specifiers(body: str) -> tuple[CharSpecifier, ...]:
    specifiers: list[CharSpecifier] = []
    i = 0
    while i < len(body):
        if i + 3 <= len(body) and body[i + 1] == "-":
            specifiers.append(CharRange(body[i], body[i + 2]))
            i += 3
        else:
            specifiers.append(SingleChar(body[i]))
            i += 1
    return tuple(specifiers)


def compile(pattern: str) -> Pattern:
    """Compile *pattern*, raising a :class:`PatternError` subclass if it is invalid."""
    n = len(pattern)
    tokens: list[PatternToken] = []
    is_recursive = False
    i = 0

    while i < n:
        c = pattern[i]
        if c == "?":
            tokens.append(ANY_CHAR)
            i += 1
        elif c == "*":
            start = i
            while i < n and pattern[i] == "*":
                i += 1
            count = i - start

            if count > 2:
                raise MalformedWildcardRunError(start + 2)
            if count == 1:
                tokens.append(ANY_SEQUENCE)
                continue

            # "**" must be a whole component: a/**/b is valid, a**/b and a/**b are not.
            if start != 0 and not is_sep(pattern[start - 1]):
                raise MisplacedRecursiveWildcardError(start - 1)
            if i < n:
                if not is_sep(pattern[i]):
                    raise MisplacedRecursiveWildcardError(i)
                i += 1

            if not (tokens and tokens[-1] == ANY_RECURSIVE_SEQUENCE):
                tokens.append(ANY_RECURSIVE_SEQUENCE)
                is_recursive = True
        elif c == "[":
            if i + 4 <= n and pattern[i + 1] == "!":
                j = pattern.find("]", i + 3)
                if j != -1:
                    tokens.append(
                        PatternToken(
                            TokenKind.ANY_EXCEPT,
                            specifiers=_parse_char_specifiers(pattern[i + 2 : j]),
                        )
                    )
                    i = j + 1
                    continue
            elif i + 3 <= n and pattern[i + 1] != "!":
                j = pattern.find("]", i + 2)
                if j != -1:
                    tokens.append(
                        PatternToken(
                            TokenKind.ANY_WITHIN,
                            specifiers=_parse_char_specifiers(pattern[i + 1 : j]),
                        )
                    )
                    i = j + 1
                    continue
            raise UnterminatedCharacterClassError(i)
        else:
            tokens.append(char_token(c))
            i += 1

    return Pattern(original=pattern, tokens=tuple(tokens), is_recursive=is_recursive)


def escape(literal: str) -> str:
    """Bracket every metacharacter in *literal* so the result matches only *literal*.

    ``!`` is left alone: it is only special inside brackets.
    """
    return "".join(f"[{c}]" if c in "?*[]" else c for c in literal)

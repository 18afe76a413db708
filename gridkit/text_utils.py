"""gridkit.text_utils
======================

Turn raw puzzle text into tokens and numbers.

Patterns are regular expressions handled by :mod:`re`; callers may pass either
a pattern string or an already compiled pattern. Splitting is literal: a
delimiter at either end of the text, or two delimiters in a row, yield empty
tokens. Nothing here drops them, so callers that do not want them filter
explicitly (``[t for t in tokens if t]``).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, List, Sequence

from .errors import ParseError, PatternError
from .types import N, Pattern, TokenGrid, Tokens


@lru_cache(maxsize=128)
def _compile(pattern: str) -> "re.Pattern[str]":
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc


def compile_pattern(pattern: Pattern) -> "re.Pattern[str]":
    """Return a compiled regular expression for ``pattern``.

    Raises
    ------
    PatternError
        If ``pattern`` is a string with invalid regular expression syntax.
    """

    if isinstance(pattern, re.Pattern):
        return pattern
    return _compile(pattern)


def split(text: str, pattern: Pattern) -> Tokens:
    """Split ``text`` on every non-overlapping match of ``pattern``.

    Unlike :func:`re.split`, capture groups inside the pattern are never
    emitted as tokens: only the text between matches is returned.

    Examples
    --------
    >>> split("1,2.3|4 5", r",|\\.|\\|| ")
    ['1', '2', '3', '4', '5']
    >>> split(",a,,b,", ",")
    ['', 'a', '', 'b', '']
    """

    regex = compile_pattern(pattern)
    tokens: Tokens = []
    start = 0
    for match in regex.finditer(text):
        tokens.append(text[start : match.start()])
        start = match.end()
    tokens.append(text[start:])
    return tokens


def lines(text: str) -> Tokens:
    """Break ``text`` into lines at ``"\\n"`` or ``"\\r\\n"``.

    Other characters :meth:`str.splitlines` treats as boundaries (form feed,
    ``"\\x1c"``, ``"\\u2028"`` ...) stay inside the line. A trailing newline
    does not produce an empty last line, and a lone ``"\\r"`` at the very end
    of the text is kept.
    """

    pieces = text.split("\n")
    last = pieces.pop()
    result = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if last:
        result.append(last)
    return result


def split_lines(text: str, pattern: Pattern) -> TokenGrid:
    """Split each line of ``text`` separately; matches never span lines."""

    regex = compile_pattern(pattern)
    return [split(line, regex) for line in lines(text)]


def filter_text(text: str, pattern: Pattern) -> str:
    """Remove every match of ``pattern`` from ``text`` in a single pass."""

    return compile_pattern(pattern).sub("", text)


def parse_numeric(tokens: Sequence[str], kind: Callable[[str], N] = int) -> List[N]:
    """Convert ``tokens`` to numbers using ``kind`` (``int``, ``float``, ...).

    Parameters
    ----------
    tokens:
        Strings to convert. Empty strings are not skipped.
    kind:
        Callable turning one string into a number, typically a numeric type
        such as ``int``, ``float``, ``Fraction`` or ``Decimal``.

    Raises
    ------
    ParseError
        On the first token ``kind`` rejects. The error carries the token and
        its index. Tokens with surrounding whitespace or ``_`` digit
        separators are rejected too, even though Python's numeric
        constructors would accept them.
    """

    values: List[N] = []
    for index, token in enumerate(tokens):
        if token != token.strip() or "_" in token:
            raise ParseError(token, index, _kind_name(kind))
        try:
            values.append(kind(token))
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ParseError(token, index, _kind_name(kind)) from exc
    return values


def parse_numeric_grid(rows: Sequence[Sequence[str]], kind: Callable[[str], N] = int) -> List[List[N]]:
    """Apply :func:`parse_numeric` to every row; errors also report the row."""

    grid: List[List[N]] = []
    for row_index, tokens in enumerate(rows):
        try:
            grid.append(parse_numeric(tokens, kind))
        except ParseError as exc:
            raise ParseError(exc.token, exc.index, exc.kind, row=row_index) from exc
    return grid


def _kind_name(kind: Callable[..., object]) -> str:
    return getattr(kind, "__name__", repr(kind))


__all__ = [
    "compile_pattern",
    "split",
    "lines",
    "split_lines",
    "filter_text",
    "parse_numeric",
    "parse_numeric_grid",
]

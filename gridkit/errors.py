"""gridkit.errors
==================

Exception types raised by the library. Every error derives from
:class:`GridKitError` so callers can catch the whole family at once, and also
from the closest builtin so existing ``except ValueError`` handlers keep
working.

Absent results (empty grids, out-of-range indices) are *not* errors; those
operations return ``None`` instead.
"""

from __future__ import annotations

from typing import Any, Optional


class GridKitError(Exception):
    """Base class for all gridkit failures."""


class DivideByZero(GridKitError, ZeroDivisionError):
    """Raised when a point (or modulus) is divided by a zero scalar."""

    def __init__(self, operation: str, divisor: Any = 0) -> None:
        self.operation = operation
        self.divisor = divisor
        super().__init__(f"{operation}: cannot divide by zero ({divisor!r})")


class PatternError(GridKitError, ValueError):
    """Raised when a pattern string is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class ParseError(GridKitError, ValueError):
    """Raised when a token cannot be converted to the requested numeric type.

    Attributes
    ----------
    token:
        The offending token, verbatim.
    index:
        Position of the token inside its row.
    kind:
        Name of the numeric type that was requested.
    row:
        Row index when parsing a token grid, otherwise ``None``.
    """

    def __init__(self, token: str, index: int, kind: str, row: Optional[int] = None) -> None:
        self.token = token
        self.index = index
        self.kind = kind
        self.row = row
        where = f"index {index}" if row is None else f"row {row}, index {index}"
        super().__init__(f"cannot parse {token!r} as {kind} at {where}")


__all__ = ["GridKitError", "DivideByZero", "PatternError", "ParseError"]

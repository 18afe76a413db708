"""gridkit.grid_utils
======================

Stateless helpers operating on grids, i.e. lists of rows. Grids may be ragged;
every accessor here is defined for empty input and out-of-range indices and
answers ``None`` rather than raising when there is nothing to return.

A column ``n`` only exists when *every* row is long enough to have an
element ``n``. Asking for a column that is missing from some rows is treated
the same as asking for a column past the end of the grid.
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, Callable, List, Optional, Tuple

import numpy as np

from .errors import DivideByZero
from .types import Grid, GridLike, T

# ---------------------------------------------------------------------------
# Basic geometry
# ---------------------------------------------------------------------------
def dims(grid: GridLike[Any]) -> Tuple[int, int]:
    """Return the height and width of a grid.

    Parameters
    ----------
    grid:
        Grid to measure. It may be empty or ragged.

    Returns
    -------
    tuple[int, int]
        ``(height, width)`` where ``width`` is the length of the longest row.
        Empty grids return ``(0, 0)``.
    """

    if not grid:
        return 0, 0
    return len(grid), max(len(row) for row in grid)


def row(grid: GridLike[T], n: int) -> Optional[List[T]]:
    """Return a copy of row ``n`` or ``None`` when it does not exist."""

    if n < 0 or n >= len(grid):
        return None
    return list(grid[n])


def column(grid: GridLike[T], n: int) -> Optional[List[T]]:
    """Return column ``n`` top to bottom, or ``None`` when any row lacks it."""

    if not grid or n < 0:
        return None
    if any(n >= len(line) for line in grid):
        return None
    return [line[n] for line in grid]


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------
def _aggregate(values: Optional[List[T]], fold: Callable[[List[T]], T]) -> Optional[T]:
    if not values:
        return None
    return fold(values)


def _total(values: List[T]) -> T:
    # Fold from the first value so no implicit integer zero leaks in.
    return reduce(operator.add, values)


def sum_row(grid: GridLike[T], n: int) -> Optional[T]:
    """Sum of row ``n``; ``None`` for an empty grid, empty row or bad index."""

    return _aggregate(row(grid, n), _total)


def sum_column(grid: GridLike[T], n: int) -> Optional[T]:
    """Sum of column ``n``; ``None`` for an empty grid or bad index."""

    return _aggregate(column(grid, n), _total)


def min_row(grid: GridLike[T], n: int) -> Optional[T]:
    return _aggregate(row(grid, n), min)


def min_column(grid: GridLike[T], n: int) -> Optional[T]:
    return _aggregate(column(grid, n), min)


def max_row(grid: GridLike[T], n: int) -> Optional[T]:
    return _aggregate(row(grid, n), max)


def max_column(grid: GridLike[T], n: int) -> Optional[T]:
    return _aggregate(column(grid, n), max)


# ---------------------------------------------------------------------------
# Transformations
# ---------------------------------------------------------------------------
def rotate(grid: GridLike[T]) -> Grid[T]:
    """Transpose ``grid`` so row ``i`` of the result is column ``i`` of the input.

    The output has as many rows as the longest input row. Shorter rows simply
    stop contributing once they run out, so no value from a longer row is
    lost. For rectangular grids ``rotate(rotate(grid)) == grid``.

    Examples
    --------
    >>> rotate([[1, 2, 3], [4, 5]])
    [[1, 4], [2, 5], [3]]
    """

    _, width = dims(grid)
    return [[line[i] for line in grid if i < len(line)] for i in range(width)]


def pad(text: str, filler: Any) -> Optional[Grid[Any]]:
    """Turn ``text`` into a character grid surrounded by a ``filler`` border.

    Parameters
    ----------
    text:
        Multi-line text split at ``"\\n"`` or ``"\\r\\n"``. Blank lines are
        ignored.
    filler:
        Value placed on every border cell and after the end of lines that are
        shorter than the longest one.

    Returns
    -------
    list[list] or None
        A grid two rows taller and two columns wider than the text, with the
        original characters at offset ``(1, 1)``. ``None`` when ``text`` has no
        non-empty line, since there is nothing to pad.
    """

    # Lines end at "\n" or "\r\n" only; other control characters stay in the row.
    pieces = text.split("\n")
    last = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces] + [last]
    lines = [line for line in lines if line]
    if not lines:
        return None
    height = len(lines)
    width = max(len(line) for line in lines)
    # fill() stores filler as one object per cell, even when it is a sequence.
    out = np.empty((height + 2, width + 2), dtype=object)
    out.fill(filler)
    for r, line in enumerate(lines):
        out[r + 1, 1 : len(line) + 1] = list(line)
    return out.tolist()


def modulus(a: T, b: T) -> T:
    """Euclidean remainder, always in ``[0, b)`` for positive ``b``.

    Computed as ``((a % b) + b) % b`` so the result is non-negative even for
    numeric types whose ``%`` follows the sign of the dividend, such as
    ``Decimal``.

    Raises
    ------
    DivideByZero
        If ``b`` is zero.
    """

    if b == 0:
        raise DivideByZero("modulus", b)
    return ((a % b) + b) % b


__all__ = [
    "dims",
    "row",
    "column",
    "sum_row",
    "sum_column",
    "min_row",
    "min_column",
    "max_row",
    "max_column",
    "rotate",
    "pad",
    "modulus",
]

from __future__ import annotations

import sys
from decimal import Decimal
from fractions import Fraction
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from gridkit.errors import DivideByZero
from gridkit.grid_utils import (
    column,
    dims,
    max_column,
    max_row,
    min_column,
    min_row,
    modulus,
    pad,
    rotate,
    row,
    sum_column,
    sum_row,
)

GRID = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
ACCESSORS = [sum_row, sum_column, min_row, min_column, max_row, max_column]


def test_dims():
    assert dims(GRID) == (3, 3)
    assert dims([[1, 2, 3], [4]]) == (2, 3)
    assert dims([]) == (0, 0)


def test_sums():
    assert sum_column(GRID, 1) == 15
    assert sum_row(GRID, 2) == 24
    assert sum_row([[0.1, 0.2]], 0) == pytest.approx(0.3)
    assert sum_column([[Fraction(1, 3)], [Fraction(2, 3)]], 0) == 1


def test_extrema():
    assert min_row(GRID, 1) == 4
    assert max_row(GRID, 1) == 6
    assert min_column(GRID, 2) == 3
    assert max_column(GRID, 2) == 9


def test_accessors_absent_on_empty_grid():
    for accessor in ACCESSORS:
        assert accessor([], 0) is None


def test_accessors_absent_on_out_of_range_index():
    for accessor in ACCESSORS:
        assert accessor(GRID, 3) is None
        assert accessor(GRID, -1) is None


def test_accessors_absent_on_empty_row():
    assert sum_row([[], [1]], 0) is None
    assert min_row([[]], 0) is None
    assert max_column([[]], 0) is None


def test_ragged_grid_columns():
    ragged = [[1, 2, 3], [4]]
    assert row(ragged, 1) == [4]
    assert column(ragged, 0) == [1, 4]
    assert column(ragged, 1) is None
    assert sum_column(ragged, 2) is None
    assert sum_row(ragged, 0) == 6
    assert max_row(ragged, 1) == 4


def test_row_is_a_copy():
    copied = row(GRID, 0)
    copied[0] = 100
    assert GRID[0][0] == 1


def test_rotate_rectangular():
    grid = [[1, 2, 3], [4, 5, 6]]
    assert rotate(grid) == [[1, 4], [2, 5], [3, 6]]
    assert rotate(rotate(grid)) == grid
    assert rotate(rotate(GRID)) == GRID


def test_rotate_ragged_keeps_longer_rows():
    assert rotate([[1, 2, 3], [4]]) == [[1, 4], [2], [3]]
    assert rotate([[1], [2, 3]]) == [[1, 2], [3]]
    assert rotate([]) == []


def test_pad():
    assert pad("ab\ncd", ".") == [
        [".", ".", ".", "."],
        [".", "a", "b", "."],
        [".", "c", "d", "."],
        [".", ".", ".", "."],
    ]


def test_pad_preserves_content_and_grows_by_two():
    text = "#..\n.#.\n..#\n"
    padded = pad(text, 0)
    assert dims(padded) == (5, 5)
    for r, line in enumerate(text.splitlines()):
        for c, char in enumerate(line):
            assert padded[r + 1][c + 1] == char
    assert all(cell == 0 for cell in padded[0] + padded[-1])
    assert all(line[0] == 0 and line[-1] == 0 for line in padded)


def test_pad_fills_short_lines():
    assert pad("abc\nd\n", "~") == [
        ["~"] * 5,
        ["~", "a", "b", "c", "~"],
        ["~", "d", "~", "~", "~"],
        ["~"] * 5,
    ]


def test_pad_absent_without_content():
    assert pad("", ".") is None
    assert pad("\n\n", "#") is None


def test_modulus():
    assert modulus(7, 5) == 2
    assert modulus(-7, 5) == 3
    assert modulus(Decimal(-7), Decimal(5)) == Decimal(3)
    for a in range(-20, 20):
        assert 0 <= modulus(a, 5) < 5


def test_modulus_by_zero():
    with pytest.raises(DivideByZero):
        modulus(3, 0)


def test_pad_sequence_filler_fills_every_border_cell():
    padded = pad("ab", (0, 0))
    assert dims(padded) == (3, 4)
    assert padded[1][1:3] == ["a", "b"]
    assert all(cell == (0, 0) for cell in padded[0] + padded[2])
    wide = pad("ab", ("w", "x", "y", "z"))
    assert all(cell == ("w", "x", "y", "z") for cell in wide[0])


def test_pad_splits_only_on_newlines():
    assert pad("a\x0cb\r\nc", ".") == [
        [".", ".", ".", ".", "."],
        [".", "a", "\x0c", "b", "."],
        [".", "c", ".", ".", "."],
        [".", ".", ".", ".", "."],
    ]

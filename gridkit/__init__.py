"""Public package interface for gridkit."""

from .errors import DivideByZero, GridKitError, ParseError, PatternError
from .grid_utils import (
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
from .point import Point, chebyshev, manhattan
from .text_utils import compile_pattern, filter_text, lines, parse_numeric, parse_numeric_grid, split, split_lines

__all__ = [
    "Point",
    "manhattan",
    "chebyshev",
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
    "compile_pattern",
    "split",
    "lines",
    "split_lines",
    "filter_text",
    "parse_numeric",
    "parse_numeric_grid",
    "GridKitError",
    "DivideByZero",
    "PatternError",
    "ParseError",
]

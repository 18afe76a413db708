"""gridkit.encoders
====================

Textual encodings for grids, used by the CLI to print results and to read
numeric grids back in. Encoders are stateless so instances can be shared.
"""

from __future__ import annotations

import re
from typing import Any, Protocol

from .text_utils import lines, parse_numeric_grid, split_lines
from .types import Grid, GridLike


class GridEncoder(Protocol):
    """Interface for components converting grids to and from text."""

    def to_text(self, grid: GridLike[Any]) -> str:
        """Serialise ``grid`` into a human-readable snippet."""

    def to_grid(self, text: str) -> Grid[int]:
        """Parse ``text`` back into an integer grid."""


class MinimalGridEncoder:
    """Cells concatenated per row, rows joined by newlines.

    Only round-trips grids of single-digit values; meant for character grids
    such as the output of :func:`gridkit.grid_utils.pad`.
    """

    def to_text(self, grid: GridLike[Any]) -> str:
        return "\n".join("".join(str(cell) for cell in row) for row in grid)

    def to_grid(self, text: str) -> Grid[int]:
        rows = [list(line.strip()) for line in lines(text) if line.strip()]
        return parse_numeric_grid(rows)


class GridWithSeparationEncoder:
    """Encoder that puts ``split_symbol`` between neighbouring cells.

    Parameters
    ----------
    split_symbol:
        Literal separator. Defaults to ``"|"``, which stays readable for
        multi-digit values.
    """

    def __init__(self, split_symbol: str = "|") -> None:
        self.split_symbol = split_symbol

    def to_text(self, grid: GridLike[Any]) -> str:
        return "\n".join(self.split_symbol.join(str(cell) for cell in row) for row in grid)

    def to_grid(self, text: str) -> Grid[int]:
        body = "\n".join(line.strip() for line in lines(text) if line.strip())
        return parse_numeric_grid(split_lines(body, re.escape(self.split_symbol)))


DEFAULT_ENCODER: GridEncoder = GridWithSeparationEncoder(" ")
"""Encoder the CLI uses for printing grids."""


__all__ = [
    "GridEncoder",
    "MinimalGridEncoder",
    "GridWithSeparationEncoder",
    "DEFAULT_ENCODER",
]

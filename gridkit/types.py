"""gridkit.types
=================

Shared type aliases used throughout the package. Keeping them in one place
means every module spells ``Grid`` the same way and importing this module
never has runtime side effects.
"""

from __future__ import annotations

import re
from typing import Any, List, Protocol, Sequence, TypeVar, Union

# ---------------------------------------------------------------------------
# Numeric capabilities
# ---------------------------------------------------------------------------
class Numeric(Protocol):
    """Minimal capabilities a coordinate or grid value needs.

    ``int``, ``float``, ``Fraction``, ``Decimal`` and numpy scalars all
    satisfy it. Operations that step by one unit additionally rely on the
    type accepting the integer literals ``0`` and ``1``.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T")
N = TypeVar("N", bound=Numeric)

# ---------------------------------------------------------------------------
# Grid representations
# ---------------------------------------------------------------------------
Grid = List[List[T]]
GridLike = Sequence[Sequence[T]]
Tokens = List[str]
TokenGrid = List[List[str]]
Pattern = Union[str, "re.Pattern[str]"]


__all__ = [
    "Numeric",
    "T",
    "N",
    "Grid",
    "GridLike",
    "Tokens",
    "TokenGrid",
    "Pattern",
]

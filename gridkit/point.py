"""gridkit.point
=================

Generic two-component coordinate used by puzzle code.

Coordinates follow the *screen* convention: ``x`` grows to the right and ``y``
grows downwards, so :meth:`Point.up` decreases ``y`` and :meth:`Point.down`
increases it. This is the opposite of the Cartesian convention and is relied
upon by every grid walker built on top of this module, so keep it that way.

``Point`` is generic over its coordinate type. Anything supporting ``+``,
``-``, ordering and arithmetic with the literals ``0`` and ``1`` works:
``int``, ``float``, ``Fraction``, ``Decimal`` and numpy scalars (signed or
unsigned). Overflow of fixed-width numpy types is not detected; it behaves
however numpy behaves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Tuple

from .errors import DivideByZero
from .types import N


@dataclass(order=True, unsafe_hash=True)
class Point(Generic[N]):
    """A 2D coordinate with vector arithmetic.

    Equality, ordering and hashing are structural and lexicographic on
    ``(x, y)``. The in-place operators (``+=``, ``-=``, ``*=``, ``/=``,
    ``//=``) and the ``move_*`` methods mutate the instance, so a point that
    is shared between owners should be :meth:`copy`-ed first. Mutating a point
    while it is stored in a set or used as a dict key breaks that container.
    """

    x: N = 0  # type: ignore[assignment]
    y: N = 0  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def zero(cls) -> "Point[Any]":
        return cls(0, 0)

    @classmethod
    def from_tuple(cls, pair: Tuple[N, N]) -> "Point[N]":
        x, y = pair
        return cls(x, y)

    def as_tuple(self) -> Tuple[N, N]:
        return (self.x, self.y)

    def copy(self) -> "Point[N]":
        return type(self)(self.x, self.y)

    def __iter__(self) -> Iterator[N]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: "Point[N]") -> "Point[N]":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point[N]") -> "Point[N]":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Any) -> "Point[Any]":
        """Scale both components by ``factor`` (which may be of another type)."""

        if isinstance(factor, Point):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Any) -> "Point[Any]":
        """Divide both components by ``divisor``.

        Raises
        ------
        DivideByZero
            If ``divisor`` equals zero. The check happens before any
            arithmetic so numpy types never produce ``inf``/``nan`` silently.
        """

        if isinstance(divisor, Point):
            return NotImplemented
        _check_divisor("divide", divisor)
        return Point(self.x / divisor, self.y / divisor)

    def __floordiv__(self, divisor: Any) -> "Point[Any]":
        if isinstance(divisor, Point):
            return NotImplemented
        _check_divisor("floor divide", divisor)
        return Point(self.x // divisor, self.y // divisor)

    def __neg__(self) -> "Point[N]":
        return Point(-self.x, -self.y)

    # In-place variants mutate ``self`` and hand it back so ``p += q`` keeps
    # the same object.
    def __iadd__(self, other: "Point[N]") -> "Point[N]":
        if not isinstance(other, Point):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Point[N]") -> "Point[N]":
        if not isinstance(other, Point):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, factor: Any) -> "Point[Any]":
        if isinstance(factor, Point):
            return NotImplemented
        self.x *= factor
        self.y *= factor
        return self

    def __itruediv__(self, divisor: Any) -> "Point[Any]":
        if isinstance(divisor, Point):
            return NotImplemented
        _check_divisor("divide", divisor)
        self.x /= divisor
        self.y /= divisor
        return self

    def __ifloordiv__(self, divisor: Any) -> "Point[Any]":
        if isinstance(divisor, Point):
            return NotImplemented
        _check_divisor("floor divide", divisor)
        self.x //= divisor
        self.y //= divisor
        return self

    # ------------------------------------------------------------------
    # Cardinal movement (screen coordinates: up is y - 1)
    # ------------------------------------------------------------------
    def up(self) -> "Point[N]":
        return Point(self.x, self.y - 1)

    def down(self) -> "Point[N]":
        return Point(self.x, self.y + 1)

    def left(self) -> "Point[N]":
        return Point(self.x - 1, self.y)

    def right(self) -> "Point[N]":
        return Point(self.x + 1, self.y)

    def move_up(self) -> None:
        self.y -= 1

    def move_down(self) -> None:
        self.y += 1

    def move_left(self) -> None:
        self.x -= 1

    def move_right(self) -> None:
        self.x += 1

    def neighbors(self) -> Tuple["Point[N]", "Point[N]", "Point[N]", "Point[N]"]:
        """Return the four cardinal neighbours ordered ``(up, down, left, right)``."""

        return (self.up(), self.down(), self.left(), self.right())

    # ------------------------------------------------------------------
    # Distances
    # ------------------------------------------------------------------
    def manhattan(self, other: "Point[N]") -> N:
        return manhattan(self, other)

    def chebyshev(self, other: "Point[N]") -> N:
        return chebyshev(self, other)


def _check_divisor(operation: str, divisor: Any) -> None:
    if divisor == 0:
        raise DivideByZero(operation, divisor)


def _axis_distance(a: N, b: N) -> N:
    """Distance along one axis as ``max - min``.

    Subtracting the smaller value from the larger one never goes below zero,
    which keeps unsigned numpy coordinates from wrapping around. For signed
    types it is identical to ``abs(a - b)``.
    """

    return a - b if a >= b else b - a


def manhattan(lhs: Point[N], rhs: Point[N]) -> N:
    """Cardinal (taxicab) distance: diagonal steps cost two moves."""

    return _axis_distance(lhs.x, rhs.x) + _axis_distance(lhs.y, rhs.y)


def chebyshev(lhs: Point[N], rhs: Point[N]) -> N:
    """King-move distance: a diagonal step costs the same as a cardinal one."""

    return max(_axis_distance(lhs.x, rhs.x), _axis_distance(lhs.y, rhs.y))


__all__ = ["Point", "manhattan", "chebyshev"]

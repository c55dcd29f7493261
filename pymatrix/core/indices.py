"""
Index/Size model shared by every matrix operation.

A MatrixIndices value is one pair of unsigned integers read under two
naming conventions over the same storage:

    x, y    column, row     (Cartesian addressing)
    m, n    row, column     (linear-algebra addressing)

so that m is y and n is x. The aliases are properties over the same two
slots; they can never disagree.

MatrixSize and MatrixEntry are the same type, named by use.
"""

from __future__ import annotations

from typing import Any

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_coordinate


class MatrixIndices:
    """Pair of unsigned integers addressing or sizing a matrix."""

    __slots__ = ('_x', '_y')

    def __init__(self, x: int = 0, y: int = 0):
        self._x = check_coordinate(x, 'x')
        self._y = check_coordinate(y, 'y')

    # --- Cartesian names ---

    @property
    def x(self) -> int:
        """Column index (or column count, for a size)."""
        return self._x

    @x.setter
    def x(self, value: int) -> None:
        self._x = check_coordinate(value, 'x')

    @property
    def y(self) -> int:
        """Row index (or row count, for a size)."""
        return self._y

    @y.setter
    def y(self, value: int) -> None:
        self._y = check_coordinate(value, 'y')

    # --- Linear-algebra names (aliases) ---

    @property
    def m(self) -> int:
        """Row index; alias of y."""
        return self._y

    @m.setter
    def m(self, value: int) -> None:
        self._y = check_coordinate(value, 'm')

    @property
    def n(self) -> int:
        """Column index; alias of x."""
        return self._x

    @n.setter
    def n(self, value: int) -> None:
        self._x = check_coordinate(value, 'n')

    # --- Operations ---

    def flip(self) -> None:
        """Swap x and y in place (turns a size into the transposed size)."""
        self._x, self._y = self._y, self._x

    def swap(self, other: MatrixIndices) -> None:
        """Exchange contents with another value."""
        self._x, other._x = other._x, self._x
        self._y, other._y = other._y, self._y

    def copy(self) -> MatrixIndices:
        return MatrixIndices(self._x, self._y)

    def xy(self) -> tuple[int, int]:
        return self._x, self._y

    def mn(self) -> tuple[int, int]:
        return self._y, self._x

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MatrixIndices):
            return self._x == other._x and self._y == other._y
        if isinstance(other, tuple) and len(other) == 2:
            return (self._x, self._y) == other
        return NotImplemented

    # Mutable value
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({self._x}, {self._y})"

    def __repr__(self) -> str:
        return f"MatrixIndices(x={self._x}, y={self._y})"


MatrixSize = MatrixIndices
MatrixEntry = MatrixIndices

IndicesLike = MatrixIndices | tuple[int, int]


def XY(x: int, y: int) -> MatrixIndices:
    """Build indices from (column, row)."""
    return MatrixIndices(x, y)


def MN(m: int, n: int) -> MatrixIndices:
    """Build indices from (row, column)."""
    return MatrixIndices(n, m)


def as_indices(value: Any, name: str) -> MatrixIndices:
    """
    Accept a MatrixIndices or an (x, y) tuple and return a MatrixIndices.

    A MatrixIndices argument is copied, so callers may mutate the result.
    """
    if isinstance(value, MatrixIndices):
        return value.copy()
    if isinstance(value, tuple) and len(value) == 2:
        return MatrixIndices(check_coordinate(value[0], f"{name}.x"),
                             check_coordinate(value[1], f"{name}.y"))
    raise ValidationError(
        f"{name}: expected MatrixIndices or (x, y) tuple, got {type(value).__name__}"
    )

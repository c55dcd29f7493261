"""
Vector: one-dimensional dense container over a numeric-like element type.

Every element access goes through one bound check (_check_index); two-operand
operators require equal lengths and raise IncompatibleVectorSizesError
otherwise.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    IncompatibleVectorSizesError,
    InvalidIndexError,
    ValidationError,
)
from pymatrix.core.validation import check_coordinate, check_numeric_array, is_scalar

T = TypeVar('T')
S = TypeVar('S')

VectorIndex = int
VectorSize = VectorIndex
VectorEntry = VectorIndex


class Vector(Generic[T]):
    """
    Dense vector of elements supporting +, -, *, / and negation.

    Construction:
        Vector()                         empty vector
        Vector([1, 2, 3])                copy of a flat sequence
        Vector.filled(3, 0.0)            size + fill value
        Vector.from_values(lst, copy=False)
        Vector.converted(other, float)   per-element cast
        Vector.from_array(ndarray)
    """

    __slots__ = ('_values',)

    # Keep numpy scalars on the left from broadcasting over our elements
    __array_ufunc__ = None

    def __init__(self, values: Iterable[T] | None = None):
        self._values: list[T] = [] if values is None else list(values)

    @classmethod
    def filled(cls, size: VectorSize, value: Any = 0) -> Vector:
        size = check_coordinate(size, 'size')
        return cls([value] * size)

    @classmethod
    def from_values(cls, values: Iterable[T], *, copy: bool = True) -> Vector[T]:
        """
        Build from a flat sequence.

        With copy=False a list argument is adopted as the storage; the caller
        must not keep using it.
        """
        if copy or not isinstance(values, list):
            return cls(values)
        vec = cls()
        vec._values = values
        return vec

    @classmethod
    def converted(cls, other: Vector[S], cast: Callable[[S], T]) -> Vector[T]:
        """Build from a vector of another element type via explicit cast."""
        return cls(cast(v) for v in other._values)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        """Build from a 1D numeric array; elements become Python scalars."""
        arr = check_numeric_array(array, 1, 'array')
        return cls.from_values(arr.tolist(), copy=False)

    # === Access ===

    @property
    def size(self) -> VectorSize:
        return len(self._values)

    def get_size(self) -> VectorSize:
        return len(self._values)

    def _check_index(self, index: Any, operation: str) -> int:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise ValidationError(
                f"Vector.{operation}: index must be an integer, got {type(index).__name__}"
            )
        if not 0 <= index < len(self._values):
            raise InvalidIndexError(
                f"Vector.{operation}: {index} is not a valid index for a vector "
                f"of size {len(self._values)}",
                int(index),
            )
        return int(index)

    def at(self, index: VectorEntry) -> T:
        return self._values[self._check_index(index, 'at')]

    def set(self, index: VectorEntry, value: T) -> None:
        self._values[self._check_index(index, 'set')] = value

    def __getitem__(self, index: VectorEntry) -> T:
        return self.at(index)

    def __setitem__(self, index: VectorEntry, value: T) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def to_list(self) -> list[T]:
        return list(self._values)

    def to_array(self, dtype: Any = None) -> NDArray[Any]:
        return np.asarray(self._values, dtype=dtype)

    # === Queries ===

    def find(self, val: T, tolerance: Any = 0) -> list[VectorEntry]:
        """Indices whose value differs from val by at most tolerance, ascending."""
        return [i for i, v in enumerate(self._values) if abs(v - val) <= tolerance]

    def get_subvector(self, origin: VectorEntry, size: VectorSize) -> Vector[T]:
        """
        Subvector starting at origin.

        The size is clipped so the result never extends past this vector;
        an origin at or beyond the end gives an empty vector.
        """
        origin = check_coordinate(origin, 'origin')
        size = check_coordinate(size, 'size')
        result_size = max(0, min(size, len(self._values) - origin))
        return Vector(self._values[origin:origin + result_size])

    # === Mutation ===

    def resize(self, size: VectorSize, fill_value: Any = 0) -> None:
        """Grow (new entries take fill_value) or truncate to size."""
        size = check_coordinate(size, 'size')
        if size <= len(self._values):
            del self._values[size:]
        else:
            self._values.extend([fill_value] * (size - len(self._values)))

    def fill_with(self, value: T) -> None:
        self._values = [value] * len(self._values)

    def for_each_entry(self, action: Callable[[T, VectorEntry], T]) -> None:
        """Replace every entry with action(entry, index)."""
        for i, v in enumerate(self._values):
            self._values[i] = action(v, i)

    # === Operators ===

    def _require_same_size(self, other: Vector, operation: str) -> None:
        if len(self._values) != len(other._values):
            raise IncompatibleVectorSizesError(
                f"Vector {operation}: the vectors don't have the same size "
                f"({len(self._values)} vs {len(other._values)})",
                len(self._values),
                len(other._values),
            )

    def __pos__(self) -> Vector[T]:
        return Vector(self._values)

    def __neg__(self) -> Vector[T]:
        res = Vector(self._values)
        res.for_each_entry(lambda v, _: -v)
        return res

    def __add__(self, other: Any) -> Vector[T]:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, 'addition')
        return Vector(a + b for a, b in zip(self._values, other._values))

    def __sub__(self, other: Any) -> Vector[T]:
        if not isinstance(other, Vector):
            return NotImplemented
        self._require_same_size(other, 'subtraction')
        return Vector(a - b for a, b in zip(self._values, other._values))

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if not is_scalar(other):
            return NotImplemented
        return Vector(v * other for v in self._values)

    def __rmul__(self, other: Any) -> Vector[T]:
        if not is_scalar(other):
            return NotImplemented
        return Vector(other * v for v in self._values)

    def __truediv__(self, other: Any) -> Vector[T]:
        if not is_scalar(other):
            return NotImplemented
        return Vector(v / other for v in self._values)

    def dot(self, other: Vector[T]) -> T:
        """Inner product."""
        self._require_same_size(other, 'inner product')
        total: Any = 0
        for a, b in zip(self._values, other._values):
            total += a * b
        return total

    # Compound assignment: binary operator, then reassignment in place

    def __iadd__(self, other: Any) -> Vector[T]:
        self._values = (self + other)._values
        return self

    def __isub__(self, other: Any) -> Vector[T]:
        self._values = (self - other)._values
        return self

    def __imul__(self, other: Any) -> Any:
        result = self * other
        if not isinstance(result, Vector):
            return result
        self._values = result._values
        return self

    def __itruediv__(self, other: Any) -> Vector[T]:
        self._values = (self / other)._values
        return self

    # === Comparison and formatting ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return " ".join(str(v) for v in self._values)

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"
"""
Matrix: two-dimensional dense container stored as a list of rows.

Storage invariant: there are size.y rows and every row has size.x
elements. Only the constructors below and the in-place mutators keep
the two in step; nothing else touches _rows and _size directly.

Element access from outside goes through _check_position, the single
bound check, which raises InvalidIndicesError carrying the position.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import IncompatibleSizesError, InvalidIndicesError
from pymatrix.core.indices import (
    IndicesLike,
    MatrixEntry,
    MatrixIndices,
    MatrixSize,
    MN,
    XY,
    as_indices,
)
from pymatrix.core.validation import (
    check_coordinate,
    check_numeric_array,
    check_rows,
    is_scalar,
)
from pymatrix.vector.vector import Vector

if TYPE_CHECKING:
    from pymatrix.determinant.solution import EchelonSolution

T = TypeVar('T')
S = TypeVar('S')


class Matrix(Generic[T]):
    """
    Dense matrix of elements supporting +, -, *, / and negation.

    Positions and sizes are MatrixIndices (or plain (x, y) tuples):
    x is the column, y the row. m[x, y] reads the element in column x
    of row y.

    Construction:
        Matrix()                              0x0 matrix
        Matrix([[1, 2], [3, 4]])              validated copy of rows
        Matrix.filled(XY(3, 2), 0.0)          size + fill value
        Matrix.from_rows(rows, copy=False)    adopt the given lists
        Matrix.from_vector([1, 2], 3)         replicate as rows (or columns)
        Matrix.converted(other, float)        per-element cast
        Matrix.from_array(ndarray)
        Matrix.identity(3)
    """

    __slots__ = ('_size', '_rows')

    # Keep numpy scalars on the left from broadcasting over our elements
    __array_ufunc__ = None

    def __init__(self, rows: Sequence[Sequence[T]] | None = None):
        if rows is None:
            self._size = MatrixIndices(0, 0)
            self._rows: list[list[T]] = []
            return
        x, y = check_rows(rows, 'Matrix(rows)')
        self._size = XY(x, y)
        self._rows = [list(row) for row in rows]

    @classmethod
    def _build(cls, rows: list[list[T]], size: MatrixSize) -> Matrix[T]:
        """Wrap already-consistent storage without copying or validating."""
        mat = cls.__new__(cls)
        mat._rows = rows
        mat._size = size
        return mat

    @classmethod
    def filled(cls, size: IndicesLike, value: Any = 0) -> Matrix:
        size = as_indices(size, 'size')
        return cls._build([[value] * size.x for _ in range(size.y)], size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]], *, copy: bool = True) -> Matrix[T]:
        """
        Build from a rectangular nested sequence.

        With copy=False a list of lists is adopted as the storage after
        validation; the caller must not keep using it.

        Raises:
            InvalidRowSequenceError: If the rows differ in length
        """
        if copy or not (isinstance(rows, list) and all(isinstance(r, list) for r in rows)):
            return cls(rows)
        x, y = check_rows(rows, 'Matrix.from_rows')
        return cls._build(rows, XY(x, y))

    @classmethod
    def from_vector(
        cls,
        values: Iterable[T],
        number: int,
        as_rows: bool = True,
    ) -> Matrix[T]:
        """
        Replicate a flat sequence number times.

        With as_rows=True each row is a copy of values (size len x number);
        otherwise each column is (size number x len).
        """
        values = list(values)
        number = check_coordinate(number, 'number')
        mat = cls._build([list(values) for _ in range(number)], XY(len(values), number))
        if not as_rows:
            mat.transpose()
        return mat

    @classmethod
    def converted(cls, other: Matrix[S], cast: Callable[[S], T]) -> Matrix[T]:
        """Build from a matrix of another element type via explicit cast."""
        rows = [[cast(v) for v in row] for row in other._rows]
        return cls._build(rows, other._size.copy())

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Build from a 2D numeric array; elements become Python scalars."""
        arr = check_numeric_array(array, 2, 'array')
        n_rows, n_cols = arr.shape
        return cls._build(arr.tolist(), MN(n_rows, n_cols))

    @classmethod
    def identity(cls, n: int, one: Any = 1, zero: Any = 0) -> Matrix:
        n = check_coordinate(n, 'n')
        rows = [[one if i == j else zero for i in range(n)] for j in range(n)]
        return cls._build(rows, XY(n, n))

    # === Access ===

    @property
    def size(self) -> MatrixSize:
        """Current size (a copy; mutating it does not resize the matrix)."""
        return self._size.copy()

    def get_size(self) -> MatrixSize:
        return self._size.copy()

    def _check_position(self, pos: Any, operation: str) -> MatrixEntry:
        pos = as_indices(pos, 'pos')
        if pos.x >= self._size.x or pos.y >= self._size.y:
            raise InvalidIndicesError(
                f"Matrix.{operation}: {pos} is not a valid position for a matrix "
                f"of size {self._size}",
                pos,
            )
        return pos

    def at(self, pos: IndicesLike) -> T:
        pos = self._check_position(pos, 'at')
        return self._rows[pos.y][pos.x]

    def set(self, pos: IndicesLike, value: T) -> None:
        pos = self._check_position(pos, 'set')
        self._rows[pos.y][pos.x] = value

    def __getitem__(self, pos: IndicesLike) -> T:
        return self.at(pos)

    def __setitem__(self, pos: IndicesLike, value: T) -> None:
        self.set(pos, value)

    def rows(self) -> Iterator[list[T]]:
        """Iterate over copies of the rows, top to bottom."""
        for row in self._rows:
            yield list(row)

    def to_list(self) -> list[list[T]]:
        return [list(row) for row in self._rows]

    def to_array(self, dtype: Any = None) -> NDArray[Any]:
        """Rows as a (size.y, size.x) numpy array."""
        arr = np.asarray(self._rows, dtype=dtype)
        return arr.reshape(self._size.y, self._size.x)

    # === Queries ===

    def trace(self) -> T:
        """Sum of the diagonal; 0 for a degenerate matrix."""
        total: Any = 0
        for i in range(min(self._size.x, self._size.y)):
            total += self._rows[i][i]
        return total

    def find(self, val: T, tolerance: Any = 0) -> list[MatrixEntry]:
        """
        Positions whose value differs from val by at most tolerance.

        Scanned column by column (x outer, y inner); the returned list keeps
        that order.
        """
        found = []
        for x in range(self._size.x):
            for y in range(self._size.y):
                if abs(self._rows[y][x] - val) <= tolerance:
                    found.append(XY(x, y))
        return found

    def get_submatrix(self, origin: IndicesLike, size: IndicesLike) -> Matrix[T]:
        """
        Submatrix with its top-left corner at origin.

        The requested size is clipped per axis to what fits inside this
        matrix; an origin past the edge gives an empty extent on that axis.
        """
        origin = as_indices(origin, 'origin')
        size = as_indices(size, 'size')
        sub_x = max(0, min(size.x, self._size.x - origin.x))
        sub_y = max(0, min(size.y, self._size.y - origin.y))
        rows = [
            row[origin.x:origin.x + sub_x]
            for row in self._rows[origin.y:origin.y + sub_y]
        ]
        return Matrix._build(rows, XY(sub_x, sub_y))

    def get_transposed(self) -> Matrix[T]:
        size = self._size.copy()
        size.flip()
        rows = [[self._rows[y][x] for y in range(self._size.y)] for x in range(self._size.x)]
        return Matrix._build(rows, size)

    # === Mutation ===

    def transpose(self) -> None:
        self._assign(self.get_transposed())

    def resize(self, size: IndicesLike, fill_value: Any = 0) -> None:
        """
        Grow or shrink to size.

        Existing elements keep their positions; new cells take fill_value;
        trailing rows and columns are discarded when shrinking.
        """
        size = as_indices(size, 'size')
        rows = []
        for row in self._rows[:size.y]:
            if size.x <= len(row):
                rows.append(row[:size.x])
            else:
                rows.append(row + [fill_value] * (size.x - len(row)))
        for _ in range(size.y - len(rows)):
            rows.append([fill_value] * size.x)
        self._rows = rows
        self._size = size

    def fill_with(self, value: T) -> None:
        self._rows = [[value] * self._size.x for _ in range(self._size.y)]

    def for_each_entry(self, action: Callable[[T, MatrixEntry], T]) -> None:
        """Replace every entry with action(entry, position), row by row."""
        for y, row in enumerate(self._rows):
            for x, v in enumerate(row):
                row[x] = action(v, XY(x, y))

    def _assign(self, other: Matrix[T]) -> None:
        self._rows = other._rows
        self._size = other._size

    # === Row primitives (row-echelon reduction only) ===

    def _check_row(self, row: int, operation: str) -> int:
        row = check_coordinate(row, f"Matrix.{operation}: row")
        if row >= self._size.y:
            raise InvalidIndicesError(
                f"Matrix.{operation}: row {row} is out of range for a matrix "
                f"of size {self._size}",
                XY(0, row),
            )
        return row

    def _swap_rows(self, row1: int, row2: int) -> None:
        row1 = self._check_row(row1, '_swap_rows')
        row2 = self._check_row(row2, '_swap_rows')
        self._rows[row1], self._rows[row2] = self._rows[row2], self._rows[row1]

    def _multiply_row_by(self, row: int, factor: Any) -> None:
        row = self._check_row(row, '_multiply_row_by')
        self._rows[row] = [v * factor for v in self._rows[row]]

    def _subtract_rows(self, minuend: int, subtrahend: int) -> None:
        """row[minuend] -= row[subtrahend], elementwise."""
        minuend = self._check_row(minuend, '_subtract_rows')
        subtrahend = self._check_row(subtrahend, '_subtract_rows')
        source = self._rows[subtrahend]
        self._rows[minuend] = [a - b for a, b in zip(self._rows[minuend], source)]

    # === Determinant ===

    def row_echelon_form(self, backend: str = 'auto') -> EchelonSolution:
        """Row-echelon reduction of a float copy; see pymatrix.determinant."""
        from pymatrix.determinant.solvers import row_echelon
        return row_echelon(self, backend=backend)

    def det(self, backend: str = 'auto') -> float:
        """Determinant; 0.0 for non-square or 0x0 matrices."""
        from pymatrix.determinant.solvers import det
        return det(self, backend=backend)

    # === Operators ===

    def _require_same_size(self, other: Matrix, operation: str) -> None:
        if self._size != other._size:
            raise IncompatibleSizesError(
                f"Matrix {operation}: sizes {self._size} and {other._size} differ",
                self._size.copy(),
                other._size.copy(),
            )

    def _map(self, fn: Callable[[T], Any]) -> Matrix:
        return Matrix._build([[fn(v) for v in row] for row in self._rows], self._size.copy())

    def __pos__(self) -> Matrix[T]:
        return self._map(lambda v: v)

    def __neg__(self) -> Matrix[T]:
        return self._map(lambda v: -v)

    def __add__(self, other: Any) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other, 'addition')
        rows = [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        return Matrix._build(rows, self._size.copy())

    def __sub__(self, other: Any) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other, 'subtraction')
        rows = [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        return Matrix._build(rows, self._size.copy())

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._matvec(other)
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda v: v * other)

    def __rmul__(self, other: Any) -> Matrix[T]:
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda v: other * v)

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._matvec(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix[T]:
        if not is_scalar(other):
            return NotImplemented
        return self._map(lambda v: v / other)

    def _matmul(self, other: Matrix[T]) -> Matrix[T]:
        if self._size.n != other._size.m:
            raise IncompatibleSizesError(
                f"Matrix product: inner dimensions differ ({self._size.mn()} times "
                f"{other._size.mn()} as (rows, columns))",
                self._size.copy(),
                other._size.copy(),
            )
        inner = self._size.n
        rows = []
        for i in range(self._size.m):
            left = self._rows[i]
            row = []
            for j in range(other._size.n):
                total: Any = 0
                for k in range(inner):
                    total += left[k] * other._rows[k][j]
                row.append(total)
            rows.append(row)
        return Matrix._build(rows, MN(self._size.m, other._size.n))

    def _matvec(self, vec: Vector[T]) -> Vector[T]:
        if self._size.x != vec.size:
            raise IncompatibleSizesError(
                f"Matrix-vector product: matrix has {self._size.x} columns, "
                f"vector has {vec.size} entries",
                self._size.copy(),
                XY(1, vec.size),
            )
        values = vec.to_list()
        result = []
        for row in self._rows:
            total: Any = 0
            for a, b in zip(row, values):
                total += a * b
            result.append(total)
        return Vector.from_values(result, copy=False)

    # Compound assignment: binary operator, then reassignment in place

    def __iadd__(self, other: Any) -> Matrix[T]:
        self._assign(self + other)
        return self

    def __isub__(self, other: Any) -> Matrix[T]:
        self._assign(self - other)
        return self

    def __imul__(self, other: Any) -> Any:
        result = self * other
        if not isinstance(result, Matrix):
            return result
        self._assign(result)
        return self

    def __itruediv__(self, other: Any) -> Matrix[T]:
        self._assign(self / other)
        return self

    # === Comparison and formatting ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._size == other._size and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix(size={self._size}, rows={self._rows!r})"

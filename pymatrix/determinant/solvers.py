"""
Solver dispatch for row-echelon reduction and determinants.

Public entry points: row_echelon() and det(). Both convert the input to
float working precision before eliminating; the input matrix is never
modified.
"""

from __future__ import annotations

from typing import Literal
import math
import warnings

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.indices import XY
from pymatrix.core.protocols import Backend
from pymatrix.core.validation import check_choice
from pymatrix.determinant.backends.reference import ReferenceEchelonBackend
from pymatrix.determinant.backends.vectorized import VectorizedEchelonBackend
from pymatrix.determinant.solution import EchelonSolution
from pymatrix.matrix.matrix import Matrix


BackendChoice = Literal['auto', 'python', 'numpy']

BACKEND_CHOICES: tuple[str, ...] = ('auto', 'python', 'numpy')

# 'auto' uses the vectorized backend from this many rows up. Below it the
# per-column ndarray overhead outweighs the row loop. Both backends give
# identical results, so the switch is invisible apart from timing.
AUTO_VECTORIZE_MIN_ROWS = 16


def _get_backend(backend: BackendChoice, matrix: Matrix) -> Backend:
    """Select backend based on preference."""
    check_choice(backend, BACKEND_CHOICES, 'backend')

    if backend == 'python':
        return ReferenceEchelonBackend()
    if backend == 'numpy':
        return VectorizedEchelonBackend()

    if matrix.get_size().y >= AUTO_VECTORIZE_MIN_ROWS:
        return VectorizedEchelonBackend()
    return ReferenceEchelonBackend()


def _check_elements(matrix: Matrix) -> None:
    non_finite = False
    for y, row in enumerate(matrix.rows()):
        for x, value in enumerate(row):
            try:
                as_float = float(value)
            except OverflowError as e:
                raise ValidationError(
                    f"row_echelon: element {XY(x, y)} ({type(value).__name__}) "
                    f"is too large for a float"
                ) from e
            if not math.isfinite(as_float):
                non_finite = True
    if non_finite:
        warnings.warn(
            "Matrix contains NaN or Inf; row-echelon reduction result is undefined",
            RuntimeWarning,
            stacklevel=3,
        )


def row_echelon(
    matrix: Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> EchelonSolution:
    """
    Reduce a float copy of matrix to row-echelon form.

    For each column x (up to the last row), in order:

    1. Zero-sorting: for each row y >= x whose entry in column x is exactly
       0.0, swap it with the first later row whose entry is nonzero and
       negate the factor product. This is a first-nonzero search, not a
       largest-magnitude pivot search.
    2. Elimination: if the pivot (x, x) is nonzero, every later row y with
       a nonzero entry in column x is scaled by pivot / entry and then has
       row x subtracted from it; the factor product is multiplied by the
       same multiplier.

    Zero tests are exact comparisons with 0.0.

    Parameters
    ----------
    matrix : Matrix
        Any matrix whose elements convert with float().
    backend : str
        'auto', 'python', 'numpy'.

    Returns
    -------
    EchelonSolution with the reduced form, factor product and determinant.

    Raises
    ------
    ValidationError
        If matrix is not a Matrix, backend is unknown, or an element is
        too large to convert to float.
    """
    if not isinstance(matrix, Matrix):
        raise ValidationError(
            f"row_echelon: expected Matrix, got {type(matrix).__name__}"
        )
    be = _get_backend(backend, matrix)
    _check_elements(matrix)
    return EchelonSolution(_result=be.solve(matrix))


def det(
    matrix: Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> float:
    """
    Determinant via row-echelon reduction.

    Returns 0.0 for a non-square or 0x0 matrix without running the
    elimination.

    If a row-scaling multiplier underflows to 0.0 the factor product is
    zero and the result is nan or a signed inf, as IEEE division gives;
    the reduction's warnings record it.

    Parameters
    ----------
    matrix : Matrix
    backend : str
        'auto', 'python', 'numpy'.
    """
    if not isinstance(matrix, Matrix):
        raise ValidationError(f"det: expected Matrix, got {type(matrix).__name__}")
    check_choice(backend, BACKEND_CHOICES, 'backend')
    size = matrix.get_size()
    if size.x != size.y or size.x == 0:
        return 0.0
    return row_echelon(matrix, backend=backend).determinant

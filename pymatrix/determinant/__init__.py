"""
Determinants by Gaussian elimination.

Public API:
    row_echelon(matrix, ...) -> EchelonSolution
    det(matrix, ...)         -> float

Example:
    >>> from pymatrix import Matrix
    >>> from pymatrix.determinant import det
    >>> det(Matrix([[0, 1], [1, 0]]))
    -1.0
"""

from pymatrix.determinant.solution import EchelonParams, EchelonSolution
from pymatrix.determinant.solvers import det, row_echelon

__all__ = [
    "det",
    "row_echelon",
    "EchelonParams",
    "EchelonSolution",
]

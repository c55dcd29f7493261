"""
Dense matrices.

Public API:
    Matrix          two-dimensional container, operators, det()

Example:
    >>> from pymatrix.matrix import Matrix
    >>> a = Matrix([[1, 2], [3, 4]])
    >>> print(a * Matrix([[5, 6], [7, 8]]))
    19 22
    43 50
"""

from pymatrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]

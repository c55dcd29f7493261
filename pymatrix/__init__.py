"""
pymatrix: dense generic matrices and vectors for Python.

Element types are anything supporting +, -, *, / and negation (int, float,
Fraction, Decimal, NumPy scalars). Determinants are computed in float
working precision by Gaussian elimination.

Submodules:
    core: indices, exceptions, validation, result envelope
    vector: Vector container
    matrix: Matrix container
    determinant: row-echelon reduction and det()
"""

__version__ = "0.1.0"

from pymatrix.core.indices import MatrixIndices, MatrixSize, MatrixEntry, XY, MN
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidIndicesError,
    InvalidIndexError,
    InvalidRowSequenceError,
    DimensionError,
    IncompatibleSizesError,
    IncompatibleVectorSizesError,
)
from pymatrix.vector import Vector
from pymatrix.matrix import Matrix
from pymatrix.determinant import det, row_echelon

__all__ = [
    "__version__",
    # Indices
    "MatrixIndices",
    "MatrixSize",
    "MatrixEntry",
    "XY",
    "MN",
    # Containers
    "Vector",
    "Matrix",
    # Determinant
    "det",
    "row_echelon",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidIndicesError",
    "InvalidIndexError",
    "InvalidRowSequenceError",
    "DimensionError",
    "IncompatibleSizesError",
    "IncompatibleVectorSizesError",
]

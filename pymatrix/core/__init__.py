"""
Core infrastructure for pymatrix.

This module provides the shared abstractions used by the vector, matrix
and determinant subpackages.

Key components:
    indices: MatrixIndices (x/y and m/n views of one pair)
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] envelope
    protocols: Backend protocol
    compute: Timing and tolerance tiers
"""

from pymatrix.core.indices import (
    MatrixIndices,
    MatrixSize,
    MatrixEntry,
    XY,
    MN,
)
from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
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

__all__ = [
    # Indices
    "MatrixIndices",
    "MatrixSize",
    "MatrixEntry",
    "XY",
    "MN",
    # Protocols
    "Backend",
    # Result
    "Result",
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

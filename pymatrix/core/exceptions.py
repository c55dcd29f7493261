"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Container-specific exceptions inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the operation and the actual values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.core.indices import MatrixIndices


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks that are not
    covered by a more specific error below (negative coordinates, unknown
    backend names, non-numeric arrays).
    """
    pass


class InvalidIndicesError(ValidationError, IndexError):
    """
    A matrix position lies outside the current bounds.

    Attributes:
        indices: The offending position, as MatrixIndices
    """

    def __init__(self, message: str, indices: MatrixIndices):
        super().__init__(message)
        self.indices = indices


class InvalidIndexError(ValidationError, IndexError):
    """
    A vector position lies outside the current bounds.

    Attributes:
        index: The offending position
    """

    def __init__(self, message: str, index: int):
        super().__init__(message)
        self.index = index


class InvalidRowSequenceError(ValidationError, ValueError):
    """
    Rows handed to a matrix constructor do not all have the same length.

    Attributes:
        expected_length: Length of the first row
        row_index: Index of the first row whose length differs, if known
        row_length: Length of that row, if known
    """

    def __init__(
        self,
        message: str,
        expected_length: int | None = None,
        row_index: int | None = None,
        row_length: int | None = None,
    ):
        super().__init__(message)
        self.expected_length = expected_length
        self.row_index = row_index
        self.row_length = row_length


class DimensionError(ValidationError):
    """
    Operand sizes are inconsistent.

    Base class for the size-compatibility errors of binary operations.
    """
    pass


class IncompatibleSizesError(DimensionError):
    """
    Two matrix operands (or a matrix and a vector) have incompatible sizes.

    Attributes:
        size1: Size of the left operand
        size2: Size of the right operand (a vector of length n is reported
               as a single-column size, x=1, y=n)
    """

    def __init__(self, message: str, size1: MatrixIndices, size2: MatrixIndices):
        super().__init__(message)
        self.size1 = size1
        self.size2 = size2


class IncompatibleVectorSizesError(DimensionError):
    """
    Two vector operands have different lengths.

    Attributes:
        size1: Length of the left operand
        size2: Length of the right operand
    """

    def __init__(self, message: str, size1: int, size2: int):
        super().__init__(message)
        self.size1 = size1
        self.size2 = size2

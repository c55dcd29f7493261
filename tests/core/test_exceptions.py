"""
Tests for the pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Index errors are also builtin IndexError, row errors ValueError
    - Diagnostic attributes carry the offending values
"""

import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    IncompatibleSizesError,
    IncompatibleVectorSizesError,
    InvalidIndexError,
    InvalidIndicesError,
    InvalidRowSequenceError,
    PyMatrixError,
    ValidationError,
)
from pymatrix.core.indices import XY


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    @pytest.mark.parametrize("exc", [
        ValidationError("bad"),
        DimensionError("bad"),
        InvalidIndicesError("bad", XY(0, 0)),
        InvalidIndexError("bad", 0),
        InvalidRowSequenceError("bad"),
        IncompatibleSizesError("bad", XY(1, 1), XY(2, 2)),
        IncompatibleVectorSizesError("bad", 1, 2),
    ])
    def test_is_pymatrix_error(self, exc):
        assert isinstance(exc, PyMatrixError)
        assert isinstance(exc, ValidationError)

    def test_invalid_indices_is_index_error(self):
        with pytest.raises(IndexError):
            raise InvalidIndicesError("out of range", XY(3, 0))

    def test_invalid_index_is_index_error(self):
        with pytest.raises(IndexError):
            raise InvalidIndexError("out of range", 3)

    def test_invalid_rows_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidRowSequenceError("ragged")

    def test_size_errors_are_dimension_errors(self):
        assert isinstance(IncompatibleSizesError("x", XY(1, 1), XY(2, 2)), DimensionError)
        assert isinstance(IncompatibleVectorSizesError("x", 1, 2), DimensionError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_invalid_indices_payload(self):
        err = InvalidIndicesError("at: (2, 0) invalid", XY(2, 0))
        assert str(err) == "at: (2, 0) invalid"
        assert err.indices == XY(2, 0)

    def test_invalid_index_payload(self):
        err = InvalidIndexError("at: 4 invalid", 4)
        assert err.index == 4

    def test_invalid_rows_defaults_are_none(self):
        err = InvalidRowSequenceError("ragged")
        assert err.expected_length is None
        assert err.row_index is None
        assert err.row_length is None

    def test_invalid_rows_payload(self):
        err = InvalidRowSequenceError("ragged", expected_length=2, row_index=1, row_length=1)
        assert err.expected_length == 2
        assert err.row_index == 1
        assert err.row_length == 1

    def test_incompatible_sizes_payload(self):
        err = IncompatibleSizesError("mismatch", XY(2, 2), XY(3, 3))
        assert err.size1 == XY(2, 2)
        assert err.size2 == XY(3, 3)

    def test_incompatible_vector_sizes_payload(self):
        with pytest.raises(IncompatibleVectorSizesError) as exc_info:
            raise IncompatibleVectorSizesError("mismatch", 2, 5)
        assert exc_info.value.size1 == 2
        assert exc_info.value.size2 == 5

"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_coordinate: unsigned integer components
    - check_rows: rectangularity and size hand-back
    - check_numeric_array: dtype and rank checks
    - check_choice: option strings
    - is_scalar: operands accepted by the scalar operators
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.exceptions import InvalidRowSequenceError, ValidationError
from pymatrix.core.validation import (
    check_choice,
    check_coordinate,
    check_numeric_array,
    check_rows,
    is_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_coordinate
# ═══════════════════════════════════════════════════════════════════════


class TestCheckCoordinate:

    def test_zero_accepted(self):
        assert check_coordinate(0, "x") == 0

    def test_numpy_integer_becomes_int(self):
        result = check_coordinate(np.int32(7), "x")
        assert result == 7
        assert type(result) is int

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="x: expected a non-negative integer, got -1"):
            check_coordinate(-1, "x")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="str"):
            check_coordinate("1", "x")


# ═══════════════════════════════════════════════════════════════════════
# check_rows
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRows:

    def test_empty_is_zero_by_zero(self):
        assert check_rows([], "rows") == (0, 0)

    def test_rectangular(self):
        assert check_rows([[1, 2, 3], [4, 5, 6]], "rows") == (3, 2)

    def test_rows_of_empty_rows(self):
        assert check_rows([[], []], "rows") == (0, 2)

    def test_short_row_rejected(self):
        with pytest.raises(InvalidRowSequenceError) as exc_info:
            check_rows([[1, 2], [3]], "rows")
        assert exc_info.value.expected_length == 2
        assert exc_info.value.row_index == 1
        assert exc_info.value.row_length == 1

    def test_long_row_rejected(self):
        with pytest.raises(InvalidRowSequenceError, match="row 2 has 3"):
            check_rows([[1, 2], [3, 4], [5, 6, 7]], "rows")

    def test_tuples_accepted(self):
        assert check_rows(((1, 2), (3, 4)), "rows") == (2, 2)


# ═══════════════════════════════════════════════════════════════════════
# check_numeric_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNumericArray:

    def test_int_dtype_preserved(self):
        result = check_numeric_array([[1, 2], [3, 4]], 2, "array")
        assert np.issubdtype(result.dtype, np.integer)

    def test_wrong_rank(self):
        with pytest.raises(ValidationError, match="expected 2D array, got 1D"):
            check_numeric_array([1, 2, 3], 2, "array")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_numeric_array(["a", "b"], 1, "array")

    def test_object_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_numeric_array(np.array([None, 1], dtype=object), 1, "array")


class TestCheckChoice:

    def test_valid(self):
        assert check_choice("numpy", ("auto", "numpy"), "backend") == "numpy"

    def test_invalid_lists_choices(self):
        with pytest.raises(ValidationError, match="Unknown backend: 'gpu'"):
            check_choice("gpu", ("auto", "numpy"), "backend")


# ═══════════════════════════════════════════════════════════════════════
# is_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestIsScalar:

    @pytest.mark.parametrize("value", [
        2, 2.5, 1j, Fraction(1, 3), Decimal("1.5"), np.float64(2.0), np.int32(3),
    ])
    def test_numbers(self, value):
        assert is_scalar(value)

    @pytest.mark.parametrize("value", [[1, 2], (1,), "2", None, np.array([1.0])])
    def test_non_numbers(self, value):
        assert not is_scalar(value)

"""
Tests for Matrix construction forms.

Validates:
    - Default, filled, row-sequence (copy and adopt), replicated vector,
      converted, numpy and identity constructors
    - Row-sequence validation (InvalidRowSequenceError)
    - Storage invariant: size.y rows of size.x elements
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix import XY, Matrix
from pymatrix.core.exceptions import InvalidRowSequenceError, ValidationError


def assert_invariant(mat):
    """Every row has size.x elements and there are size.y rows."""
    rows = mat.to_list()
    size = mat.get_size()
    assert len(rows) == size.y
    assert all(len(row) == size.x for row in rows)


# ═══════════════════════════════════════════════════════════════════════
# Construction forms
# ═══════════════════════════════════════════════════════════════════════


class TestDefault:

    def test_zero_by_zero(self):
        mat = Matrix()
        assert mat.size == XY(0, 0)
        assert mat.to_list() == []

    def test_empty_rows(self):
        mat = Matrix([])
        assert mat.size == XY(0, 0)


class TestFromRows:

    def test_size_from_rows(self):
        mat = Matrix([[1, 2], [3, 4], [5, 6]])
        assert mat.size == XY(2, 3)
        assert mat.size.m == 3
        assert mat.size.n == 2
        assert_invariant(mat)

    def test_copies_input(self):
        rows = [[1, 2], [3, 4]]
        mat = Matrix(rows)
        rows[0][0] = 99
        assert mat.at((0, 0)) == 1

    def test_ragged_rows_rejected(self):
        with pytest.raises(InvalidRowSequenceError) as exc_info:
            Matrix([[1, 2], [3]])
        assert exc_info.value.row_index == 1

    def test_adopt_without_copy(self):
        rows = [[1, 2], [3, 4]]
        mat = Matrix.from_rows(rows, copy=False)
        assert mat.to_list() == [[1, 2], [3, 4]]
        assert mat.size == XY(2, 2)

    def test_adopt_still_validates(self):
        with pytest.raises(InvalidRowSequenceError):
            Matrix.from_rows([[1], [2, 3]], copy=False)

    def test_from_rows_of_tuples(self):
        mat = Matrix.from_rows(((1, 2), (3, 4)), copy=False)
        assert mat.to_list() == [[1, 2], [3, 4]]


class TestFilled:

    def test_size_and_value(self):
        mat = Matrix.filled(XY(3, 2), 7)
        assert mat.to_list() == [[7, 7, 7], [7, 7, 7]]
        assert_invariant(mat)

    def test_default_fill_is_zero(self):
        assert Matrix.filled((2, 1)).to_list() == [[0, 0]]

    def test_rows_are_independent(self):
        mat = Matrix.filled(XY(2, 2))
        mat.set((0, 0), 1)
        assert mat.at((0, 1)) == 0


class TestFromVector:

    def test_as_rows(self):
        mat = Matrix.from_vector([1, 2, 3], 2)
        assert mat.to_list() == [[1, 2, 3], [1, 2, 3]]
        assert mat.size == XY(3, 2)

    def test_as_columns(self):
        mat = Matrix.from_vector([1, 2, 3], 2, as_rows=False)
        assert mat.to_list() == [[1, 1], [2, 2], [3, 3]]
        assert mat.size == XY(2, 3)
        assert_invariant(mat)

    def test_zero_copies(self):
        assert Matrix.from_vector([1, 2], 0).size == XY(2, 0)


class TestConverted:

    def test_int_to_float(self):
        mat = Matrix.converted(Matrix([[1, 2]]), float)
        assert mat.to_list() == [[1.0, 2.0]]
        assert type(mat.at((0, 0))) is float

    def test_float_to_int_truncates(self):
        mat = Matrix.converted(Matrix([[1.9, -2.7]]), int)
        assert mat.to_list() == [[1, -2]]

    def test_to_fraction(self):
        mat = Matrix.converted(Matrix([[1, 2]]), Fraction)
        assert mat.at((1, 0)) == Fraction(2)

    def test_keeps_degenerate_size(self):
        assert Matrix.converted(Matrix([[], []]), float).size == XY(0, 2)


class TestNumpyInterop:

    def test_from_array(self):
        mat = Matrix.from_array(np.arange(6).reshape(2, 3))
        assert mat.size == XY(3, 2)
        assert mat.at((2, 1)) == 5
        assert type(mat.at((2, 1))) is int

    def test_from_empty_array_keeps_columns(self):
        mat = Matrix.from_array(np.zeros((0, 3)))
        assert mat.size == XY(3, 0)

    def test_from_array_rejects_1d(self):
        with pytest.raises(ValidationError, match="expected 2D"):
            Matrix.from_array(np.zeros(3))

    def test_to_array(self):
        arr = Matrix([[1, 2, 3], [4, 5, 6]]).to_array(dtype=np.float64)
        assert arr.shape == (2, 3)
        np.testing.assert_array_equal(arr, [[1, 2, 3], [4, 5, 6]])

    def test_to_array_degenerate(self):
        assert Matrix().to_array().shape == (0, 0)


class TestIdentity:

    def test_identity(self):
        assert Matrix.identity(3).to_list() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

    def test_identity_zero(self):
        assert Matrix.identity(0).size == XY(0, 0)

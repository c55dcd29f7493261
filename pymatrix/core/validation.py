"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidRowSequenceError, ValidationError


def check_coordinate(value: Any, name: str) -> int:
    """
    Validate a single coordinate or size component.

    Coordinates are unsigned: any integer (Python or NumPy) that is not
    negative is accepted. Booleans are rejected even though they are ints.

    Args:
        value: Component to validate
        name: Parameter name for error messages

    Returns:
        The component as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {value}")
    return int(value)


def check_rows(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a nested sequence is rectangular and hand back its size.

    The candidate size is taken from the first row's length and the row
    count. An empty sequence of rows is always valid and has size (0, 0).

    Args:
        rows: Sequence of rows
        name: Parameter name for error messages

    Returns:
        (x, y): row length and row count

    Raises:
        InvalidRowSequenceError: If any row's length differs from the first
    """
    if len(rows) == 0:
        return 0, 0

    expected = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != expected:
            raise InvalidRowSequenceError(
                f"{name}: rows have different lengths (row 0 has {expected}, "
                f"row {i} has {len(row)}); construction failed",
                expected_length=expected,
                row_index=i,
                row_length=len(row),
            )
    return expected, len(rows)


def check_numeric_array(array: ArrayLike, ndim: int, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array of given rank.

    Args:
        array: Input to validate
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype (dtype preserved)

    Raises:
        ValidationError: If input is non-numeric or has the wrong rank
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged rows"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim != ndim:
        raise ValidationError(
            f"{name}: expected {ndim}D array, got {result.ndim}D with shape {result.shape}"
        )

    return result


def is_scalar(value: Any) -> bool:
    """
    Whether value multiplies a container entrywise.

    Any numbers.Number qualifies, which covers int, float, complex,
    Fraction, Decimal and the NumPy scalar types. Sequences and arrays do
    not, so the operators hand them back with NotImplemented.
    """
    return isinstance(value, numbers.Number)


def check_choice(value: str, choices: tuple[str, ...], name: str) -> str:
    """
    Verify a string option is one of the allowed choices.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise ValidationError(f"Unknown {name}: {value!r}. Must be one of {allowed}.")
    return value

"""
Row-echelon reduction solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pymatrix.core.compute.tolerances import FP64, ToleranceTier
from pymatrix.core.result import Result
from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class EchelonParams:
    """
    Parameter payload for row-echelon reduction.

    Attributes:
        form: Reduced copy of the input, same size, float elements
        product_of_gauss_factors: Product of every row-scaling multiplier,
            negated once per row swap; seeded at 1.0
        n_swaps: Number of row swaps performed
        singular_columns: Columns (within the pivot range) whose pivot
            stayed zero after the zero-sorting pass
    """
    form: Matrix[float]
    product_of_gauss_factors: float
    n_swaps: int
    singular_columns: tuple[int, ...]


@dataclass
class EchelonSolution:
    """
    User-facing row-echelon reduction results.

    Wraps Result[EchelonParams] and derives the determinant:

        det(A) = product(diagonal of U) / product_of_gauss_factors

    Each scale-then-subtract step multiplies det by the multiplier that is
    divided back out here; each swap flips the sign, which the factor
    product tracks as -1.
    """
    _result: Result[EchelonParams]

    @property
    def form(self) -> Matrix[float]:
        """The row-echelon form (the solution's own copy)."""
        return self._result.params.form

    @property
    def product_of_gauss_factors(self) -> float:
        return self._result.params.product_of_gauss_factors

    @property
    def n_swaps(self) -> int:
        return self._result.params.n_swaps

    @property
    def singular_columns(self) -> tuple[int, ...]:
        return self._result.params.singular_columns

    @property
    def is_square(self) -> bool:
        size = self.form.get_size()
        return size.x == size.y

    @property
    def diagonal(self) -> list[float]:
        size = self.form.get_size()
        return [self.form.at((i, i)) for i in range(min(size.x, size.y))]

    @property
    def determinant(self) -> float:
        """
        Determinant of the original matrix; 0.0 if non-square or 0x0.

        The final division follows IEEE 754: if the factor product has
        underflowed to zero the result is a signed inf, or nan when the
        diagonal product is zero as well.
        """
        size = self.form.get_size()
        if size.x != size.y or size.x == 0:
            return 0.0
        product = 1.0
        for value in self.diagonal:
            product *= value
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(product) / np.float64(self.product_of_gauss_factors))

    def is_singular(self, tier: ToleranceTier = FP64) -> bool:
        """
        Whether the determinant is zero within tier.atol.

        Non-square matrices count as singular.
        """
        if not self.is_square:
            return True
        if self.singular_columns:
            return True
        return abs(self.determinant) <= tier.atol

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        size = self.form.get_size()
        lines = [
            "Row-echelon reduction",
            f"  size:            {size.mn()[0]} x {size.mn()[1]} (rows x columns)",
            f"  backend:         {self.backend_name}",
            f"  row swaps:       {self.n_swaps}",
            f"  factor product:  {self.product_of_gauss_factors:.6g}",
        ]
        if self.is_square and size.x > 0:
            lines.append(f"  determinant:     {self.determinant:.6g}")
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        lines.append("")
        lines.append(str(self.form))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EchelonSolution(size={self.form.get_size()}, "
            f"n_swaps={self.n_swaps}, backend={self.backend_name!r})"
        )

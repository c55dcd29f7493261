"""
NumPy backend for row-echelon reduction.

Same algorithm as the reference backend: same first-nonzero pivot
search, same multiplier (pivot / entry), same scale-then-subtract order.
Each element sees the same IEEE operations in the same sequence, so the
two backends agree bit for bit. Only the per-column elimination is
vectorized across rows; the factor product is still accumulated row by
row, top to bottom.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.determinant.backends.reference import _reduction_warnings
from pymatrix.determinant.solution import EchelonParams
from pymatrix.matrix.matrix import Matrix


class VectorizedEchelonBackend:
    """Gaussian elimination on a float64 ndarray."""

    @property
    def name(self) -> str:
        return 'numpy_echelon'

    def solve(self, matrix: Matrix) -> Result[EchelonParams]:
        timer = Timer()
        timer.start()

        a = matrix.to_array(dtype=np.float64).copy()
        n_rows, n_cols = a.shape
        product = 1.0
        n_swaps = 0
        singular_columns = []

        for x in range(min(n_rows, n_cols)):
            with timer.section('pivot_search'):
                for y in range(x, n_rows):
                    if a[y, x] == 0.0:
                        nonzero = np.flatnonzero(a[y + 1:, x] != 0.0)
                        if nonzero.size:
                            n = y + 1 + int(nonzero[0])
                            a[[y, n]] = a[[n, y]]
                            product *= -1.0
                            n_swaps += 1

            with timer.section('elimination'):
                pivot = a[x, x]
                if pivot == 0.0:
                    singular_columns.append(x)
                    continue
                below = x + 1 + np.flatnonzero(a[x + 1:, x] != 0.0)
                if below.size:
                    multipliers = pivot / a[below, x]
                    a[below] *= multipliers[:, np.newaxis]
                    a[below] -= a[x]
                    for multiplier in multipliers:
                        product *= float(multiplier)

        timer.stop()

        return Result(
            params=EchelonParams(
                form=Matrix.from_array(a),
                product_of_gauss_factors=float(product),
                n_swaps=n_swaps,
                singular_columns=tuple(singular_columns),
            ),
            info={
                'method': 'gauss_first_nonzero',
                'shape': (n_rows, n_cols),
                'n_swaps': n_swaps,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=_reduction_warnings(singular_columns, product),
        )

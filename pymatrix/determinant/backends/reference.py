"""
Reference backend for row-echelon reduction.

Pure Python on a Matrix[float]: every element read goes through
Matrix.at and every row operation through the Matrix row primitives,
so any index slip surfaces as InvalidIndicesError instead of a silent
wrong answer.
"""

from __future__ import annotations

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.core.indices import XY
from pymatrix.determinant.solution import EchelonParams
from pymatrix.matrix.matrix import Matrix


class ReferenceEchelonBackend:
    """Row-by-row Gaussian elimination with first-nonzero pivot search."""

    @property
    def name(self) -> str:
        return 'python_echelon'

    def solve(self, matrix: Matrix) -> Result[EchelonParams]:
        timer = Timer()
        timer.start()

        form = Matrix.converted(matrix, float)
        size = form.get_size()
        product = 1.0
        n_swaps = 0
        singular_columns = []

        # Past the last row there is nothing left to eliminate
        for x in range(min(size.x, size.y)):
            with timer.section('pivot_search'):
                for y in range(x, size.y):
                    if form.at(XY(x, y)) == 0.0:
                        for n in range(y + 1, size.y):
                            if form.at(XY(x, n)) != 0.0:
                                form._swap_rows(y, n)
                                product *= -1.0
                                n_swaps += 1
                                break

            with timer.section('elimination'):
                pivot = form.at(XY(x, x))
                if pivot == 0.0:
                    singular_columns.append(x)
                    continue
                for y in range(x + 1, size.y):
                    value = form.at(XY(x, y))
                    if value != 0.0:
                        multiplier = pivot / value
                        form._multiply_row_by(y, multiplier)
                        form._subtract_rows(y, x)
                        product *= multiplier

        timer.stop()

        return Result(
            params=EchelonParams(
                form=form,
                product_of_gauss_factors=product,
                n_swaps=n_swaps,
                singular_columns=tuple(singular_columns),
            ),
            info={
                'method': 'gauss_first_nonzero',
                'shape': size.mn(),
                'n_swaps': n_swaps,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=_reduction_warnings(singular_columns, product),
        )


def _reduction_warnings(columns: list[int], product: float) -> tuple[str, ...]:
    messages = [
        f"column {x} has no nonzero pivot: matrix is singular" for x in columns
    ]
    if product == 0.0:
        messages.append(
            "product of Gauss factors underflowed to 0.0: determinant is not representable"
        )
    return tuple(messages)

"""
Row-echelon reduction backends.

    reference: pure Python through the Matrix API ('python')
    vectorized: float64 ndarray ('numpy')
"""

from pymatrix.determinant.backends.reference import ReferenceEchelonBackend
from pymatrix.determinant.backends.vectorized import VectorizedEchelonBackend

__all__ = [
    "ReferenceEchelonBackend",
    "VectorizedEchelonBackend",
]

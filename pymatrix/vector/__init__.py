"""
Dense vectors.

Public API:
    Vector              one-dimensional container
    VectorIndex         int alias for positions and sizes
"""

from pymatrix.vector.vector import Vector, VectorIndex, VectorSize, VectorEntry

__all__ = [
    "Vector",
    "VectorIndex",
    "VectorSize",
    "VectorEntry",
]

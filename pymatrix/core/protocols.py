"""
Core protocols for pymatrix.

We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look right, not inherit from anything.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pymatrix.core.result import Result

D = TypeVar('D', contravariant=True)  # Input type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes an input container and produces a Result[P].
    Backends for the same algorithm must agree on the output exactly
    when they perform the same floating-point operations in the same order.
    """

    @property
    def name(self) -> str:
        """
        Unique identifier for this backend.

        Examples: 'python_echelon', 'numpy_echelon'
        """
        ...

    def solve(self, data: D) -> Result[P]:
        """
        Run the computation.

        Args:
            data: The input container

        Returns:
            Result envelope containing the payload and metadata
        """
        ...

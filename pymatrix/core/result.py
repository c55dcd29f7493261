"""
Generic result container for pymatrix computations.

The Result class provides a standardized envelope for algorithm outputs
(currently the row-echelon reduction). It carries timing, backend identity
and non-fatal warnings alongside the domain-specific payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, shape, swap count)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The algorithm-specific payload type

    Attributes:
        params: Algorithm-specific payload (reduced matrix, factors, etc.)
        info: Structured metadata (method, shape, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EchelonParams(form=u, product_of_gauss_factors=-2.0,
        ...                          n_swaps=1, singular_columns=()),
        ...     info={'method': 'gauss_first_nonzero', 'shape': (3, 3)},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='python_echelon'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

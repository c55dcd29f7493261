"""
Tolerance tiers for numerical comparison.

Elimination accumulates rounding error that grows with matrix size and
with the spread of the scale factors, so comparisons against a reference
determinant (or against zero, for singular input) use a named tier rather
than ad hoc epsilons.

Used by the test suite and by EchelonSolution.is_singular().
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, well-conditioned matrices
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, well-conditioned input',
)

# Double precision, ill-conditioned or large matrices. The scale-then-subtract
# elimination multiplies rows by ratios that can be far from 1.
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='fp64_ill_conditioned',
    description='Double precision, ill-conditioned or large input',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a determinant comparison."""
    if is_ill_conditioned:
        return FP64_ILL_CONDITIONED
    return FP64

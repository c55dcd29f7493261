"""
Shared compute infrastructure for pymatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Named tolerance tiers for numerical comparison
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    FP64,
    FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP64_ILL_CONDITIONED",
    "select_tolerance",
]

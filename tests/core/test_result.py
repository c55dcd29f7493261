"""
Tests for the Result[P] envelope and timing utilities.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    FP64,
    FP64_ILL_CONDITIONED,
    select_tolerance,
)
from pymatrix.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=1.5),
            info={"method": "test"},
            timing=None,
            backend_name="python_echelon",
        )
        assert result.params.value == 1.5
        assert result.info["method"] == "test"
        assert result.timing is None
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "y"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="x",
            warnings=("column 2 has no nonzero pivot: matrix is singular",),
        )
        assert result.has_warning("no nonzero pivot")
        assert not result.has_warning("overflow")


# ═══════════════════════════════════════════════════════════════════════
# Timing
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section("elimination"):
            pass
        with timer.section("elimination"):
            pass
        timer.stop()
        result = timer.result()
        assert result["total_seconds"] >= 0.0
        assert "elimination" in result

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert "total_seconds" in timer.result()


class TestTolerances:

    def test_select_default(self):
        assert select_tolerance() is FP64

    def test_select_ill_conditioned(self):
        assert select_tolerance(is_ill_conditioned=True) is FP64_ILL_CONDITIONED

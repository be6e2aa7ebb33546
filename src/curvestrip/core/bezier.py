"""Rational Bezier curve evaluation.

Control points carry a weight and are blended in homogeneous coordinates,
then projected back to 2D. Two interchangeable strategies are provided:

- DirectStrategy: Bernstein form with a precomputed binomial table
- DeCasteljauStrategy: repeated linear interpolation, more stable at high degree

Strategies implement a two-step interface (``prepare`` once per curve,
``evaluate`` once per sample) and are looked up by BezierMode, so a new
strategy only needs to be registered.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from curvestrip.core._binomial import BinomialTable
from curvestrip.core.geometry import homogenize, lerp, project
from curvestrip.domain import BezierMode, Point2, Point3
from curvestrip.exceptions import (
    DegenerateSampleCountError,
    EmptyControlPointsError,
    NonPositiveWeightError,
)


class BezierStrategy(Protocol):
    """Evaluation strategy for a rational Bezier curve."""

    def prepare(self, degree: int) -> Any:
        """Build per-curve state for a curve of the given degree."""
        ...

    def evaluate(self, state: Any, t: float, weighted_points: Sequence[Point3]) -> Point3:
        """Evaluate the curve at t, returning a homogeneous point."""
        ...


def _power(base: float, exponent: int) -> float:
    # 0 ** 0 is defined as 1 here
    if exponent == 0:
        return 1.0
    return base**exponent


class DirectStrategy:
    """Bernstein-form evaluation.

    B(t) = sum_k C(n, k) * t^k * (1 - t)^(n - k) * P_k
    """

    def prepare(self, degree: int) -> BinomialTable:
        return BinomialTable(degree)

    def evaluate(
        self, state: BinomialTable, t: float, weighted_points: Sequence[Point3]
    ) -> Point3:
        n = state.degree
        s = 1.0 - t

        x = y = w = 0.0
        for k, p in enumerate(weighted_points):
            basis = state[k] * _power(t, k) * _power(s, n - k)
            x += basis * p.x
            y += basis * p.y
            w += basis * p.w

        return Point3(x, y, w)


class DeCasteljauStrategy:
    """De Casteljau evaluation by repeated linear interpolation."""

    def prepare(self, degree: int) -> int:
        return degree

    def evaluate(self, state: int, t: float, weighted_points: Sequence[Point3]) -> Point3:
        buffer = list(weighted_points)

        # Collapse one level per pass until a single point is left
        for size in range(len(buffer) - 1, 0, -1):
            for i in range(size):
                buffer[i] = lerp(buffer[i], buffer[i + 1], t)

        return buffer[0]


_STRATEGIES: dict[BezierMode, BezierStrategy] = {
    BezierMode.DIRECT: DirectStrategy(),
    BezierMode.DE_CASTELJAU: DeCasteljauStrategy(),
}


def register_strategy(mode: BezierMode, strategy: BezierStrategy) -> None:
    """Register (or replace) the strategy used for a mode."""
    _STRATEGIES[mode] = strategy


def get_strategy(mode: BezierMode) -> BezierStrategy:
    """Return the strategy registered for a mode.

    Raises:
        KeyError: If no strategy is registered for the mode
    """
    try:
        return _STRATEGIES[mode]
    except KeyError:
        raise KeyError(f"No Bezier strategy registered for mode {mode!r}") from None


def sample_parameters(samples: int) -> list[float]:
    """Evenly spaced parameters over [0, 1].

    The first value is exactly 0.0 and the last exactly 1.0.

    Args:
        samples: Number of parameters, at least 2

    Returns:
        List of parameter values
    """
    last = samples - 1
    return [i / last for i in range(samples)]


def validate_bezier(points: Sequence[Point3], samples: int) -> None:
    """Check the invariants a Bezier curve must hold before evaluation.

    Raises:
        EmptyControlPointsError: If there are no control points
        DegenerateSampleCountError: If samples < 2
        NonPositiveWeightError: If any weight is <= 0
    """
    if not points:
        raise EmptyControlPointsError(
            "need at least one control point to draw a bezier curve"
        )
    if samples < 2:
        raise DegenerateSampleCountError(
            f"bezier curve needs at least 2 samples, got {samples}"
        )
    for i, p in enumerate(points):
        if not p.w > 0:
            raise NonPositiveWeightError(
                f"control point {i} has weight {p.w}, weights must be positive"
            )


def evaluate_bezier(
    points: Sequence[Point3],
    samples: int,
    mode: BezierMode = BezierMode.DIRECT,
) -> list[Point2]:
    """Tessellate a rational Bezier curve into a polyline.

    Args:
        points: Control points (x, y, w)
        samples: Number of output points, including both endpoints
        mode: Evaluation strategy

    Returns:
        ``samples`` points from B(0) to B(1)

    Raises:
        EmptyControlPointsError: If there are no control points
        DegenerateSampleCountError: If samples < 2
        NonPositiveWeightError: If any weight is <= 0
    """
    validate_bezier(points, samples)

    strategy = get_strategy(mode)
    weighted = [homogenize(p) for p in points]
    state = strategy.prepare(len(weighted) - 1)

    return [
        project(strategy.evaluate(state, t, weighted))
        for t in sample_parameters(samples)
    ]

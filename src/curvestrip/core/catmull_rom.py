"""Catmull-Rom spline evaluation.

The spline is evaluated window by window: every four consecutive points
P0..P3 produce samples on the middle segment P1 -> P2 using the
Barry-Goldman pyramid of linear interpolations over non-uniform knots.

Knot spacing depends on the mode:
- Uniform: every interval is 1
- Chordal: interval is |Pb - Pa|
- Centripetal: interval is |Pb - Pa| ** 0.5
"""

import math
from collections.abc import Sequence

from curvestrip.core.geometry import distance
from curvestrip.domain import CatmullRomMode, Point2
from curvestrip.exceptions import (
    DegenerateSampleCountError,
    DegenerateSpacingError,
    InsufficientSplinePointsError,
)

WINDOW_SIZE = 4


def knot_interval(a: Point2, b: Point2, mode: CatmullRomMode) -> float:
    """Parameter increment between two consecutive points.

    Args:
        a: Start point
        b: End point
        mode: Knot spacing

    Returns:
        Knot interval for the pair

    Raises:
        DegenerateSpacingError: If the points coincide under a distance-based mode
    """
    if mode is CatmullRomMode.UNIFORM:
        return 1.0

    if mode is CatmullRomMode.CHORDAL:
        interval = distance(a, b)
    else:
        interval = math.sqrt(distance(a, b))

    if interval == 0.0:
        raise DegenerateSpacingError(
            f"points {a.to_tuple()} and {b.to_tuple()} coincide, "
            f"{mode.value} spacing needs distinct consecutive points"
        )
    return interval


def _blend(a: Point2, b: Point2, ta: float, tb: float, t: float) -> Point2:
    # Interpolate between a (at ta) and b (at tb) at parameter t
    span = tb - ta
    return a * ((tb - t) / span) + b * ((t - ta) / span)


def evaluate_window(
    window: Sequence[Point2],
    samples: int,
    mode: CatmullRomMode,
) -> list[Point2]:
    """Sample the middle segment of a four-point window.

    Args:
        window: Points P0, P1, P2, P3
        samples: Number of points to produce on [t1, t2)
        mode: Knot spacing

    Returns:
        ``samples`` points, the first equal to P1

    Raises:
        DegenerateSpacingError: If the knots of the window are not strictly
            increasing
    """
    p0, p1, p2, p3 = window

    t0 = 0.0
    t1 = t0 + knot_interval(p0, p1, mode)
    t2 = t1 + knot_interval(p1, p2, mode)
    t3 = t2 + knot_interval(p2, p3, mode)

    # Large coordinates can swallow a small interval in the running sum
    if not t0 < t1 < t2 < t3:
        raise DegenerateSpacingError(
            f"knots {t0}, {t1}, {t2}, {t3} are not strictly increasing, "
            f"{mode.value} spacing cannot separate the points of this window"
        )

    result: list[Point2] = []
    for j in range(samples):
        t = t1 + (t2 - t1) * j / samples

        a1 = _blend(p0, p1, t0, t1, t)
        a2 = _blend(p1, p2, t1, t2, t)
        a3 = _blend(p2, p3, t2, t3, t)

        b1 = _blend(a1, a2, t0, t2, t)
        b2 = _blend(a2, a3, t1, t3, t)

        result.append(_blend(b1, b2, t1, t2, t))

    return result


def validate_catmull_rom(points: Sequence[Point2], samples: int) -> None:
    """Check the invariants a spline must hold before evaluation.

    Raises:
        DegenerateSampleCountError: If samples < 2
        InsufficientSplinePointsError: If there are fewer than four points
    """
    if samples < 2:
        raise DegenerateSampleCountError(
            f"catmull-rom spline needs at least 2 samples, got {samples}"
        )
    if len(points) < WINDOW_SIZE:
        raise InsufficientSplinePointsError(
            f"need at least {WINDOW_SIZE} points to draw a catmull-rom spline, "
            f"got {len(points)}"
        )


def evaluate_catmull_rom(
    points: Sequence[Point2],
    samples: int,
    mode: CatmullRomMode = CatmullRomMode.CENTRIPETAL,
) -> list[Point2]:
    """Tessellate a Catmull-Rom spline into a polyline.

    The curve runs from points[1] to points[-2]; the outer points only shape
    the tangents of the first and last segment.

    Args:
        points: Spline points, at least four
        samples: Points produced per segment
        mode: Knot spacing

    Returns:
        ``(len(points) - 3) * samples + 1`` points

    Raises:
        DegenerateSampleCountError: If samples < 2
        InsufficientSplinePointsError: If there are fewer than four points
        DegenerateSpacingError: If consecutive points coincide under a
            chordal or centripetal spacing
    """
    validate_catmull_rom(points, samples)

    result: list[Point2] = []
    for start in range(len(points) - WINDOW_SIZE + 1):
        window = points[start : start + WINDOW_SIZE]
        result.extend(evaluate_window(window, samples, mode))

    # Windows stop short of their own end point, close the last one
    result.append(points[-2])
    return result

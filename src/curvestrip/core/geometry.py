"""Vector primitives shared by the curve evaluators.

This module provides:
- Linear interpolation between points
- Euclidean norm and point distance
- Conversion between weighted control points and homogeneous coordinates

All functions are pure, stateless, and work on both Point2 and Point3 where
that makes sense.
"""

import math
from typing import TypeVar

from curvestrip.domain import Point2, Point3

P = TypeVar("P", Point2, Point3)


def lerp(a: P, b: P, t: float) -> P:
    """Linear interpolation between two points.

    Args:
        a: Point returned at t = 0
        b: Point returned at t = 1
        t: Interpolation parameter

    Returns:
        ``(1 - t) * a + t * b``

    Examples:
        >>> lerp(Point2(0.0, 0.0), Point2(2.0, 4.0), 0.5)
        Point2(x=1.0, y=2.0)
    """
    return a * (1.0 - t) + b * t


def norm(p: Point2) -> float:
    """Euclidean length of a 2D vector."""
    return math.hypot(p.x, p.y)


def distance(a: Point2, b: Point2) -> float:
    """Euclidean distance between two points."""
    return norm(b - a)


def homogenize(p: Point3) -> Point3:
    """Lift a weighted control point into homogeneous coordinates.

    Args:
        p: Control point (x, y, w)

    Returns:
        Homogeneous point (w*x, w*y, w)
    """
    return Point3(p.x * p.w, p.y * p.w, p.w)


def project(h: Point3) -> Point2:
    """Perspective-divide a homogeneous point back to 2D.

    Args:
        h: Homogeneous point (X, Y, W) with W != 0

    Returns:
        Euclidean point (X/W, Y/W)
    """
    return Point2(h.x / h.w, h.y / h.w)

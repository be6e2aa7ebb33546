"""Core tessellation algorithms for curvestrip.

This module contains the curve tessellation engine:

- Vector primitives (lerp, norms, homogeneous projection)
- Rational Bezier evaluation (direct Bernstein form and De Casteljau)
- Catmull-Rom evaluation (uniform, chordal and centripetal spacing)
- Shape dispatch and document-level orchestration

All evaluators are:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- tessellate: Convert any shape into a polyline
- evaluate_bezier: Tessellate a rational Bezier curve
- evaluate_catmull_rom: Tessellate a Catmull-Rom spline

Key classes:
- DirectStrategy, DeCasteljauStrategy: Bezier evaluation strategies
- CurveProcessor: Tessellates every curve of a document
"""

from curvestrip.core.bezier import (
    BezierStrategy,
    DeCasteljauStrategy,
    DirectStrategy,
    evaluate_bezier,
    get_strategy,
    register_strategy,
)
from curvestrip.core.catmull_rom import evaluate_catmull_rom, knot_interval
from curvestrip.core.geometry import (
    distance,
    homogenize,
    lerp,
    norm,
    project,
)
from curvestrip.core.processor import CurveProcessor, tessellate_curve
from curvestrip.core.tessellator import tessellate

__all__ = [
    # Bezier
    "BezierStrategy",
    "DeCasteljauStrategy",
    "DirectStrategy",
    # Processor
    "CurveProcessor",
    "distance",
    "evaluate_bezier",
    "evaluate_catmull_rom",
    "get_strategy",
    "homogenize",
    "knot_interval",
    "lerp",
    "norm",
    "project",
    "register_strategy",
    "tessellate",
    "tessellate_curve",
]

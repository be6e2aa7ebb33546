"""Shape dispatch: route a shape to its evaluator."""

from curvestrip.core.bezier import evaluate_bezier
from curvestrip.core.catmull_rom import evaluate_catmull_rom
from curvestrip.domain import (
    BezierShape,
    CatmullRomShape,
    LinesShape,
    Point2,
    Shape,
)


def tessellate(shape: Shape) -> list[Point2]:
    """Convert a shape into a polyline.

    Args:
        shape: Lines, Bezier or Catmull-Rom shape

    Returns:
        Ordered polyline vertices

    Raises:
        TessellationError: If the shape violates one of its invariants
        TypeError: If the shape is not one of the known variants

    Examples:
        >>> tessellate(LinesShape((Point2(0.0, 0.0), Point2(1.0, 1.0))))
        [Point2(x=0.0, y=0.0), Point2(x=1.0, y=1.0)]
    """
    if isinstance(shape, LinesShape):
        return list(shape.points)

    if isinstance(shape, BezierShape):
        return evaluate_bezier(shape.points, shape.samples, shape.mode)

    if isinstance(shape, CatmullRomShape):
        return evaluate_catmull_rom(shape.points, shape.samples, shape.mode)

    raise TypeError(f"Unsupported shape type: {type(shape).__name__}")

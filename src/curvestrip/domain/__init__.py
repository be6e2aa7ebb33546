"""Domain models for curvestrip.

This module contains the value types describing curves and their tessellated
output. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of the document format and the image backend

Key classes:
- Point2: A 2D point
- Point3: A weighted control point / homogeneous coordinate
- LinesShape, BezierShape, CatmullRomShape: The shape variants
- Curve: A shape with its display color
- Document: A canvas with its curves
- LineStrip: Tessellated polyline with its color
"""

from curvestrip.domain.document import Canvas, Curve, Document, LineStrip
from curvestrip.domain.point import Point2, Point3
from curvestrip.domain.shape import (
    BezierMode,
    BezierShape,
    CatmullRomMode,
    CatmullRomShape,
    LinesShape,
    Shape,
    shape_from_dict,
)

__all__: list[str] = [
    # Enums
    "BezierMode",
    "CatmullRomMode",
    # Core types
    "Point2",
    "Point3",
    "Shape",
    "LinesShape",
    "BezierShape",
    "CatmullRomShape",
    "Curve",
    "Canvas",
    "Document",
    "LineStrip",
    "shape_from_dict",
]

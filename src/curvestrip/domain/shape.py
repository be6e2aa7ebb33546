"""Shape descriptions accepted by the tessellation engine.

A shape is one of three variants:
- LinesShape: a polyline passed through unchanged
- BezierShape: a rational Bezier curve with a sample count and evaluation mode
- CatmullRomShape: a Catmull-Rom spline with a sample count and knot spacing mode
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from curvestrip.domain.point import Point2, Point3


class BezierMode(str, Enum):
    """Bezier evaluation strategy."""

    DIRECT = "direct"
    DE_CASTELJAU = "de_casteljau"


class CatmullRomMode(str, Enum):
    """Knot spacing of a Catmull-Rom spline.

    - UNIFORM: every knot interval is 1
    - CHORDAL: interval is the distance between the points
    - CENTRIPETAL: interval is the square root of the distance
    """

    UNIFORM = "uniform"
    CHORDAL = "chordal"
    CENTRIPETAL = "centripetal"


@dataclass(frozen=True, slots=True)
class LinesShape:
    """A polyline that is drawn as given.

    Attributes:
        points: Vertices of the polyline
    """

    points: tuple[Point2, ...]

    kind = "lines"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "kind": self.kind,
            "points": [p.to_dict() for p in self.points],
        }


@dataclass(frozen=True, slots=True)
class BezierShape:
    """A rational Bezier curve.

    Attributes:
        points: Control points as (x, y, w); degree is len(points) - 1
        samples: Number of output points, including both endpoints
        mode: Evaluation strategy
    """

    points: tuple[Point3, ...]
    samples: int
    mode: BezierMode = BezierMode.DIRECT

    kind = "bezier"

    @property
    def degree(self) -> int:
        """Polynomial degree of the curve."""
        return len(self.points) - 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "kind": self.kind,
            "points": [p.to_dict() for p in self.points],
            "samples": self.samples,
            "mode": self.mode.value,
        }


@dataclass(frozen=True, slots=True)
class CatmullRomShape:
    """A Catmull-Rom spline through a sequence of points.

    Attributes:
        points: Points the spline passes through (the first and last only steer it)
        samples: Number of output points per spline segment
        mode: Knot spacing
    """

    points: tuple[Point2, ...]
    samples: int
    mode: CatmullRomMode = CatmullRomMode.CENTRIPETAL

    kind = "catmull_rom"

    @property
    def segment_count(self) -> int:
        """Number of four-point windows evaluated."""
        return max(len(self.points) - 3, 0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "kind": self.kind,
            "points": [p.to_dict() for p in self.points],
            "samples": self.samples,
            "mode": self.mode.value,
        }


Shape = Union[LinesShape, BezierShape, CatmullRomShape]


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Deserialize a shape produced by ``to_dict``.

    Args:
        data: Dictionary with a ``kind`` tag

    Returns:
        The matching shape instance

    Raises:
        ValueError: If the kind tag is unknown
    """
    kind = data["kind"]
    if kind == LinesShape.kind:
        return LinesShape(points=tuple(Point2.from_dict(p) for p in data["points"]))
    if kind == BezierShape.kind:
        return BezierShape(
            points=tuple(Point3.from_dict(p) for p in data["points"]),
            samples=data["samples"],
            mode=BezierMode(data["mode"]),
        )
    if kind == CatmullRomShape.kind:
        return CatmullRomShape(
            points=tuple(Point2.from_dict(p) for p in data["points"]),
            samples=data["samples"],
            mode=CatmullRomMode(data["mode"]),
        )
    raise ValueError(f"Unknown shape kind: {kind!r}")

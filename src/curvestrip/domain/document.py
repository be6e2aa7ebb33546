"""Document-level models: canvas, curves and tessellated line strips."""

from dataclasses import dataclass, field
from typing import Any

from curvestrip.domain.point import Point2
from curvestrip.domain.shape import Shape, shape_from_dict


@dataclass(frozen=True, slots=True)
class Canvas:
    """Target image.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        color: Background color as 0xRRGGBB
    """

    width: int
    height: int
    color: int = 0xFFFFFF

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class Curve:
    """A shape paired with its display color.

    The color is never interpreted by the tessellation engine.

    Attributes:
        shape: Shape description
        color: Stroke color as 0xRRGGBB
    """

    shape: Shape
    color: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with the shape and color
        """
        return {"shape": self.shape.to_dict(), "color": self.color}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Curve":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a curve

        Returns:
            Curve instance
        """
        return cls(shape=shape_from_dict(data["shape"]), color=data["color"])


@dataclass
class Document:
    """A complete drawing: one canvas and an ordered list of curves.

    Attributes:
        canvas: Target image description
        curves: Curves in drawing order
    """

    canvas: Canvas
    curves: list[Curve] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.curves)


@dataclass
class LineStrip:
    """Tessellated output of one curve.

    Attributes:
        positions: Polyline vertices in drawing order
        color: Stroke color copied from the curve
    """

    positions: list[Point2]
    color: int

    @property
    def segment_count(self) -> int:
        """Number of line segments the strip draws."""
        return max(len(self.positions) - 1, 0)

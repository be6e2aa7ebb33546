"""Core coordinate types for curve description.

This module defines the two point types used throughout curvestrip:
- Point2: A 2D point in curve space
- Point3: A rational control point (x, y, w), also used for homogeneous coordinates
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point2:
    """A point in 2D curve space.

    Immutable and hashable so polylines can be compared and deduplicated.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point2") -> "Point2":
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2") -> "Point2":
        return Point2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point2":
        return Point2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point2":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point2":
        """Build a point from an ``[x, y]`` pair.

        Raises:
            ValueError: If the sequence does not hold exactly two values
        """
        if len(values) != 2:
            raise ValueError(f"Expected 2 coordinates, got {len(values)}")
        return cls(float(values[0]), float(values[1]))


@dataclass(frozen=True, slots=True)
class Point3:
    """A three-component point.

    As a Bezier control point the components are ``(x, y, w)`` where ``w`` is
    the positive weight of the point; ``w = 1`` gives a polynomial curve. The
    same type carries the homogeneous form ``(w*x, w*y, w)`` during evaluation.

    Attributes:
        x: X coordinate (or weighted X in homogeneous form)
        y: Y coordinate (or weighted Y in homogeneous form)
        w: Weight
    """

    x: float
    y: float
    w: float = 1.0

    def __add__(self, other: "Point3") -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.w + other.w)

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.w - other.w)

    def __mul__(self, factor: float) -> "Point3":
        return Point3(self.x * factor, self.y * factor, self.w * factor)

    __rmul__ = __mul__

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to simple (x, y, w) tuple."""
        return (self.x, self.y, self.w)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y, "w": self.w}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point3":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], w=data["w"])

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point3":
        """Build a control point from an ``[x, y, w]`` triple.

        Raises:
            ValueError: If the sequence does not hold exactly three values
        """
        if len(values) != 3:
            raise ValueError(f"Expected 3 coordinates, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

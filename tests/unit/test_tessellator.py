"""Unit tests for shape dispatch."""

import pytest

from curvestrip.core.bezier import evaluate_bezier
from curvestrip.core.catmull_rom import evaluate_catmull_rom
from curvestrip.core.tessellator import tessellate
from curvestrip.domain import (
    BezierMode,
    BezierShape,
    CatmullRomMode,
    CatmullRomShape,
    LinesShape,
    Point2,
    Point3,
)
from curvestrip.exceptions import (
    DegenerateSampleCountError,
    EmptyControlPointsError,
    InsufficientSplinePointsError,
    TessellationError,
)


class TestTessellate:
    """Tests for tessellate()."""

    def test_lines_identity(self) -> None:
        """Test lines are returned unchanged."""
        points = (Point2(0, 0), Point2(3, 4), Point2(-1, 2))
        assert tessellate(LinesShape(points=points)) == list(points)

    def test_lines_empty(self) -> None:
        """Test empty lines are passed through without error."""
        assert tessellate(LinesShape(points=())) == []

    @pytest.mark.parametrize("mode", list(BezierMode))
    def test_bezier_routes_by_mode(self, mode: BezierMode) -> None:
        """Test a Bezier shape reaches the evaluator with its mode."""
        points = (Point3(0, 0, 1), Point3(1, 2, 2), Point3(3, 0, 1))
        shape = BezierShape(points=points, samples=6, mode=mode)
        assert tessellate(shape) == evaluate_bezier(points, 6, mode)

    @pytest.mark.parametrize("mode", list(CatmullRomMode))
    def test_catmull_rom_routes_by_mode(self, mode: CatmullRomMode) -> None:
        """Test a Catmull-Rom shape reaches the evaluator with its mode."""
        points = (Point2(0, 0), Point2(1, 2), Point2(3, 3), Point2(4, 0), Point2(6, 1))
        shape = CatmullRomShape(points=points, samples=4, mode=mode)
        result = tessellate(shape)
        assert result == evaluate_catmull_rom(points, 4, mode)
        assert len(result) == 2 * 4 + 1

    @pytest.mark.parametrize(
        ("shape", "error"),
        [
            (BezierShape(points=(), samples=4), EmptyControlPointsError),
            (BezierShape(points=(Point3(0, 0),), samples=1), DegenerateSampleCountError),
            (
                CatmullRomShape(points=(Point2(0, 0), Point2(1, 1), Point2(2, 0)), samples=4),
                InsufficientSplinePointsError,
            ),
            (
                CatmullRomShape(points=tuple(Point2(float(i), 0.0) for i in range(4)), samples=1),
                DegenerateSampleCountError,
            ),
        ],
    )
    def test_invalid_shapes(self, shape, error) -> None:
        """Test each invalid shape raises its specific error."""
        with pytest.raises(error) as exc_info:
            tessellate(shape)
        assert isinstance(exc_info.value, TessellationError)
        assert exc_info.value.curve_index is None

    def test_unknown_shape(self) -> None:
        """Test an unsupported object is a TypeError."""
        with pytest.raises(TypeError, match="Unsupported shape"):
            tessellate(object())  # type: ignore[arg-type]

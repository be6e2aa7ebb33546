"""Tests for document-level tessellation orchestration."""

from unittest.mock import MagicMock

import pytest

from curvestrip.config import CurvestripSettings, TessellationConfig
from curvestrip.core.processor import CurveProcessor, tessellate_curve
from curvestrip.domain import (
    BezierMode,
    BezierShape,
    Canvas,
    CatmullRomMode,
    CatmullRomShape,
    Curve,
    Document,
    LinesShape,
    Point2,
    Point3,
)
from curvestrip.exceptions import (
    EmptyControlPointsError,
    ErrorKind,
    InsufficientSplinePointsError,
)


@pytest.fixture
def bezier_curve() -> Curve:
    """A quadratic Bezier curve."""
    return Curve(
        shape=BezierShape(
            points=(Point3(0, 0, 1), Point3(50, 100, 2), Point3(100, 0, 1)),
            samples=10,
            mode=BezierMode.DE_CASTELJAU,
        ),
        color=0xFF0000,
    )


@pytest.fixture
def spline_curve() -> Curve:
    """A five-point centripetal spline."""
    return Curve(
        shape=CatmullRomShape(
            points=(
                Point2(0, 0),
                Point2(20, 40),
                Point2(40, 10),
                Point2(60, 50),
                Point2(80, 20),
            ),
            samples=8,
            mode=CatmullRomMode.CENTRIPETAL,
        ),
        color=0x00FF00,
    )


@pytest.fixture
def lines_curve() -> Curve:
    """A plain polyline."""
    return Curve(shape=LinesShape(points=(Point2(0, 0), Point2(10, 10))), color=0x0000FF)


@pytest.fixture
def document(bezier_curve: Curve, spline_curve: Curve, lines_curve: Curve) -> Document:
    """A document with one curve of each kind."""
    return Document(
        canvas=Canvas(width=100, height=100, color=0xFFFFFF),
        curves=[bezier_curve, spline_curve, lines_curve],
    )


@pytest.fixture
def processor() -> CurveProcessor:
    """Processor with a mocked logger."""
    return CurveProcessor(CurvestripSettings(), logger=MagicMock())


class TestTessellateCurve:
    """Tests for the picklable worker function."""

    def test_success(self, bezier_curve: Curve) -> None:
        """Test a valid curve returns positions and timing."""
        result = tessellate_curve(3, bezier_curve.to_dict())

        assert result["curve_index"] == 3
        assert len(result["positions"]) == 10
        assert result["positions"][0] == (0.0, 0.0)
        assert result["duration_ms"] >= 0.0
        assert "error" not in result

    def test_error(self) -> None:
        """Test an invalid curve returns an error dict instead of raising."""
        curve = Curve(shape=BezierShape(points=(), samples=5))
        result = tessellate_curve(1, curve.to_dict())

        assert result["curve_index"] == 1
        assert result["kind"] == ErrorKind.EMPTY_CONTROL_POINTS.value
        assert "control point" in result["error"]
        assert "positions" not in result


class TestCurveProcessor:
    """Tests for CurveProcessor."""

    def test_strips_in_document_order(
        self, processor: CurveProcessor, document: Document
    ) -> None:
        """Test one strip per curve, in order, with colors passed through."""
        strips = processor.process(document)

        assert [s.color for s in strips] == [0xFF0000, 0x00FF00, 0x0000FF]
        assert len(strips[0].positions) == 10
        assert len(strips[1].positions) == 2 * 8 + 1
        assert strips[2].positions == [Point2(0, 0), Point2(10, 10)]

    def test_stats(self, processor: CurveProcessor, document: Document) -> None:
        """Test statistics are collected."""
        processor.process(document)

        stats = processor.stats
        assert stats.curve_count == 3
        assert stats.vertex_count == 10 + 17 + 2
        assert len(stats.curve_timings_ms) == 3
        assert stats.duration_seconds >= 0.0

    def test_stats_reset_between_runs(
        self, processor: CurveProcessor, document: Document
    ) -> None:
        """Test each run starts from fresh statistics."""
        processor.process(document)
        processor.process(document)
        assert processor.stats.curve_count == 3

    def test_empty_document(self, processor: CurveProcessor) -> None:
        """Test a document without curves yields no strips."""
        assert processor.process(Document(canvas=Canvas(10, 10))) == []

    def test_progress_callback(self, processor: CurveProcessor, document: Document) -> None:
        """Test progress is reported once per curve."""
        calls: list[tuple[int, int]] = []
        processor.process(document, progress_callback=lambda done, total: calls.append((done, total)))
        assert calls == [(1, 3), (2, 3), (3, 3)]

    def test_error_carries_curve_index(
        self, processor: CurveProcessor, document: Document
    ) -> None:
        """Test the failing curve's index is attached to the error."""
        bad = Curve(shape=CatmullRomShape(points=(Point2(0, 0),) * 3, samples=4))
        document.curves.insert(1, bad)

        with pytest.raises(InsufficientSplinePointsError) as exc_info:
            processor.process(document)

        assert exc_info.value.curve_index == 1
        assert "Curve 1" in str(exc_info.value)

    def test_first_error_wins(self, processor: CurveProcessor, document: Document) -> None:
        """Test the lowest failing index is reported."""
        document.curves.append(Curve(shape=CatmullRomShape(points=(), samples=4)))
        document.curves.insert(0, Curve(shape=BezierShape(points=(), samples=4)))

        with pytest.raises(EmptyControlPointsError) as exc_info:
            processor.process(document)
        assert exc_info.value.curve_index == 0

    def test_error_is_logged(self, document: Document) -> None:
        """Test a failing curve is logged as an error."""
        logger = MagicMock()
        processor = CurveProcessor(CurvestripSettings(), logger=logger)
        document.curves.append(Curve(shape=BezierShape(points=(), samples=4)))

        with pytest.raises(EmptyControlPointsError):
            processor.process(document)

        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["curve"] == 3

    def test_samples_override(self, document: Document) -> None:
        """Test the configured sample count replaces each curve's own."""
        settings = CurvestripSettings(tessellation=TessellationConfig(samples_override=4))
        processor = CurveProcessor(settings, logger=MagicMock())

        strips = processor.process(document)

        assert len(strips[0].positions) == 4
        assert len(strips[1].positions) == 2 * 4 + 1
        assert len(strips[2].positions) == 2

    def test_parallel_matches_sequential(self, document: Document) -> None:
        """Test worker processes produce the same strips in the same order."""
        sequential = CurveProcessor(CurvestripSettings(), logger=MagicMock()).process(document)
        parallel = CurveProcessor(CurvestripSettings(), logger=MagicMock()).process(
            document, max_workers=2
        )

        assert [s.color for s in parallel] == [s.color for s in sequential]
        assert [s.positions for s in parallel] == [s.positions for s in sequential]

    def test_parallel_error_carries_curve_index(self, document: Document) -> None:
        """Test errors from worker processes keep their index."""
        document.curves.append(Curve(shape=BezierShape(points=(), samples=4)))
        processor = CurveProcessor(CurvestripSettings(), logger=MagicMock())

        with pytest.raises(EmptyControlPointsError) as exc_info:
            processor.process(document, max_workers=2)
        assert exc_info.value.curve_index == 3

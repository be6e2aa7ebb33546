"""Exception hierarchy for curvestrip."""

from enum import Enum


class CurvestripError(Exception):
    """Base exception for all curvestrip errors."""

    pass


class ErrorKind(str, Enum):
    """Invariant violated by a curve description."""

    EMPTY_CONTROL_POINTS = "empty_control_points"
    INSUFFICIENT_SPLINE_POINTS = "insufficient_spline_points"
    DEGENERATE_SAMPLE_COUNT = "degenerate_sample_count"
    DEGENERATE_SPACING = "degenerate_spacing"
    NON_POSITIVE_WEIGHT = "non_positive_weight"


class TessellationError(CurvestripError):
    """A curve could not be tessellated.

    Attributes:
        reason: Description of the violated invariant
        curve_index: Position of the curve in its document, if known
    """

    kind: ErrorKind

    def __init__(self, reason: str, curve_index: int | None = None) -> None:
        self.reason = reason
        self.curve_index = curve_index
        if curve_index is None:
            message = reason
        else:
            message = f"Curve {curve_index}: {reason}"
        super().__init__(message)

    def with_curve_index(self, curve_index: int) -> "TessellationError":
        """Return a copy of this error attributed to a curve."""
        return type(self)(self.reason, curve_index)

    def __reduce__(self):
        return (type(self), (self.reason, self.curve_index))


class EmptyControlPointsError(TessellationError):
    """Bezier curve has no control points."""

    kind = ErrorKind.EMPTY_CONTROL_POINTS


class InsufficientSplinePointsError(TessellationError):
    """Catmull-Rom spline has fewer than four points."""

    kind = ErrorKind.INSUFFICIENT_SPLINE_POINTS


class DegenerateSampleCountError(TessellationError):
    """Sample count too small to step the curve parameter."""

    kind = ErrorKind.DEGENERATE_SAMPLE_COUNT


class DegenerateSpacingError(TessellationError):
    """Two consecutive spline points coincide under a distance-based spacing."""

    kind = ErrorKind.DEGENERATE_SPACING


class NonPositiveWeightError(TessellationError):
    """A rational control point has a weight that is zero or negative."""

    kind = ErrorKind.NON_POSITIVE_WEIGHT


ERRORS_BY_KIND: dict[ErrorKind, type[TessellationError]] = {
    cls.kind: cls
    for cls in (
        EmptyControlPointsError,
        InsufficientSplinePointsError,
        DegenerateSampleCountError,
        DegenerateSpacingError,
        NonPositiveWeightError,
    )
}


class DocumentError(CurvestripError):
    """Curve document could not be read or has the wrong structure."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid curve document: {reason}")


class RenderError(CurvestripError):
    """Line strips could not be turned into an image."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Rendering failed: {reason}")

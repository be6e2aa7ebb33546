"""Conversion between the on-disk document layout and domain models.

The document layout is described with Pydantic models so that structural
errors (missing fields, wrong types) are caught while reading. Geometric
invariants such as sample counts or point counts are deliberately not checked
here; the tessellation engine owns them.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

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

MAX_COLOR = 0xFFFFFFFF

# Older documents name the direct strategy "normal"
BEZIER_MODE_ALIASES = {"normal": BezierMode.DIRECT}

Color = Annotated[int, Field(ge=0, le=MAX_COLOR)]


class CanvasModel(BaseModel):
    """``[canvas]`` table."""

    size: tuple[NonNegativeInt, NonNegativeInt]
    color: Color


class _CurveModel(BaseModel):
    """Shared options for curve models; coordinates must be finite numbers."""

    model_config = ConfigDict(allow_inf_nan=False)


class LinesModel(_CurveModel):
    """Curve of kind ``lines``."""

    kind: Literal["lines"]
    points: list[tuple[float, float]]
    color: Color


class BezierModel(_CurveModel):
    """Curve of kind ``bezier``; points are ``[x, y, w]``."""

    kind: Literal["bezier"]
    points: list[tuple[float, float, float]]
    samples: NonNegativeInt
    mode: Literal["direct", "normal", "de_casteljau"] = "direct"
    color: Color


class CatmullRomModel(_CurveModel):
    """Curve of kind ``catmull_rom``."""

    kind: Literal["catmull_rom"]
    points: list[tuple[float, float]]
    samples: NonNegativeInt
    mode: Literal["uniform", "chordal", "centripetal"] = "centripetal"
    color: Color


CurveModel = Annotated[
    Union[LinesModel, BezierModel, CatmullRomModel],
    Field(discriminator="kind"),
]


class DocumentModel(BaseModel):
    """Top-level document."""

    canvas: CanvasModel
    curve: list[CurveModel] = Field(default_factory=list)


def _bezier_mode(value: str) -> BezierMode:
    return BEZIER_MODE_ALIASES.get(value) or BezierMode(value)


def curve_model_to_domain(model: LinesModel | BezierModel | CatmullRomModel) -> Curve:
    """Convert one parsed curve to its domain representation.

    Args:
        model: Parsed curve model

    Returns:
        Curve with the matching shape variant
    """
    if isinstance(model, LinesModel):
        shape = LinesShape(points=tuple(Point2.from_sequence(p) for p in model.points))
    elif isinstance(model, BezierModel):
        shape = BezierShape(
            points=tuple(Point3.from_sequence(p) for p in model.points),
            samples=model.samples,
            mode=_bezier_mode(model.mode),
        )
    else:
        shape = CatmullRomShape(
            points=tuple(Point2.from_sequence(p) for p in model.points),
            samples=model.samples,
            mode=CatmullRomMode(model.mode),
        )
    return Curve(shape=shape, color=model.color)


def document_model_to_domain(model: DocumentModel) -> Document:
    """Convert a parsed document to its domain representation.

    Args:
        model: Parsed document model

    Returns:
        Document with canvas and curves in input order
    """
    width, height = model.canvas.size
    return Document(
        canvas=Canvas(width=width, height=height, color=model.canvas.color),
        curves=[curve_model_to_domain(c) for c in model.curve],
    )

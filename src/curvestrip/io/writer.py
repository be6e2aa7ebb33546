"""Image writer for tessellated line strips.

This module provides the ImageWriter class, which rasterizes line strips
with Pillow and encodes the result, or dumps the strips as JSON vertices.
"""

import io
import json
from enum import Enum

from PIL import Image, ImageDraw

from curvestrip.config import RenderConfig
from curvestrip.domain import Canvas, LineStrip, Point2
from curvestrip.exceptions import RenderError


class OutputFormat(str, Enum):
    """Supported output encodings."""

    PNG = "png"
    WEBP = "webp"
    JSON = "json"


_PIL_FORMATS = {
    OutputFormat.PNG: "PNG",
    OutputFormat.WEBP: "WEBP",
}


def to_rgb(color: int) -> tuple[int, int, int]:
    """Split a 0xRRGGBB color into channels.

    Args:
        color: Packed color; the top byte must be zero

    Returns:
        (red, green, blue) in 0..255

    Raises:
        RenderError: If the color does not fit in 24 bits
    """
    if not 0 <= color <= 0xFFFFFF:
        raise RenderError(f"{color:X} is invalid as RGB")
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def to_ndc(point: Point2, canvas: Canvas) -> tuple[float, float]:
    """Map a canvas-space point to normalized device coordinates [-1, 1]."""
    return (
        2.0 * point.x / canvas.width - 1.0,
        2.0 * point.y / canvas.height - 1.0,
    )


class ImageWriter:
    """Turns line strips into encoded image bytes.

    Curve space has its origin in the bottom-left corner with y pointing up;
    image rows are flipped accordingly.

    Example:
        writer = ImageWriter(document.canvas)
        data = writer.write(strips, OutputFormat.PNG)
    """

    def __init__(self, canvas: Canvas, config: RenderConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            canvas: Target canvas
            config: Rendering options (defaults if None)

        Raises:
            RenderError: If the canvas has a zero dimension or an invalid color
        """
        if canvas.width == 0 or canvas.height == 0:
            raise RenderError(f"{list(canvas.size)} is invalid as a size of an image")

        self._canvas = canvas
        self._config = config if config is not None else RenderConfig()
        self._background = to_rgb(canvas.color)

    def _to_pixel(self, point: Point2) -> tuple[float, float]:
        return (point.x, self._canvas.height - point.y)

    def rasterize(self, strips: list[LineStrip]) -> Image.Image:
        """Draw all strips in order onto a fresh canvas.

        Strips with fewer than two points draw nothing.

        Raises:
            RenderError: If a strip has an invalid color
        """
        image = Image.new("RGB", self._canvas.size, self._background)
        draw = ImageDraw.Draw(image)

        for strip in strips:
            color = to_rgb(strip.color)
            if len(strip.positions) < 2:
                continue
            draw.line(
                [self._to_pixel(p) for p in strip.positions],
                fill=color,
                width=self._config.line_width,
            )

        return image

    def dump_vertices(self, strips: list[LineStrip]) -> bytes:
        """Serialize strips as JSON with NDC positions and float RGB colors."""
        payload = {
            "size": list(self._canvas.size),
            "line_strips": [
                {
                    "color": [c / 255 for c in to_rgb(strip.color)],
                    "positions": [list(to_ndc(p, self._canvas)) for p in strip.positions],
                }
                for strip in strips
            ],
        }
        return json.dumps(payload).encode("utf-8")

    def write(self, strips: list[LineStrip], output_format: OutputFormat) -> bytes:
        """Encode strips in the requested format.

        Args:
            strips: Line strips in drawing order
            output_format: Target encoding

        Returns:
            Encoded bytes

        Raises:
            RenderError: If a color is invalid or encoding fails
        """
        if output_format is OutputFormat.JSON:
            return self.dump_vertices(strips)

        image = self.rasterize(strips)
        buffer = io.BytesIO()
        try:
            image.save(buffer, format=_PIL_FORMATS[output_format])
        except (OSError, KeyError) as e:
            raise RenderError(f"cannot encode {output_format.value}: {e}") from e
        return buffer.getvalue()

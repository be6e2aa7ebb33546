"""End-to-end test that renders a document and verifies the output image."""

import io
from pathlib import Path

import pytest
from PIL import Image

from curvestrip.config import CurvestripSettings, RenderConfig
from curvestrip.core.processor import CurveProcessor
from curvestrip.io import DocumentReader, ImageWriter, InputFormat, OutputFormat

DRAWING = """
[canvas]
size = [120, 80]
color = 0xFFFFFF

[[curve]]
kind = "lines"
points = [[10, 10], [110, 10]]
color = 0x0000FF

[[curve]]
kind = "bezier"
points = [[10, 20, 1], [60, 90, 3], [110, 20, 1]]
samples = 64
mode = "direct"
color = 0xFF0000

[[curve]]
kind = "catmull_rom"
points = [[0, 40], [10, 40], [60, 70], [110, 40], [120, 40]]
samples = 32
mode = "centripetal"
color = 0x00FF00
"""


@pytest.fixture
def document():
    """Parsed drawing."""
    return DocumentReader(InputFormat.TOML).read(DRAWING)


class TestEndToEndOutput:
    """Render a full drawing and inspect the pixels."""

    def test_render_png(self, document, tmp_path: Path) -> None:
        """Test every curve leaves its color on the image."""
        settings = CurvestripSettings(render=RenderConfig(line_width=3))
        strips = CurveProcessor(settings).process(document)
        data = ImageWriter(document.canvas, settings.render).write(strips, OutputFormat.PNG)

        output = tmp_path / "drawing.png"
        output.write_bytes(data)

        with Image.open(output) as image:
            assert image.size == (120, 80)
            colors = set(image.convert("RGB").getdata())

        assert (255, 255, 255) in colors
        assert (0, 0, 255) in colors
        assert (255, 0, 0) in colors
        assert (0, 255, 0) in colors

    def test_lines_land_on_expected_row(self, document) -> None:
        """Test the straight line at y = 10 is drawn at row height - 10."""
        strips = CurveProcessor(CurvestripSettings()).process(document)
        image = ImageWriter(document.canvas).rasterize(strips[:1])

        assert image.getpixel((60, 70)) == (0, 0, 255)
        assert image.getpixel((60, 10)) == (255, 255, 255)

    def test_bezier_endpoints_on_image(self, document) -> None:
        """Test the Bezier strip starts and ends at its end control points."""
        strips = CurveProcessor(CurvestripSettings()).process(document)
        bezier = strips[1]

        assert bezier.positions[0].to_tuple() == (10.0, 20.0)
        assert bezier.positions[-1].to_tuple() == (110.0, 20.0)

        image = ImageWriter(document.canvas).rasterize([bezier])
        assert image.getpixel((10, 60)) == (255, 0, 0)

    def test_webp_round_trip(self, document) -> None:
        """Test WebP output decodes to an image of the canvas size."""
        strips = CurveProcessor(CurvestripSettings()).process(document)
        data = ImageWriter(document.canvas).write(strips, OutputFormat.WEBP)

        with Image.open(io.BytesIO(data)) as image:
            assert image.format == "WEBP"
            assert image.size == (120, 80)

"""Document and image I/O for curvestrip.

This module handles reading curve documents and writing rendered images.
It keeps file formats and the raster backend out of the tessellation engine.

Key responsibilities:
- Parse JSON/TOML curve documents into domain models
- Rasterize line strips with Pillow
- Encode PNG/WebP images or dump vertices as JSON

Key classes:
- DocumentReader: Parse curve documents
- ImageWriter: Render and encode line strips
"""

from curvestrip.io.reader import DocumentReader, InputFormat
from curvestrip.io.writer import ImageWriter, OutputFormat

__all__ = [
    "DocumentReader",
    "ImageWriter",
    "InputFormat",
    "OutputFormat",
]

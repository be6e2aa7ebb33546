"""Curvestrip - Render Bezier and Catmull-Rom curves to images.

Curvestrip reads a declarative curve document (JSON or TOML), tessellates
every curve into a line strip and rasterizes the strips into a PNG or WebP
image.

Example:
    $ curvestrip toml png < drawing.toml > drawing.png

Supported shapes are plain polylines, rational Bezier curves (direct or
De Casteljau evaluation) and Catmull-Rom splines (uniform, chordal or
centripetal spacing).
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

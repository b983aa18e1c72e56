from __future__ import annotations

from PIL import Image

from annotate.domain.fill import FillStyle
from annotate.domain.geometry import Layout
from annotate.errors import FontParseError, RenderError
from annotate.ports.rasterizer import TextRasterizer


def render_layout(layout: Layout,
                  source: Image.Image,
                  fill: FillStyle,
                  rasterizer: TextRasterizer) -> Image.Image:
    """
    Draw every line of ``layout`` onto a fresh RGBA copy of ``source``.

    The source is left untouched. If a line cannot be drawn, the lines after it
    are skipped and the RenderError carries the canvas drawn so far.
    """
    canvas = source.copy() if source.mode == "RGBA" else source.convert("RGBA")
    for n, line in enumerate(layout.lines, start=1):
        try:
            rasterizer.draw(canvas, line.text, (line.x, line.y), layout.font_size, fill)
        except (OSError, ValueError, FontParseError) as e:
            raise RenderError(f"line {n} ({line.text!r}) failed to draw: {e}", partial=canvas) from e
    return canvas

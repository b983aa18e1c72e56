from __future__ import annotations
import io
from typing import Dict, Tuple

from PIL import Image, ImageChops, ImageDraw, ImageFont

from annotate.adapters.fonttools_metrics import POINTS_PER_INCH, ParsedFont
from annotate.domain.fill import FillStyle, SolidColor
from annotate.errors import FontParseError
from annotate.ports.rasterizer import TextRasterizer

class PillowTextRasterizer(TextRasterizer):
    """
    Draws single lines through FreeType with the origin on the left baseline.

    Glyph coverage becomes the alpha of a paint layer that is composited over
    the RGBA canvas, so translucent fills blend instead of punching holes.
    """

    def __init__(self, font: ParsedFont, dpi: float):
        self.font = font
        self.dpi = dpi
        self._faces: Dict[int, ImageFont.FreeTypeFont] = {}

    def pixel_size(self, size: int) -> int:
        return max(1, int(round(size * self.dpi / POINTS_PER_INCH)))

    def _face(self, size: int) -> ImageFont.FreeTypeFont:
        px = self.pixel_size(size)
        face = self._faces.get(px)
        if face is None:
            try:
                face = ImageFont.truetype(io.BytesIO(self.font.data), px,
                                          index=self.font.index,
                                          layout_engine=ImageFont.Layout.BASIC)
            except OSError as e:
                raise FontParseError(f"FreeType could not load font: {e}") from e
            self._faces[px] = face
        return face

    def draw(self,
             canvas: Image.Image,
             text: str,
             origin: Tuple[int, int],
             size: int,
             fill: FillStyle) -> None:
        if not text:
            return
        face = self._face(size)
        mask = Image.new("L", canvas.size, 0)
        ImageDraw.Draw(mask).text(origin, text, fill=255, font=face, anchor="ls")
        bbox = mask.getbbox()
        if bbox is None:
            return

        if isinstance(fill, SolidColor):
            layer = Image.new("RGBA", (bbox[2] - bbox[0], bbox[3] - bbox[1]), fill.rgba)
        else:
            # cropping past the fill image edge gives transparent pixels
            layer = fill.image.convert("RGBA").crop(bbox)
        layer.putalpha(ImageChops.multiply(layer.getchannel("A"), mask.crop(bbox)))
        canvas.alpha_composite(layer, dest=bbox[:2])

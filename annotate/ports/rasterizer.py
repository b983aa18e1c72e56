from __future__ import annotations
from typing import Protocol, Tuple

from PIL import Image

from annotate.domain.fill import FillStyle

class TextRasterizer(Protocol):
    def draw(self,
             canvas: Image.Image,
             text: str,
             origin: Tuple[int, int],
             size: int,
             fill: FillStyle) -> None: ...

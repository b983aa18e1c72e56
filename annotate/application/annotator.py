from __future__ import annotations

from PIL import Image

from annotate.application.renderer import render_layout
from annotate.domain.fill import FillStyle
from annotate.domain.fitting import FitResult, find_fitting_size
from annotate.domain.geometry import BoundingBox
from annotate.errors import TextDoesNotFitError
from annotate.ports.logger import Logger
from annotate.ports.metrics import GlyphMetrics
from annotate.ports.rasterizer import TextRasterizer


class Annotator:
    """
    Fits text into a box and draws it. Only talks to ports, so the metrics and
    the rasterizer can be swapped for fakes in tests.
    """

    def __init__(self,
                 logger: Logger,
                 metrics: GlyphMetrics,
                 rasterizer: TextRasterizer) -> None:
        self.logger = logger
        self.metrics = metrics
        self.rasterizer = rasterizer

    def fit(self,
            text: str,
            box: BoundingBox,
            max_font_size: int,
            line_height: float,
            strict: bool = False) -> FitResult:
        result = find_fitting_size(text, box, max_font_size, self.metrics, line_height)
        layout = result.layout
        if not layout.fits:
            if strict:
                raise TextDoesNotFitError(layout, box.height)
            self.logger.warning(
                f"text overflows the {box.width}x{box.height} box even at size "
                f"{layout.font_size} ({layout.height}px tall); rendering anyway"
            )
        self.logger.log(
            f"fit size {layout.font_size} (max {max_font_size}) with "
            f"{len(layout.lines)} line(s) after {result.probes} probe(s)"
        )
        return result

    def annotate(self,
                 source: Image.Image,
                 text: str,
                 box: BoundingBox,
                 fill: FillStyle,
                 max_font_size: int,
                 line_height: float,
                 strict: bool = False) -> Image.Image:
        layout = self.fit(text, box, max_font_size, line_height, strict).layout
        return render_layout(layout, source, fill, self.rasterizer)

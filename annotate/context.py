from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from PIL import Image

from annotate.adapters.fonttools_metrics import FontToolsMetrics, ParsedFont, load_font
from annotate.adapters.logging_logger import LoggingLogger, configure_logging
from annotate.adapters.pillow_image_codec import PillowImageCodec
from annotate.adapters.pillow_text_rasterizer import PillowTextRasterizer
from annotate.application.annotator import Annotator
from annotate.config import Config, DEFAULT_DPI, DEFAULT_LINE_HEIGHT, DEFAULT_MAX_FONT_SIZE
from annotate.domain.fill import BLACK, FillStyle, ImageFill, SolidColor
from annotate.domain.fitting import FitResult
from annotate.domain.geometry import BoundingBox
from annotate.errors import ContextNotReadyError
from annotate.ports.image_codec import ImageCodec
from annotate.ports.logger import Logger


@dataclass(frozen=True, eq=False)
class AnnotationContext:
    """
    Everything needed to annotate an image, bundled as one immutable value.

    Each ``with_*`` method returns a new context, so a half-configured context
    can be shared and specialised without affecting other users. A failed
    ``with_*_path`` call raises and leaves the original context as it was.
    """
    source: Optional[Image.Image] = None
    font: Optional[ParsedFont] = None
    max_font_size: int = DEFAULT_MAX_FONT_SIZE
    dpi: float = DEFAULT_DPI
    line_height: float = DEFAULT_LINE_HEIGHT
    fill: FillStyle = BLACK
    strict_fit: bool = False

    @classmethod
    def from_config(cls, cfg: Config) -> "AnnotationContext":
        configure_logging(cfg.log_level)
        ctx = (cls()
               .with_max_font_size(cfg.max_font_size)
               .with_dpi(cfg.dpi)
               .with_line_height(cfg.line_height)
               .with_fill_color(*cfg.fill_color)
               .with_strict_fit(cfg.strict_fit))
        if cfg.font_path:
            ctx = ctx.with_font_path(cfg.font_path)
        return ctx

    # --- source image ---
    def with_source(self, image: Image.Image) -> "AnnotationContext":
        return replace(self, source=image)

    def with_source_path(self, path: Path, codec: Optional[ImageCodec] = None) -> "AnnotationContext":
        """Only .png, .jpg and .jpeg are accepted."""
        image = (codec or PillowImageCodec()).load(Path(path))
        return replace(self, source=image)

    # --- font ---
    def with_font(self, font: ParsedFont) -> "AnnotationContext":
        return replace(self, font=font)

    def with_font_path(self, path: Path, index: int = 0) -> "AnnotationContext":
        """TrueType or TrueType Collection; collections use face ``index``."""
        return replace(self, font=load_font(Path(path), index))

    # --- sizing ---
    def with_max_font_size(self, size: int) -> "AnnotationContext":
        """The chosen size may end up smaller, never larger."""
        if size < 1:
            raise ValueError(f"max font size must be at least 1, got {size}")
        return replace(self, max_font_size=int(size))

    def with_dpi(self, dpi: float) -> "AnnotationContext":
        if dpi <= 0:
            raise ValueError(f"dpi must be positive, got {dpi}")
        return replace(self, dpi=float(dpi))

    def with_line_height(self, ratio: float) -> "AnnotationContext":
        """
        Gap between lines in em. It scales with the fitted size: with a ratio of
        0.5 and a fitted size of 60, the gap is 30 points.
        """
        if ratio < 0:
            raise ValueError(f"line height must not be negative, got {ratio}")
        return replace(self, line_height=float(ratio))

    def with_strict_fit(self, strict: bool = True) -> "AnnotationContext":
        return replace(self, strict_fit=strict)

    # --- fill ---
    def with_fill_color(self, r: int, g: int, b: int, a: int = 255) -> "AnnotationContext":
        return replace(self, fill=SolidColor(r, g, b, a))

    def with_fill_image(self, image: Image.Image) -> "AnnotationContext":
        return replace(self, fill=ImageFill(image))

    # --- operations ---
    def annotator(self, logger: Optional[Logger] = None) -> Annotator:
        if self.font is None:
            raise ContextNotReadyError("no font set; call with_font or with_font_path first")
        return Annotator(logger or LoggingLogger(),
                         FontToolsMetrics(self.font, self.dpi),
                         PillowTextRasterizer(self.font, self.dpi))

    def fit(self, text: str, box: BoundingBox, logger: Optional[Logger] = None) -> FitResult:
        return self.annotator(logger).fit(text, box, self.max_font_size, self.line_height, self.strict_fit)

    def write_text(self, text: str, box: BoundingBox, logger: Optional[Logger] = None) -> Image.Image:
        """Return a new image with ``text`` fitted into ``box``. The source is not modified."""
        if self.source is None:
            raise ContextNotReadyError("no source image set; call with_source or with_source_path first")
        return self.annotator(logger).annotate(self.source, text, box, self.fill,
                                               self.max_font_size, self.line_height, self.strict_fit)

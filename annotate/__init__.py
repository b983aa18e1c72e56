"""Fit wrapped text into a box on an image and draw it."""
from annotate.adapters.fonttools_metrics import ParsedFont, load_font, parse_font
from annotate.config import Config, ConfigManager
from annotate.context import AnnotationContext
from annotate.domain.fill import FillStyle, ImageFill, SolidColor
from annotate.domain.fitting import FitResult, find_fitting_size, layout_text, word_width
from annotate.domain.geometry import BoundingBox, Layout, Line
from annotate.errors import (
    AnnotateError,
    ContextNotReadyError,
    FontLoadError,
    FontParseError,
    ImageLoadError,
    RenderError,
    TextDoesNotFitError,
    UnsupportedFormatError,
)

__all__ = [
    "AnnotateError", "AnnotationContext", "BoundingBox", "Config", "ConfigManager",
    "ContextNotReadyError", "FillStyle", "FitResult", "FontLoadError", "FontParseError",
    "ImageFill", "ImageLoadError", "Layout", "Line", "ParsedFont", "RenderError",
    "SolidColor", "TextDoesNotFitError", "UnsupportedFormatError",
    "find_fitting_size", "layout_text", "load_font", "parse_font", "word_width",
]

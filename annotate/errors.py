from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PIL import Image
    from annotate.domain.geometry import Layout


class AnnotateError(Exception):
    """Base class for everything this package raises on purpose."""


class UnsupportedFormatError(AnnotateError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"unsupported format: {extension}")


class ImageLoadError(AnnotateError):
    pass


class FontLoadError(AnnotateError):
    pass


class FontParseError(AnnotateError):
    pass


class ContextNotReadyError(AnnotateError):
    pass


class RenderError(AnnotateError):
    """Drawing stopped part way. ``partial`` holds whatever was drawn so far."""

    def __init__(self, message: str, partial: Optional["Image.Image"] = None):
        super().__init__(message)
        self.partial = partial


class TextDoesNotFitError(AnnotateError):
    def __init__(self, layout: "Layout", box_height: int):
        self.layout = layout
        super().__init__(
            f"text needs {layout.height}px at size {layout.font_size} but the box is {box_height}px tall"
        )

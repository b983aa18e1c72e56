from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

from PIL import Image


@dataclass(frozen=True)
class SolidColor:
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            v = getattr(self, name)
            if not 0 <= v <= 255:
                raise ValueError(f"{name} must be in 0..255, got {v}")

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class ImageFill:
    """Glyph coverage samples this image, aligned to the canvas origin."""
    image: Image.Image


FillStyle = Union[SolidColor, ImageFill]

BLACK = SolidColor(0, 0, 0)

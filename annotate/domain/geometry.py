from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class BoundingBox:
    """Pixel rectangle the text has to fit in."""
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"box size must be non-negative, got {self.width}x{self.height}")


@dataclass
class Line:
    words: List[str] = field(default_factory=list)
    width: int = 0
    x: int = 0
    y: int = 0
    # distance from this baseline to the one above; the first line uses the font size
    base_to_base_height: int = 0

    @property
    def text(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True)
class Layout:
    font_size: int
    lines: Tuple[Line, ...]
    height: int
    fits: bool

    @property
    def text(self) -> List[str]:
        return [ln.text for ln in self.lines]

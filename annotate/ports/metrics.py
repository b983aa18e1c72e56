from __future__ import annotations
from typing import Protocol

class GlyphMetrics(Protocol):
    """Pixel measurements for single code points at a size in points."""
    def advance_width(self, char: str, size: int) -> int: ...
    def kerning(self, left: str, right: str, size: int) -> int: ...

from __future__ import annotations
import io
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple

from fontTools.ttLib import TTFont, TTLibError

from annotate.errors import FontLoadError, FontParseError
from annotate.ports.metrics import GlyphMetrics

NOTDEF = ".notdef"
_PARSE_ERRORS = (TTLibError, KeyError, AssertionError, ValueError, IndexError, EOFError, struct.error)
POINTS_PER_INCH = 72.0


@dataclass(frozen=True, eq=False)
class ParsedFont:
    """Raw font bytes plus the tables needed for measuring text."""
    data: bytes
    index: int
    units_per_em: int
    cmap: Dict[int, str]
    advances: Dict[str, int]
    kern_pairs: Dict[Tuple[str, str], int] = field(default_factory=dict)

    def glyph_name(self, char: str) -> str:
        return self.cmap.get(ord(char), NOTDEF)


def _is_horizontal_pair_table(sub) -> bool:
    coverage = getattr(sub, "coverage", 0)
    if getattr(sub, "apple", False):
        # high byte flags: 0x80 vertical, 0x40 cross-stream, 0x20 variation
        return not coverage & 0xE0
    # bit 0 horizontal, bit 1 minimum values, bit 2 cross-stream
    return bool(coverage & 0x1) and not coverage & 0x6


def _kern_pairs(tt: TTFont) -> Dict[Tuple[str, str], int]:
    if "kern" not in tt:
        return {}
    pairs: Dict[Tuple[str, str], int] = {}
    for sub in tt["kern"].kernTables:
        # format 0 only; anything else has no plain pair dict
        table = getattr(sub, "kernTable", None)
        if not table or not _is_horizontal_pair_table(sub):
            continue
        override = not getattr(sub, "apple", False) and getattr(sub, "coverage", 0) & 0x8
        for pair, value in table.items():
            pairs[pair] = value if override else pairs.get(pair, 0) + value
    return pairs


def parse_font(data: bytes, index: int = 0) -> ParsedFont:
    """Parse TrueType (or the ``index``-th face of a collection) from bytes."""
    try:
        with TTFont(io.BytesIO(data), fontNumber=index) as tt:
            units_per_em = tt["head"].unitsPerEm
            cmap = dict(tt.getBestCmap() or {})
            advances = {name: adv for name, (adv, _lsb) in tt["hmtx"].metrics.items()}
            kern = _kern_pairs(tt)
    except _PARSE_ERRORS as e:
        raise FontParseError(f"could not parse font: {e}") from e
    return ParsedFont(data=data, index=index, units_per_em=units_per_em,
                      cmap=cmap, advances=advances, kern_pairs=kern)


def load_font(path: Path, index: int = 0) -> ParsedFont:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise FontLoadError(f"could not read font {path}: {e}") from e
    return parse_font(data, index)


class FontToolsMetrics(GlyphMetrics):
    """Scales design units to pixels: ``units * size * dpi / 72 / unitsPerEm``."""

    def __init__(self, font: ParsedFont, dpi: float):
        self.font = font
        self.dpi = dpi

    def _to_pixels(self, units: int, size: int) -> int:
        pixels_per_em = size * self.dpi / POINTS_PER_INCH
        return int(round(units * pixels_per_em / self.font.units_per_em))

    def advance_width(self, char: str, size: int) -> int:
        name = self.font.glyph_name(char)
        units = self.font.advances.get(name, self.font.advances.get(NOTDEF, 0))
        return self._to_pixels(units, size)

    def kerning(self, left: str, right: str, size: int) -> int:
        pair = (self.font.glyph_name(left), self.font.glyph_name(right))
        return self._to_pixels(self.font.kern_pairs.get(pair, 0), size)

from __future__ import annotations
import io
from typing import Dict, List, Sequence, Tuple

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTCollection, TTFont, newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0
from PIL import Image

from annotate import parse_font

UPEM = 1000
LETTER_ADVANCE = 600
WIDE_LETTER_ADVANCE = 800
SPACE_ADVANCE = 250
NOTDEF_ADVANCE = 500
KERN_AV = -100
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class FixedMetrics:
    """Every character is ``advance`` pixels wide at any size; no kerning."""

    def __init__(self, advance: int = 10):
        self.advance = advance

    def advance_width(self, char: str, size: int) -> int:
        return self.advance

    def kerning(self, left: str, right: str, size: int) -> int:
        return 0


class HalfEmMetrics:
    """Every character is half the font size wide, rounded down."""

    def advance_width(self, char: str, size: int) -> int:
        return size // 2

    def kerning(self, left: str, right: str, size: int) -> int:
        return 0


class RecordingLogger:
    def __init__(self) -> None:
        self.messages: List[str] = []
        self.warnings: List[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)


def _box_glyph(advance: int):
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((advance - 50, 700))
    pen.lineTo((advance - 50, 0))
    pen.closePath()
    return pen.glyph()


def _kern_subtable(coverage: int, pairs: Dict[Tuple[str, str], int]) -> KernTable_format_0:
    sub = KernTable_format_0()
    sub.version = 0
    sub.coverage = coverage
    sub.kernTable = dict(pairs)
    return sub


def build_test_font(letter_advance: int = LETTER_ADVANCE,
                    extra_kern: Sequence[Tuple[int, Dict[Tuple[str, str], int]]] = ()) -> bytes:
    """
    Square glyphs for ASCII letters, a space, and an A/V kerning pair.

    ``extra_kern`` appends (coverage, pairs) subtables after the horizontal one.
    """
    names = [".notdef", "space"] + list(LETTERS)
    fb = FontBuilder(UPEM, isTTF=True)
    fb.setupGlyphOrder(names)
    cmap = {ord(" "): "space"}
    cmap.update({ord(c): c for c in LETTERS})
    fb.setupCharacterMap(cmap)

    glyphs = {".notdef": _box_glyph(NOTDEF_ADVANCE), "space": TTGlyphPen(None).glyph()}
    glyphs.update({c: _box_glyph(letter_advance) for c in LETTERS})
    fb.setupGlyf(glyphs)

    metrics = {".notdef": (NOTDEF_ADVANCE, 50), "space": (SPACE_ADVANCE, 0)}
    metrics.update({c: (letter_advance, 50) for c in LETTERS})
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Annotate Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    kern = newTable("kern")
    kern.version = 0
    kern.kernTables = [_kern_subtable(1, {("A", "V"): KERN_AV})]
    kern.kernTables += [_kern_subtable(cov, pairs) for cov, pairs in extra_kern]
    fb.font["kern"] = kern

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    return build_test_font()


def build_test_collection(*advances: int) -> bytes:
    """A TrueType Collection with one face per letter advance, in order."""
    coll = TTCollection()
    coll.fonts = [TTFont(io.BytesIO(build_test_font(adv))) for adv in advances]
    buf = io.BytesIO()
    coll.save(buf)
    return buf.getvalue()


@pytest.fixture(scope="session")
def collection_bytes() -> bytes:
    return build_test_collection(LETTER_ADVANCE, WIDE_LETTER_ADVANCE)


@pytest.fixture(scope="session")
def test_font(font_bytes):
    return parse_font(font_bytes)


@pytest.fixture
def white_image():
    return Image.new("RGB", (320, 160), (255, 255, 255))


@pytest.fixture
def logger():
    return RecordingLogger()

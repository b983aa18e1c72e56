from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List

from annotate.domain.geometry import BoundingBox, Layout, Line
from annotate.ports.metrics import GlyphMetrics


@dataclass(frozen=True)
class FitResult:
    layout: Layout
    probes: int  # number of layouts computed while searching

    @property
    def font_size(self) -> int:
        return self.layout.font_size


def word_width(metrics: GlyphMetrics, word: str, size: int) -> int:
    """Advance widths of every character plus kerning between neighbours."""
    width = 0
    last = len(word) - 1
    for i, ch in enumerate(word):
        width += metrics.advance_width(ch, size)
        if i != last:
            width += metrics.kerning(ch, word[i + 1], size)
    return width


def layout_text(text: str,
                box: BoundingBox,
                size: int,
                metrics: GlyphMetrics,
                line_height: float) -> Layout:
    """
    Greedy word wrap of ``text`` into ``box`` at ``size``.

    Explicit newlines always start a new line. A word wider than the box is
    kept whole on a line of its own. Baselines start at ``box.y`` and step down
    by ``size + floor(line_height * size)``; the total height also reserves one
    gap below the last line for descenders.
    """
    space = word_width(metrics, " ", size)
    lines: List[Line] = []
    for hard_line in text.split("\n"):
        lines.append(Line())
        for word in hard_line.split(" "):
            w = word_width(metrics, word, size)
            if lines[-1].words and lines[-1].width + space + w > box.width:
                lines.append(Line())
            lines[-1].words.append(word)
            lines[-1].width += space + w

    gap = int(math.floor(line_height * size))
    height = 0
    for i, line in enumerate(lines):
        line.x = box.x
        if i == 0:
            line.y = box.y
            line.base_to_base_height = size
        else:
            line.base_to_base_height = size + gap
            line.y = lines[i - 1].y + line.base_to_base_height
        height += line.base_to_base_height
    height += gap

    return Layout(font_size=size, lines=tuple(lines), height=height, fits=height <= box.height)


def find_fitting_size(text: str,
                      box: BoundingBox,
                      max_font_size: int,
                      metrics: GlyphMetrics,
                      line_height: float) -> FitResult:
    """
    Largest integer size <= ``max_font_size`` whose layout fits ``box``.

    The maximum is tried first. Otherwise the search bisects between the
    largest size known to fit (``low``) and the smallest known not to
    (``high``) until they are adjacent. When even size 1 overflows, that
    overflowing layout is returned with ``fits`` set to False.
    """
    if max_font_size < 1:
        raise ValueError(f"max font size must be at least 1, got {max_font_size}")

    probes = 0

    def probe(size: int) -> Layout:
        nonlocal probes
        probes += 1
        return layout_text(text, box, size, metrics, line_height)

    first = probe(max_font_size)
    if first.fits:
        return FitResult(first, probes)

    low, high = 0, max_font_size
    best = None
    smallest_misfit = first
    while high - low > 1:
        mid = (low + high + 1) // 2
        candidate = probe(mid)
        if candidate.fits:
            low, best = mid, candidate
        else:
            high, smallest_misfit = mid, candidate

    if best is None:
        # high == 1 here, so this is the size-1 layout
        return FitResult(smallest_misfit, probes)
    return FitResult(best, probes)

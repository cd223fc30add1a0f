"""
contrast.py
───────────
WCAG 2.0 relative luminance, contrast ratio and conformance checks.

  • https://www.w3.org/TR/WCAG20/#relativeluminancedef
  • https://www.w3.org/TR/WCAG20/#contrast-ratiodef
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .color_utils import ColorValue, RGBColor

# ── Thresholds ─────────────────────────────────────────────────────────────────
AA_NORMAL  = 4.5
AA_LARGE   = 3.0
AAA_NORMAL = 7.0
AAA_LARGE  = 4.5

ColorLike = Union[RGBColor, ColorValue]


def _rgb(color: ColorLike) -> RGBColor:
    return color.rgb if isinstance(color, ColorValue) else color


# ── Luminance / ratio ──────────────────────────────────────────────────────────

def relative_luminance(color: ColorLike) -> float:
    """
    WCAG relative luminance (0 = absolute black, 1 = absolute white) of a
    colour whose channels are 0–1 fractions.
    """
    def _lin(c: float) -> float:
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    rgb = _rgb(color)
    return 0.2126 * _lin(rgb.r) + 0.7152 * _lin(rgb.g) + 0.0722 * _lin(rgb.b)


def contrast_ratio(first: ColorLike, second: ColorLike) -> float:
    """Contrast ratio between two colours, 1.0 – 21.0, order-independent."""
    lum_a = relative_luminance(first)
    lum_b = relative_luminance(second)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


# ── Conformance ────────────────────────────────────────────────────────────────

def meets_wcag_aa(ratio: float, large_text: bool = False) -> bool:
    """AA: 4.5:1 for normal text, 3:1 for large text."""
    return ratio >= (AA_LARGE if large_text else AA_NORMAL)


def meets_wcag_aaa(ratio: float, large_text: bool = False) -> bool:
    """AAA: 7:1 for normal text, 4.5:1 for large text."""
    return ratio >= (AAA_LARGE if large_text else AAA_NORMAL)


def contrast_label(ratio: float) -> str:
    """Short label for a ratio: ``AAA``, ``AA``, ``AA Large`` or ``Fail``."""
    if ratio >= AAA_NORMAL:
        return "AAA"
    if ratio >= AA_NORMAL:
        return "AA"
    if ratio >= AA_LARGE:
        return "AA Large"
    return "Fail"


def wcag_level(ratio: float) -> str:
    """Level wording used in the text contrast reports."""
    if ratio >= AAA_NORMAL:
        return "AAA ✓"
    if ratio >= AA_NORMAL:
        return "AA ✓"
    if ratio >= AA_LARGE:
        return "AA Large ✓"
    return "Does not meet WCAG standards"


# ── Aggregate statistics ───────────────────────────────────────────────────────

@dataclass
class ContrastStats:
    aaa:  int = 0
    aa:   int = 0
    fail: int = 0

    @property
    def total(self) -> int:
        return self.aaa + self.aa + self.fail


def contrast_stats(pairs: Iterable[Tuple[ColorLike, ColorLike]]) -> ContrastStats:
    """Tally (background, foreground) pairs into AAA / AA / fail buckets."""
    stats = ContrastStats()
    for background, foreground in pairs:
        ratio = contrast_ratio(background, foreground)
        if ratio >= AAA_NORMAL:
            stats.aaa += 1
        elif ratio >= AA_NORMAL:
            stats.aa += 1
        else:
            stats.fail += 1
    return stats

"""
generator.py
────────────
Parametric palette generator.

Strategy
────────
  1. Parse the base colour and keep its hue.
  2. Lay out N lightness values on an ease-in-out curve between 95 % and 5 %,
     so more stops land in the mid-range where the eye is most sensitive.
  3. Scale the base saturation per stop: damped near white and near black,
     a slight boost in between.
  4. For every background derive a near-white and a near-black foreground
     tinted with the same hue, score both with the WCAG contrast ratio and
     recommend the stronger one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .color_utils import (
    ColorInput,
    HSLColor,
    color_value_from_hsl,
    parse_color,
)
from .contrast import contrast_ratio, meets_wcag_aa, meets_wcag_aaa
from .palette import (
    Clock,
    ColorStop,
    ForegroundColor,
    PaletteMetadata,
    ParametricPalette,
    Recommended,
    iso_timestamp,
)

# ── Scale constants ────────────────────────────────────────────────────────────
LIGHTEST = 95.0           # % lightness of stop 0
DARKEST  = 5.0            # % lightness of the last stop

LIGHT_FG_LIGHTNESS  = 0.98
LIGHT_FG_SATURATION = 0.10   # fraction of the background saturation kept
DARK_FG_LIGHTNESS   = 0.08
DARK_FG_SATURATION  = 0.15

DEFAULT_STOPS = 16


@dataclass(frozen=True)
class ForegroundCandidate:
    color:    HSLColor
    contrast: float


# ── Lightness scale ────────────────────────────────────────────────────────────

def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - ((-2 * t + 2) ** 2) / 2


def generate_lightness_scale(total_stops: int) -> List[float]:
    """
    Return *total_stops* lightness fractions, lightest first.

    A single stop sits at position 0 (the lightest end).
    """
    span = LIGHTEST - DARKEST
    lightnesses: List[float] = []
    for i in range(total_stops):
        t = i / (total_stops - 1) if total_stops > 1 else 0.0
        lightnesses.append((LIGHTEST - ease_in_out_quad(t) * span) / 100)
    return lightnesses


# ── Saturation ─────────────────────────────────────────────────────────────────

def adjust_saturation(base_saturation: float, lightness: float) -> float:
    """Damp saturation near white and black; nudge it up in the mid-range."""
    if lightness > 0.9:
        adjusted = base_saturation * (1 - (lightness - 0.9) * 8)
        return min(base_saturation, max(0.0, adjusted))
    if lightness < 0.2:
        return base_saturation * (0.5 + lightness * 2.5)
    return min(base_saturation * 1.1, 1.0)


# ── Foregrounds ────────────────────────────────────────────────────────────────

def generate_foreground_colors(
    background: HSLColor,
) -> Tuple[ForegroundCandidate, ForegroundCandidate]:
    """Return the (light, dark) foreground candidates for *background*."""
    bg = color_value_from_hsl(background)

    light = HSLColor(background.h, background.s * LIGHT_FG_SATURATION, LIGHT_FG_LIGHTNESS)
    dark  = HSLColor(background.h, background.s * DARK_FG_SATURATION, DARK_FG_LIGHTNESS)

    return (
        ForegroundCandidate(light, contrast_ratio(bg, color_value_from_hsl(light))),
        ForegroundCandidate(dark, contrast_ratio(bg, color_value_from_hsl(dark))),
    )


def recommend_foreground(light_contrast: float, dark_contrast: float) -> Recommended:
    """``light`` only when it strictly beats ``dark``; ties go to ``dark``."""
    return "light" if light_contrast > dark_contrast else "dark"


def _foreground(candidate: ForegroundCandidate) -> ForegroundColor:
    return ForegroundColor(
        value=color_value_from_hsl(candidate.color),
        contrast=candidate.contrast,
        wcag_aa=meets_wcag_aa(candidate.contrast),
        wcag_aaa=meets_wcag_aaa(candidate.contrast),
    )


# ── Palette ────────────────────────────────────────────────────────────────────

def generate_palette(
    color: ColorInput,
    name: str = "palette",
    total_stops: int = DEFAULT_STOPS,
    clock: Optional[Clock] = None,
) -> ParametricPalette:
    """
    Build a ``ParametricPalette`` of *total_stops* stops from *color*.

    Raises
    ------
    InvalidColorError
        If *color* cannot be parsed.
    """
    base = parse_color(color)

    stops: List[ColorStop] = []
    for index, lightness in enumerate(generate_lightness_scale(total_stops)):
        background = HSLColor(base.h, adjust_saturation(base.s, lightness), lightness)
        light, dark = generate_foreground_colors(background)
        stops.append(ColorStop(
            stop=index,
            background=color_value_from_hsl(background),
            light=_foreground(light),
            dark=_foreground(dark),
            recommended_foreground=recommend_foreground(light.contrast, dark.contrast),
        ))

    return ParametricPalette(
        name=name,
        base_color=color_value_from_hsl(base),
        stops=tuple(stops),
        metadata=PaletteMetadata(
            generated_at=iso_timestamp(clock),
            total_stops=total_stops,
        ),
    )

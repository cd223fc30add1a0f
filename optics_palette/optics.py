"""
optics.py
─────────
Optics scale generator.

The Optics scale is a fixed, hand-tuned 19-stop ladder (``plus-max`` …
``base`` … ``minus-max``).  Every stop carries authored lightness values for
light mode and dark mode (background, ``on`` and ``on-alt``); only hue and
saturation come from the base colour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .color_utils import ColorInput, color_value_from_hsl, create_color_value, parse_color
from .contrast import contrast_ratio
from .palette import (
    Clock,
    ModeContrast,
    OpticsBaseColor,
    OpticsColorStop,
    OpticsColorValue,
    OpticsPalette,
    PaletteMetadata,
    iso_timestamp,
)


@dataclass(frozen=True)
class ModeLightness:
    """Lightness percentages (0–100) for one mode of one stop."""

    background: float
    on:         float
    on_alt:     float


@dataclass(frozen=True)
class OpticsStopConfig:
    name:  str
    light: ModeLightness
    dark:  ModeLightness


def _stop(name: str, light: Tuple[float, float, float],
          dark: Tuple[float, float, float]) -> OpticsStopConfig:
    return OpticsStopConfig(name, ModeLightness(*light), ModeLightness(*dark))


# ── Scale table ────────────────────────────────────────────────────────────────
#                    name            light (bg, on, alt)   dark (bg, on, alt)
OPTICS_SCALE: Tuple[OpticsStopConfig, ...] = (
    _stop("plus-max",    (100,   0,  20),      (12, 100,  78)),
    _stop("plus-eight",  ( 98,   4,  24),      (14,  88,  70)),
    _stop("plus-seven",  ( 96,   8,  28),      (16,  80,  64)),
    _stop("plus-six",    ( 94,  16,  26),      (20,  72,  96)),
    _stop("plus-five",   ( 90,  20,  40),      (24,  72,  86)),
    _stop("plus-four",   ( 84,  24,   4),      (26,  80,  92)),
    _stop("plus-three",  ( 70,  20,  10),      (29,  78,  98)),
    _stop("plus-two",    ( 64,  16,   6),      (32,  80,  92)),
    _stop("plus-one",    ( 45, 100,  95),      (35,  80,  98)),
    _stop("base",        ( 40, 100,  88),      (38, 100,  84)),
    _stop("minus-one",   ( 36,  94,  82),      (40,  98,  90)),
    _stop("minus-two",   ( 32,  90,  78),      (45,  98,  92)),
    _stop("minus-three", ( 28,  86,  74),      (48,  98,  96)),
    _stop("minus-four",  ( 24,  84,  72),      (52,   2,   2)),
    _stop("minus-five",  ( 20,  88,  78),      (64,   2,  20)),
    _stop("minus-six",   ( 16,  94,  82),      (72,   8,  26)),
    _stop("minus-seven", (  8,  96,  84),      (80,   8,  34)),
    _stop("minus-eight", (  4,  98,  86),      (88,   4,  38)),
    _stop("minus-max",   (  0, 100,  88),      (100,  0,  38)),
)

OPTICS_STOP_NAMES: Tuple[str, ...] = tuple(cfg.name for cfg in OPTICS_SCALE)


def _build_stop(cfg: OpticsStopConfig, h: float, s: float) -> OpticsColorStop:
    background = OpticsColorValue(
        light=create_color_value(h, s, cfg.light.background),
        dark=create_color_value(h, s, cfg.dark.background),
    )
    on = OpticsColorValue(
        light=create_color_value(h, s, cfg.light.on),
        dark=create_color_value(h, s, cfg.dark.on),
    )
    on_alt = OpticsColorValue(
        light=create_color_value(h, s, cfg.light.on_alt),
        dark=create_color_value(h, s, cfg.dark.on_alt),
    )
    return OpticsColorStop(
        name=cfg.name,
        background=background,
        on=on,
        on_alt=on_alt,
        light_mode_contrast=ModeContrast(
            on=contrast_ratio(background.light, on.light),
            on_alt=contrast_ratio(background.light, on_alt.light),
        ),
        dark_mode_contrast=ModeContrast(
            on=contrast_ratio(background.dark, on.dark),
            on_alt=contrast_ratio(background.dark, on_alt.dark),
        ),
    )


def generate_optics_palette(
    color: ColorInput,
    name: str = "primary",
    clock: Optional[Clock] = None,
) -> OpticsPalette:
    """
    Build the 19-stop ``OpticsPalette`` for *color*.

    Raises
    ------
    InvalidColorError
        If *color* cannot be parsed.
    """
    base = parse_color(color)
    h = base.h
    s = base.s * 100

    return OpticsPalette(
        name=name,
        base_color=OpticsBaseColor(
            h=h,
            s=s,
            l=base.l * 100,
            value=color_value_from_hsl(base),
        ),
        stops=tuple(_build_stop(cfg, h, s) for cfg in OPTICS_SCALE),
        metadata=PaletteMetadata(
            generated_at=iso_timestamp(clock),
            total_stops=len(OPTICS_SCALE),
            format="optics",
        ),
    )

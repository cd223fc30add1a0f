"""
color_utils.py
──────────────
Colour model adapter: turns user input (hex, ``rgb()``/``hsl()`` strings,
named CSS colours, or an ``{h, s, l}`` mapping) into an internal HSL colour,
and projects any HSL colour into the hex / RGB / HSL triple used by every
palette stop.

String parsing is delegated to Pillow's ``ImageColor`` (the same parser
ReportLab and PIL use for colour specifiers); HSL ↔ RGB maths uses the
standard ``colorsys`` module in HLS order.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from typing import Any, Mapping, Union

from PIL import ImageColor


# ── Errors ─────────────────────────────────────────────────────────────────────

class InvalidColorError(ValueError):
    """Raised when an input cannot be read as any supported colour syntax."""


# ── Colour value types ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees (0–360), saturation and lightness as 0–1 fractions."""

    h: float
    s: float
    l: float

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True)
class RGBColor:
    """Red, green and blue channels as 0–1 fractions."""

    r: float
    g: float
    b: float

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class ColorValue:
    """One colour projected into HSL, RGB and hex.  ``hex`` derives from ``rgb``."""

    hsl: HSLColor
    rgb: RGBColor
    hex: str

    def to_dict(self) -> dict:
        return {
            "hsl": self.hsl.to_dict(),
            "rgb": self.rgb.to_dict(),
            "hex": self.hex,
        }


ColorInput = Union[str, HSLColor, Mapping[str, Any]]

# ``hsl(217, 91%, 60%)`` / ``hsl(217deg 91% 60%)`` – read exactly so the hue
# isn't quantised through an 8-bit RGB round-trip.
_HSL_RE = re.compile(
    r"^hsla?\(\s*(-?\d+(?:\.\d+)?)(?:deg)?\s*[,\s]\s*"
    r"(\d+(?:\.\d+)?)%\s*[,\s]\s*"
    r"(\d+(?:\.\d+)?)%\s*(?:[,/]\s*[\d.]+%?\s*)?\)$",
    re.IGNORECASE,
)


# ── Parsing ────────────────────────────────────────────────────────────────────

def parse_color(value: ColorInput) -> HSLColor:
    """
    Parse *value* into an ``HSLColor``.

    Strings may be any colour specifier Pillow understands (``#3b82f6``,
    ``#fff``, ``rgb(59, 130, 246)``, ``hsl(217, 91%, 60%)``, ``navy`` …).
    Mappings and ``HSLColor`` instances supply ``h``/``s``/``l`` directly;
    ``s`` or ``l`` above 1 are taken as percentages.

    Raises
    ------
    InvalidColorError
        If the input cannot be interpreted as a colour.
    """
    if isinstance(value, str):
        return _parse_color_string(value)
    if isinstance(value, HSLColor):
        return _normalise_hsl(value.h, value.s, value.l, value)
    if isinstance(value, Mapping):
        try:
            h, s, l = value["h"], value["s"], value["l"]
        except KeyError as exc:
            raise InvalidColorError(f"Invalid HSL input: {dict(value)!r}") from exc
        return _normalise_hsl(h, s, l, value)
    raise InvalidColorError(f"Invalid color input: {value!r}")


def _parse_color_string(text: str) -> HSLColor:
    cleaned = text.strip()
    match = _HSL_RE.match(cleaned)
    if match:
        h, s, l = (float(g) for g in match.groups())
        if s > 100 or l > 100:
            raise InvalidColorError(f"Invalid color input: {text}")
        return _normalise_hsl(h, s / 100.0, l / 100.0, text)
    try:
        channels = ImageColor.getrgb(cleaned)
    except ValueError as exc:
        raise InvalidColorError(f"Invalid color input: {text}") from exc
    r, g, b = (min(255, max(0, c)) / 255.0 for c in channels[:3])
    return rgb_to_hsl(RGBColor(r, g, b))


def _normalise_hsl(h: Any, s: Any, l: Any, original: Any) -> HSLColor:
    try:
        h, s, l = float(h), float(s), float(l)
    except (TypeError, ValueError) as exc:
        raise InvalidColorError(f"Invalid HSL input: {original!r}") from exc
    if s > 1:
        s /= 100.0
    if l > 1:
        l /= 100.0
    if not (0.0 <= s <= 1.0 and 0.0 <= l <= 1.0) or not math.isfinite(h):
        raise InvalidColorError(f"Invalid HSL input: {original!r}")
    return HSLColor(h % 360.0, s, l)


# ── Conversions ────────────────────────────────────────────────────────────────

def hsl_to_rgb(color: HSLColor) -> RGBColor:
    """Convert an ``HSLColor`` to 0–1 RGB."""
    r, g, b = colorsys.hls_to_rgb((color.h % 360.0) / 360.0, color.l, color.s)
    return RGBColor(r, g, b)


def rgb_to_hsl(color: RGBColor) -> HSLColor:
    """Convert 0–1 RGB to an ``HSLColor`` (hue/saturation 0 for greys)."""
    h, l, s = colorsys.rgb_to_hls(color.r, color.g, color.b)
    if s == 0:
        h = 0.0
    return HSLColor(h * 360.0, s, l)


def rgb_to_hex(color: RGBColor) -> str:
    """Convert 0–1 RGB to a lower-case ``#rrggbb`` string."""
    return "#{:02x}{:02x}{:02x}".format(*(_to_byte(c) for c in (color.r, color.g, color.b)))


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Parse ``#rrggbb`` (or ``#rgb``) into 0–1 RGB."""
    try:
        r, g, b = ImageColor.getrgb(hex_color.strip())[:3]
    except (AttributeError, ValueError) as exc:
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}") from exc
    return RGBColor(r / 255.0, g / 255.0, b / 255.0)


def _to_byte(channel: float) -> int:
    return int(min(1.0, max(0.0, channel)) * 255 + 0.5)


# ── Colour value builders ──────────────────────────────────────────────────────

def color_value_from_hsl(color: HSLColor) -> ColorValue:
    """Project a fractional ``HSLColor`` into a full ``ColorValue``."""
    rgb = hsl_to_rgb(color)
    return ColorValue(hsl=color, rgb=rgb, hex=rgb_to_hex(rgb))


def create_color_value(h: float, s: float, l: float) -> ColorValue:
    """Build a ``ColorValue`` from hue in degrees and S/L as percentages (0–100)."""
    return color_value_from_hsl(HSLColor(h, s / 100.0, l / 100.0))

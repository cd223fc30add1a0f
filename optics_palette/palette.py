"""
palette.py
──────────
Palette data model shared by the generators and every exporter.

Two palette shapes exist:

  • ``ParametricPalette`` – N stops from the eased lightness scale, each with
    a near-white and a near-black foreground and a recommended one.
  • ``OpticsPalette``     – the fixed 19-stop Optics scale, each stop carrying
    independent light-mode / dark-mode background, ``on`` and ``on-alt``.

All records are frozen; ``to_dict`` produces the camelCase JSON layout the
exporters write to disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Literal, Optional, Tuple

from .color_utils import ColorValue

Clock = Callable[[], datetime]
Recommended = Literal["light", "dark"]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(clock: Optional[Clock] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = (clock or utc_now)()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ── Shared ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PaletteMetadata:
    generated_at: str
    total_stops:  int
    format:       Optional[str] = None

    def to_dict(self) -> dict:
        data = {"generatedAt": self.generated_at, "totalStops": self.total_stops}
        if self.format:
            data["format"] = self.format
        return data


# ── Parametric palette ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ForegroundColor:
    """A foreground candidate with its contrast against the stop background."""

    value:    ColorValue
    contrast: float
    wcag_aa:  bool
    wcag_aaa: bool

    @property
    def hex(self) -> str:
        return self.value.hex

    def to_dict(self) -> dict:
        data = self.value.to_dict()
        data.update(
            contrast=self.contrast,
            wcagAA=self.wcag_aa,
            wcagAAA=self.wcag_aaa,
        )
        return data


@dataclass(frozen=True)
class ColorStop:
    stop:                   int
    background:             ColorValue
    light:                  ForegroundColor
    dark:                   ForegroundColor
    recommended_foreground: Recommended

    @property
    def recommended(self) -> ForegroundColor:
        return self.light if self.recommended_foreground == "light" else self.dark

    def to_dict(self) -> dict:
        return {
            "stop": self.stop,
            "background": self.background.to_dict(),
            "foregrounds": {
                "light": self.light.to_dict(),
                "dark":  self.dark.to_dict(),
            },
            "recommendedForeground": self.recommended_foreground,
        }


@dataclass(frozen=True)
class ParametricPalette:
    name:       str
    base_color: ColorValue
    stops:      Tuple[ColorStop, ...]
    metadata:   PaletteMetadata

    def stop(self, index: int) -> ColorStop:
        return self.stops[index]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "baseColor": self.base_color.to_dict(),
            "stops": [s.to_dict() for s in self.stops],
            "metadata": self.metadata.to_dict(),
        }


# ── Optics palette ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class OpticsColorValue:
    light: ColorValue
    dark:  ColorValue

    def for_mode(self, mode: str) -> ColorValue:
        return self.dark if mode.lower() == "dark" else self.light

    def to_dict(self) -> dict:
        return {"light": self.light.to_dict(), "dark": self.dark.to_dict()}


@dataclass(frozen=True)
class ModeContrast:
    on:     float
    on_alt: float

    def to_dict(self) -> dict:
        return {"on": self.on, "onAlt": self.on_alt}


@dataclass(frozen=True)
class OpticsColorStop:
    name:                str
    background:          OpticsColorValue
    on:                  OpticsColorValue
    on_alt:              OpticsColorValue
    light_mode_contrast: ModeContrast
    dark_mode_contrast:  ModeContrast

    def contrast_for_mode(self, mode: str) -> ModeContrast:
        return self.dark_mode_contrast if mode.lower() == "dark" else self.light_mode_contrast

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "background": self.background.to_dict(),
            "on": self.on.to_dict(),
            "onAlt": self.on_alt.to_dict(),
            "lightModeContrast": self.light_mode_contrast.to_dict(),
            "darkModeContrast": self.dark_mode_contrast.to_dict(),
        }


@dataclass(frozen=True)
class OpticsBaseColor:
    """Base colour with hue in degrees and saturation / lightness in percent."""

    h:     float
    s:     float
    l:     float
    value: ColorValue

    @property
    def hex(self) -> str:
        return self.value.hex

    def to_dict(self) -> dict:
        data = {"h": self.h, "s": self.s, "l": self.l}
        data.update(self.value.to_dict())
        return data


@dataclass(frozen=True)
class OpticsPalette:
    name:       str
    base_color: OpticsBaseColor
    stops:      Tuple[OpticsColorStop, ...]
    metadata:   PaletteMetadata

    def stop(self, name: str) -> OpticsColorStop:
        for s in self.stops:
            if s.name == name:
                return s
        raise KeyError(f"Unknown Optics stop: {name}")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "baseColor": self.base_color.to_dict(),
            "stops": [s.to_dict() for s in self.stops],
            "metadata": self.metadata.to_dict(),
        }

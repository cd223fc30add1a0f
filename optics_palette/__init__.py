"""Optics Palette – accessible colour palette generator."""
from .color_utils import (
    ColorValue,
    HSLColor,
    InvalidColorError,
    RGBColor,
    create_color_value,
    parse_color,
)
from .contrast import contrast_ratio, meets_wcag_aa, meets_wcag_aaa, relative_luminance
from .generator import generate_palette
from .optics import OPTICS_STOP_NAMES, generate_optics_palette
from .palette import OpticsPalette, ParametricPalette
from .exporter import export_all
from .optics_exporter import export_optics_all
from .swatch_pdf import SwatchSheetBuilder
from .utils import load_config, build_palette_config

__all__ = [
    "ColorValue",
    "HSLColor",
    "RGBColor",
    "InvalidColorError",
    "parse_color",
    "create_color_value",
    "relative_luminance",
    "contrast_ratio",
    "meets_wcag_aa",
    "meets_wcag_aaa",
    "generate_palette",
    "generate_optics_palette",
    "OPTICS_STOP_NAMES",
    "ParametricPalette",
    "OpticsPalette",
    "export_all",
    "export_optics_all",
    "SwatchSheetBuilder",
    "load_config",
    "build_palette_config",
]

#!/usr/bin/env python3
"""
main.py
───────
Optics Palette – command-line entry point.

Usage examples
──────────────
  # 16-stop parametric palette with contrast-aware foregrounds
  python main.py generate "#3b82f6" --name brand

  # 19-stop Optics scale, light + dark Figma files and a PDF swatch sheet
  python main.py generate "#3b82f6" --name primary --optics --pdf

  # Several palettes from a config file
  python main.py batch --config examples/design_system.json

  # Check one colour pair
  python main.py analyze "#ffffff" "#3b82f6"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from optics_palette.color_utils import InvalidColorError, color_value_from_hsl, parse_color
from optics_palette.console import (
    print_analysis_result,
    print_base_color_info,
    print_completion,
    print_contrast_header,
    print_contrast_line,
    print_contrast_stats,
    print_error,
    print_export_header,
    print_figma_instructions,
    print_file_export,
    print_optics_contrast_sample,
    print_palette_summary,
    print_warning,
)
from optics_palette.contrast import contrast_ratio, contrast_stats, meets_wcag_aa, meets_wcag_aaa
from optics_palette.exporter import export_all
from optics_palette.generator import DEFAULT_STOPS, generate_palette
from optics_palette.optics import generate_optics_palette
from optics_palette.optics_exporter import export_optics_all, export_optics_mode
from optics_palette.swatch_pdf import SwatchSheetBuilder
from optics_palette.utils import MODES, build_palette_config, load_config, validate_stops

_EXPORT_LABELS = {
    "figma":           "Figma Variables",
    "figma_light":     "Figma Variables (Light)",
    "figma_dark":      "Figma Variables (Dark)",
    "contrast_report": "Contrast Report",
    "design_tokens":   "Design Tokens",
    "json":            "JSON",
    "css":             "CSS Variables",
    "tailwind":        "Tailwind Config",
    "pdf":             "PDF Swatch Sheet",
}

OPTICS_SAMPLE_STOPS = ("plus-max", "base", "minus-max")


# ── CLI definition ─────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="optics",
        description=(
            "Generate accessible colour palettes for Figma with automatic "
            "foreground colour selection."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a palette from a base colour.")
    gen.add_argument("color", help="Base colour (hex, hsl(), rgb(), or any CSS colour name).")
    gen.add_argument("--name", "-n", metavar="NAME", default=None,
                     help="Palette name (default: 'palette', or 'primary' with --optics).")
    gen.add_argument("--stops", "-s", metavar="N", type=int, default=None,
                     help="Number of stops, 2–100 (default: 16; ignored with --optics).")
    gen.add_argument("--output", "-o", metavar="DIR", default="./output",
                     help="Output directory (default: ./output).")
    gen.add_argument("--mode", "-m", metavar="MODE", default="both",
                     help="Figma export mode for Optics: light, dark, or both.")
    gen.add_argument("--optics", action="store_true",
                     help="Use the 19-stop Optics scale with light/dark values.")
    gen.add_argument("--pdf", action="store_true",
                     help="Also render a PDF swatch sheet.")

    ana = sub.add_parser("analyze", help="Analyse the contrast of a colour pair.")
    ana.add_argument("background", help="Background colour.")
    ana.add_argument("foreground", help="Foreground colour.")

    bat = sub.add_parser("batch", help="Generate every palette in a JSON config.")
    bat.add_argument("--config", "-c", metavar="PATH", required=True,
                     help="Path to a JSON config file.")
    bat.add_argument("--output", "-o", metavar="DIR", default="",
                     help="Override the config's output directory.")
    return p


# ── Generation ─────────────────────────────────────────────────────────────────

def _print_exports(paths: Dict[str, Path]) -> None:
    for key, path in paths.items():
        print_file_export(_EXPORT_LABELS.get(key, key), path)


def _run_optics(entry: Dict[str, Any], output_dir: Path) -> None:
    name = entry.get("name") or "primary"
    mode = str(entry.get("mode", "both")).lower()
    print_palette_summary(str(entry["color"]), name, "Optics scale (19 stops with light/dark modes)")

    palette = generate_optics_palette(entry["color"], name)
    base = palette.base_color
    print_base_color_info(len(palette.stops), base.hex, base.h, base.s, base.l)

    print_contrast_header(sample=True)
    for stop in palette.stops:
        if stop.name not in OPTICS_SAMPLE_STOPS:
            continue
        lc, dc = stop.light_mode_contrast, stop.dark_mode_contrast
        print_optics_contrast_sample(stop.name, "light", stop.background.light.hex, lc.on, lc.on_alt)
        print_optics_contrast_sample("", "dark", stop.background.dark.hex, dc.on, dc.on_alt)

    print_export_header(output_dir)
    if mode == "both":
        paths = export_optics_all(palette, output_dir)
    else:
        paths = export_optics_mode(palette, output_dir, mode)
    if entry.get("pdf"):
        paths["pdf"] = SwatchSheetBuilder(palette).build(output_dir / f"{name}-optics-swatches.pdf")
    _print_exports(paths)

    print_completion("Optics")
    print_figma_instructions(mode == "both")


def _run_parametric(entry: Dict[str, Any], output_dir: Path) -> None:
    name = entry.get("name") or "palette"
    stops = validate_stops(entry.get("stops", DEFAULT_STOPS), name)
    print_palette_summary(str(entry["color"]), name, stops)

    palette = generate_palette(entry["color"], name, stops)
    print_base_color_info(len(palette.stops), palette.base_color.hex)

    print_contrast_header()
    for stop in palette.stops:
        print_contrast_line(
            stop.stop, stop.background.hex, stop.recommended_foreground,
            stop.light.wcag_aa, stop.light.contrast,
            stop.dark.wcag_aa, stop.dark.contrast,
        )
    print_contrast_stats(contrast_stats(
        (stop.background, stop.recommended.value) for stop in palette.stops
    ))

    print_export_header(output_dir)
    paths = export_all(palette, output_dir)
    if entry.get("pdf"):
        paths["pdf"] = SwatchSheetBuilder(palette).build(output_dir / f"{name}-swatches.pdf")
    _print_exports(paths)

    print_completion()
    print_figma_instructions(False)


def run_config(cfg: Dict[str, Any]) -> None:
    """Generate and export every palette described by *cfg*."""
    output_dir = Path(cfg.get("output") or "./output")
    for entry in cfg["palettes"]:
        if entry.get("optics"):
            _run_optics(entry, output_dir)
        else:
            _run_parametric(entry, output_dir)


# ── Commands ───────────────────────────────────────────────────────────────────

def _cmd_generate(args: argparse.Namespace) -> None:
    mode = args.mode.lower()
    if mode not in MODES:
        raise ValueError(f'Invalid mode "{args.mode}". Use: light, dark, or both')
    stops = DEFAULT_STOPS if args.stops is None else args.stops
    if args.optics:
        if args.stops is not None:
            print_warning("--stops is ignored for the Optics scale (always 19 stops)")
    else:
        validate_stops(stops, args.name or "palette")
    run_config(build_palette_config(
        color=args.color,
        name=args.name,
        stops=stops,
        optics=args.optics,
        output=args.output,
        mode=mode,
        pdf=args.pdf,
    ))


def _cmd_analyze(args: argparse.Namespace) -> None:
    bg = color_value_from_hsl(parse_color(args.background))
    fg = color_value_from_hsl(parse_color(args.foreground))
    ratio = contrast_ratio(bg, fg)
    print_analysis_result(bg.hex, fg.hex, ratio, meets_wcag_aa(ratio), meets_wcag_aaa(ratio))


def _cmd_batch(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    if args.output:
        cfg["output"] = args.output
    run_config(cfg)


_COMMANDS = {
    "generate": _cmd_generate,
    "analyze":  _cmd_analyze,
    "batch":    _cmd_batch,
}


# ── Main ───────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    try:
        _COMMANDS[args.command](args)
    except (InvalidColorError, FileNotFoundError, ValueError) as exc:
        print_error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

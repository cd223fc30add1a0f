"""
console.py
──────────
Formatting helpers for everything the command line prints.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from .contrast import ContrastStats


def print_error(message: str) -> None:
    print(f"[error] {message}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"[warning] {message}", file=sys.stderr)


def print_info(message: str, indent: int = 0) -> None:
    print(f"{' ' * indent}{message}")


def print_tip(message: str) -> None:
    print(f"  Tip: {message}")


def print_file_export(label: str, path: str | Path) -> None:
    print(f"   ✓ {label}: {Path(path).name}")


def print_palette_summary(color: str, name: str, stops_or_format: int | str) -> None:
    kind = "Stops" if isinstance(stops_or_format, int) else "Format"
    print()
    print("╔══════════════════════════════════════╗")
    print("║     Optics Palette  –  Generator     ║")
    print("╚══════════════════════════════════════╝")
    print()
    print(f"  Base color   : {color}")
    print(f"  Palette name : {name}")
    print(f"  {kind:<13}: {stops_or_format}\n")


def print_base_color_info(
    stops_count: int,
    base_hex: str,
    h: Optional[float] = None,
    s: Optional[float] = None,
    l: Optional[float] = None,
) -> None:
    print(f"  Generated {stops_count} color stops")
    print(f"   Base color: {base_hex}")
    if h is not None and s is not None and l is not None:
        print(f"   H: {round(h)}° S: {round(s)}% L: {round(l)}%")
    print()


def print_contrast_header(sample: bool = False) -> None:
    print("  Contrast analysis (sample):" if sample else "  Contrast analysis:")


def print_contrast_line(
    stop: int,
    bg_hex: str,
    recommended: str,
    light_pass: bool,
    light_ratio: float,
    dark_pass: bool,
    dark_ratio: float,
) -> None:
    lm = "✓" if light_pass else "✗"
    dm = "✓" if dark_pass else "✗"
    print(
        f"   Stop {stop:>2}: {bg_hex} → {recommended.capitalize()} "
        f"(L:{lm} {light_ratio:.1f} D:{dm} {dark_ratio:.1f})"
    )


def print_contrast_stats(stats: ContrastStats) -> None:
    print(
        f"\n   Recommended pairs: {stats.aaa} AAA · {stats.aa} AA · "
        f"{stats.fail} below AA (of {stats.total})"
    )


def print_optics_contrast_sample(
    name: str,
    mode: str,
    bg_hex: str,
    on_ratio: float,
    on_alt_ratio: float,
) -> None:
    mode_label = "Light" if mode == "light" else "Dark "
    print(
        f"   {name:<12}: {mode_label} {bg_hex} → "
        f"on:{on_ratio:.1f} alt:{on_alt_ratio:.1f}"
    )


def print_export_header(output_dir: str | Path) -> None:
    print(f"\n  Exporting files → {output_dir}")


def print_completion(scheme: str = "") -> None:
    label = f" {scheme}" if scheme else ""
    print(f"\n  ✓ Done! Your{label} palette is ready.\n")


def print_figma_instructions(multiple_modes: bool = False) -> None:
    if multiple_modes:
        print_tip("Import each .tokens.json file into the Figma Variables panel")
        print_info("1. Open Figma → Variables panel", 3)
        print_info("2. Import the Light mode file, then the Dark mode file", 3)
        print_info("3. Figma creates one variable collection with both modes", 3)
    else:
        print_tip("Import the .json file into the Figma Variables panel")


def print_analysis_result(
    bg_hex: str,
    fg_hex: str,
    contrast: float,
    aa: bool,
    aaa: bool,
) -> None:
    print("\n  Contrast analysis\n")
    print(f"   Background: {bg_hex}")
    print(f"   Foreground: {fg_hex}")
    print(f"   Contrast Ratio: {contrast:.2f}:1\n")
    print(f"   WCAG AA (4.5:1):  {'Pass' if aa else 'Fail'}")
    print(f"   WCAG AAA (7:1):   {'Pass' if aaa else 'Fail'}\n")

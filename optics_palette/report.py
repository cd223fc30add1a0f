"""
report.py
─────────
Pieces of the plain-text WCAG contrast report shared by both exporters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .color_utils import ColorValue
from .contrast import AA_NORMAL, meets_wcag_aa, wcag_level

RULE = "=" * 80


@dataclass(frozen=True)
class ContrastFailure:
    stop:                 Union[int, str]
    background:           str
    background_lightness: int
    foreground:           str
    foreground_lightness: int
    foreground_type:      str
    ratio:                float
    mode:                 Optional[str] = None


@dataclass(frozen=True)
class ContrastEntry:
    label:     str
    hex:       str
    lightness: int
    ratio:     float


def _lightness_pct(value: ColorValue) -> int:
    return int(value.hsl.l * 100 + 0.5)


def report_header(palette_name: str, base_hex: str, total_stops: int) -> str:
    return (
        "# WCAG Contrast Report\n"
        f"# Palette: {palette_name}\n"
        f"# Base Color: {base_hex}\n"
        f"# Total Stops: {total_stops}\n\n"
        f"{RULE}\n\n"
    )


def failures_summary(failures: Iterable[ContrastFailure]) -> str:
    failures = list(failures)
    lines = ["## ⚠️  FAILURES SUMMARY\n\n"]

    if not failures:
        lines.append(f"✅ ALL COMBINATIONS PASS WCAG AA STANDARD ({AA_NORMAL}:1)\n")
        lines.append("   No contrast issues found!\n\n")
    else:
        lines.append(
            f"Found {len(failures)} combinations that FAIL WCAG AA standard ({AA_NORMAL}:1):\n\n"
        )
        for f in failures:
            mode_prefix = f"{f.mode} Mode • " if f.mode else ""
            lines.append(f"❌ {mode_prefix}Stop {f.stop} • {f.foreground_type} foreground\n")
            lines.append(
                f"   Background: {f.background} (L:{f.background_lightness}%) → "
                f"Foreground: {f.foreground} (L:{f.foreground_lightness}%)\n"
            )
            lines.append(f"   Contrast: {f.ratio:.2f}:1 (needs {AA_NORMAL}:1 minimum)\n\n")

    lines.append(f"{RULE}\n\n")
    return "".join(lines)


def contrast_entry(entry: ContrastEntry) -> str:
    status = "PASS" if meets_wcag_aa(entry.ratio) else "FAIL"
    return (
        f"  • {entry.label} (L:{entry.lightness}%) — {entry.hex}\n"
        f"    Contrast: {entry.ratio:.2f}:1\n"
        f"    Status: {status}\n"
        f"    Level: {wcag_level(entry.ratio)}\n\n"
    )


def standards_footer() -> str:
    return (
        f"\n{RULE}\n\n"
        "## WCAG STANDARDS\n\n"
        "AA:  4.5:1 minimum (normal text), 3:1 (large text 18pt+)\n"
        "AAA: 7:1 minimum (normal text), 4.5:1 (large text 18pt+)\n"
    )


def entry_for(label: str, value: ColorValue, ratio: float) -> ContrastEntry:
    return ContrastEntry(label=label, hex=value.hex, lightness=_lightness_pct(value), ratio=ratio)


def collect_failure(
    ratio: float,
    mode: Optional[str],
    stop: Union[int, str],
    background: ColorValue,
    foreground: ColorValue,
    foreground_type: str,
) -> Optional[ContrastFailure]:
    """Return a ``ContrastFailure`` when *ratio* misses AA, else ``None``."""
    if meets_wcag_aa(ratio):
        return None
    return ContrastFailure(
        stop=stop,
        background=background.hex,
        background_lightness=_lightness_pct(background),
        foreground=foreground.hex,
        foreground_lightness=_lightness_pct(foreground),
        foreground_type=foreground_type,
        ratio=ratio,
        mode=mode,
    )

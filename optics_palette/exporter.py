"""
exporter.py
───────────
Exporters for parametric palettes: Figma Variables, CSS custom properties,
JSON, and a plain-text WCAG contrast report.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .color_utils import ColorValue
from .figma import (
    IdFactory,
    figma_extensions,
    generate_variable_id,
    rgb_to_figma_color,
    root_extensions,
)
from .palette import ParametricPalette
from .report import (
    ContrastFailure,
    collect_failure,
    contrast_entry,
    entry_for,
    failures_summary,
    report_header,
    standards_footer,
)
from .utils import FileExport, export_files


def _token(value: ColorValue, id_factory: IdFactory) -> Dict[str, Any]:
    return {
        "$type":  "color",
        "$value": rgb_to_figma_color(value.rgb, value.hex),
        "$extensions": figma_extensions(id_factory(), web_value=value.hex),
    }


# ── Figma ─────────────────────────────────────────────────────────────────────

def export_to_figma(
    palette: ParametricPalette,
    mode: str = "Light",
    id_factory: Optional[IdFactory] = None,
) -> Dict[str, Any]:
    """
    Figma Variables import structure::

        {<name>: {<stop>: token},
         <name>-foregrounds: {light: {<stop>: token}, dark: {...}},
         $extensions: {com.figma.modeName: mode}}
    """
    make_id = id_factory or generate_variable_id

    backgrounds = {str(s.stop): _token(s.background, make_id) for s in palette.stops}
    foregrounds = {
        "light": {str(s.stop): _token(s.light.value, make_id) for s in palette.stops},
        "dark":  {str(s.stop): _token(s.dark.value, make_id) for s in palette.stops},
    }
    return {
        palette.name: backgrounds,
        f"{palette.name}-foregrounds": foregrounds,
        **root_extensions(mode),
    }


# ── Contrast report ───────────────────────────────────────────────────────────

def export_contrast_report(palette: ParametricPalette) -> str:
    failures: List[ContrastFailure] = []
    for stop in palette.stops:
        for fg_type, fg in (("light", stop.light), ("dark", stop.dark)):
            failure = collect_failure(
                fg.contrast, None, stop.stop, stop.background, fg.value, fg_type,
            )
            if failure:
                failures.append(failure)

    parts = [
        report_header(palette.name, palette.base_color.hex, len(palette.stops)),
        failures_summary(failures),
        "## DETAILED CONTRAST ANALYSIS\n\n",
    ]
    for stop in palette.stops:
        parts.append(f"### Stop {stop.stop}\n")
        parts.append(f"Background: {stop.background.hex}\n")
        parts.append(f"Recommended: Use {stop.recommended_foreground} foreground\n\n")
        parts.append(contrast_entry(entry_for("Light Foreground", stop.light.value, stop.light.contrast)))
        parts.append(contrast_entry(entry_for("Dark Foreground", stop.dark.value, stop.dark.contrast)))
    parts.append(standards_footer())
    return "".join(parts)


# ── CSS / JSON ────────────────────────────────────────────────────────────────

def export_to_css(palette: ParametricPalette) -> str:
    lines = [
        ":root {",
        f"  /* {palette.name} palette - generated from {palette.base_color.hex} */",
        "",
    ]
    for stop in palette.stops:
        prefix = f"--{palette.name}-{stop.stop}"
        lines.append(f"  {prefix}: {stop.background.hex};")
        lines.append(f"  {prefix}-fg: {stop.recommended.hex};")
        lines.append(f"  {prefix}-fg-light: {stop.light.hex};")
        lines.append(f"  {prefix}-fg-dark: {stop.dark.hex};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_to_json(palette: ParametricPalette) -> str:
    return json.dumps(palette.to_dict(), indent=2)


# ── All formats ───────────────────────────────────────────────────────────────

def export_all(palette: ParametricPalette, output_dir: str | Path) -> Dict[str, Path]:
    """Write every parametric export under *output_dir*; return paths by kind."""
    files = {
        "figma": FileExport(
            f"{palette.name}-figma.json",
            json.dumps(export_to_figma(palette), indent=2),
        ),
        "contrast_report": FileExport(
            f"{palette.name}-contrast-report.txt",
            export_contrast_report(palette),
        ),
        "css": FileExport(f"{palette.name}.css", export_to_css(palette)),
        "json": FileExport(f"{palette.name}.json", export_to_json(palette)),
    }
    paths = export_files(output_dir, files.values())
    return dict(zip(files.keys(), paths))

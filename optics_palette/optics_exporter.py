"""
optics_exporter.py
──────────────────
Exporters for Optics palettes.

Figma layout (one file per mode, collection ``op-color``)::

    op-color/<palette>/plus/<level>/bg
    op-color/<palette>/base/bg
    op-color/<palette>/minus/<level>/bg
    op-color/<palette>/on/<group>[/<level>]/on | on-alt
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .color_utils import ColorValue
from .figma import color_token, root_extensions
from .palette import OpticsColorStop, OpticsPalette
from .report import (
    ContrastFailure,
    collect_failure,
    contrast_entry,
    entry_for,
    failures_summary,
    report_header,
    standards_footer,
)
from .utils import FileExport, export_files, save_to_file

COLLECTION = "op-color"
FIGMA_MODES = ("Light", "Dark")


def _group_of(stop_name: str) -> Tuple[str, str]:
    """``plus-two`` → (``plus``, ``two``); ``base`` → (``base``, ``""``)."""
    for group in ("plus", "minus"):
        if stop_name.startswith(f"{group}-"):
            return group, stop_name[len(group) + 1:]
    return stop_name, ""


def _place(tree: Dict[str, Any], group: str, level: str) -> Dict[str, Any]:
    node = tree.setdefault(group, {})
    return node.setdefault(level, {}) if level else node


def _figma_var(palette: OpticsPalette, stop: OpticsColorStop, suffix: str,
               value: ColorValue) -> Dict[str, Any]:
    return color_token(
        value.hex,
        f"{palette.name}-{stop.name}-{suffix}",
        web_value=f"var(--op-color-{palette.name}-{stop.name}-{suffix})",
    )


# ── Figma ─────────────────────────────────────────────────────────────────────

def export_optics_to_figma(palette: OpticsPalette, mode: str = "Light") -> str:
    """Figma Variables import file for one mode (``Light`` or ``Dark``)."""
    tokens: Dict[str, Any] = {}
    on_tree: Dict[str, Any] = {}

    for stop in palette.stops:
        group, level = _group_of(stop.name)

        bg = _place(tokens, group, level)
        bg["bg"] = _figma_var(palette, stop, "bg", stop.background.for_mode(mode))

        fg = _place(on_tree, group, level)
        fg["on"] = _figma_var(palette, stop, "on", stop.on.for_mode(mode))
        fg["on-alt"] = _figma_var(palette, stop, "on-alt", stop.on_alt.for_mode(mode))

    tokens["on"] = on_tree
    document = {
        COLLECTION: {palette.name: tokens},
        **root_extensions(mode),
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


# ── JSON / CSS / tokens / Tailwind ────────────────────────────────────────────

def export_optics_to_json(palette: OpticsPalette) -> str:
    return json.dumps(palette.to_dict(), indent=2)


def export_optics_to_css(palette: OpticsPalette) -> str:
    """CSS custom properties using ``light-dark()`` for automatic theming."""
    lines = [
        ":root {",
        f"  /* {palette.name} Optics Scale - Generated from {palette.base_color.hex} */",
        "  /* Supports automatic theme switching with light-dark() */",
        "",
    ]
    for stop in palette.stops:
        prefix = f"--op-{palette.name}-{stop.name}"
        lines.append(f"  /* {stop.name} */")
        for suffix, pair in (("bg", stop.background), ("on", stop.on), ("on-alt", stop.on_alt)):
            lines.append(f"  {prefix}-{suffix}: light-dark({pair.light.hex}, {pair.dark.hex});")
        lines.append("")
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_optics_to_design_tokens(palette: OpticsPalette) -> Dict[str, Any]:
    """W3C Design Tokens tree; foreground descriptions carry contrast ratios."""
    def tok(value: ColorValue, description: str) -> Dict[str, str]:
        return {"$value": value.hex, "$type": "color", "$description": description}

    group: Dict[str, Any] = {
        "$type": "color",
        "$description": f"Optics scale palette generated from {palette.base_color.hex}",
    }
    for stop in palette.stops:
        lc, dc = stop.light_mode_contrast, stop.dark_mode_contrast
        group[stop.name] = {
            "background": {
                "light": tok(stop.background.light, "Light mode background"),
                "dark":  tok(stop.background.dark, "Dark mode background"),
            },
            "on": {
                "light": tok(stop.on.light, f"Light mode foreground (contrast: {lc.on:.2f}:1)"),
                "dark":  tok(stop.on.dark, f"Dark mode foreground (contrast: {dc.on:.2f}:1)"),
            },
            "onAlt": {
                "light": tok(stop.on_alt.light,
                             f"Light mode alternative foreground (contrast: {lc.on_alt:.2f}:1)"),
                "dark":  tok(stop.on_alt.dark,
                             f"Dark mode alternative foreground (contrast: {dc.on_alt:.2f}:1)"),
            },
        }
    return {palette.name: group}


def export_optics_to_tailwind(palette: OpticsPalette) -> str:
    """Tailwind ``colors`` snippet; light-mode values are the defaults."""
    lines = [
        f"// Tailwind color configuration for Optics {palette.name}",
        "// Add this to your tailwind.config.js colors object",
        "",
        f"'{palette.name}': {{",
    ]
    for stop in palette.stops:
        lines.append(f"  '{stop.name}': {{")
        lines.append(f"    bg: '{stop.background.light.hex}',")
        lines.append(f"    on: '{stop.on.light.hex}',")
        lines.append(f"    'on-alt': '{stop.on_alt.light.hex}',")
        lines.append("  },")
    lines.append("},")
    return "\n".join(lines) + "\n"


# ── Contrast report ───────────────────────────────────────────────────────────

def _mode_failures(palette: OpticsPalette, mode: str) -> List[ContrastFailure]:
    failures: List[ContrastFailure] = []
    for stop in palette.stops:
        contrast = stop.contrast_for_mode(mode)
        background = stop.background.for_mode(mode)
        for fg_type, pair, ratio in (("on", stop.on, contrast.on),
                                     ("on-alt", stop.on_alt, contrast.on_alt)):
            failure = collect_failure(ratio, mode.capitalize(), stop.name,
                                      background, pair.for_mode(mode), fg_type)
            if failure:
                failures.append(failure)
    return failures


def _mode_section(palette: OpticsPalette, mode: str) -> str:
    parts = [f"## {mode.upper()} MODE\n\n"]
    for stop in palette.stops:
        contrast = stop.contrast_for_mode(mode)
        background = stop.background.for_mode(mode)
        parts.append(f"### {stop.name}\n")
        parts.append(f"Background: {background.hex} (L:{int(background.hsl.l * 100 + 0.5)}%)\n\n")
        parts.append(contrast_entry(entry_for("on", stop.on.for_mode(mode), contrast.on)))
        parts.append(contrast_entry(entry_for("on-alt", stop.on_alt.for_mode(mode), contrast.on_alt)))
    return "".join(parts)


def export_optics_contrast_report(palette: OpticsPalette) -> str:
    failures = _mode_failures(palette, "light") + _mode_failures(palette, "dark")
    return "".join([
        report_header(palette.name, palette.base_color.hex, len(palette.stops)),
        failures_summary(failures),
        _mode_section(palette, "light"),
        "\n",
        _mode_section(palette, "dark"),
        standards_footer(),
    ])


# ── Writers ───────────────────────────────────────────────────────────────────

def export_optics_mode(palette: OpticsPalette, output_dir: str | Path, mode: str) -> Dict[str, Path]:
    """Write the Figma tokens for a single *mode* plus the contrast report."""
    mode_name = mode.capitalize()
    if mode_name not in FIGMA_MODES:
        raise ValueError(f'Invalid mode "{mode}". Use: light, dark, or both')
    out = Path(output_dir)
    return {
        f"figma_{mode.lower()}": save_to_file(
            export_optics_to_figma(palette, mode_name),
            out / f"{palette.name}-{mode.lower()}.tokens.json",
        ),
        "contrast_report": save_to_file(
            export_optics_contrast_report(palette),
            out / f"{palette.name}-contrast-report.txt",
        ),
    }


def export_optics_all(palette: OpticsPalette, output_dir: str | Path) -> Dict[str, Path]:
    """Write every Optics export under *output_dir*; return paths by kind."""
    name = palette.name
    files = {
        "figma_light": FileExport(
            f"{name}-light.tokens.json",
            export_optics_to_figma(palette, "Light"),
        ),
        "figma_dark": FileExport(
            f"{name}-dark.tokens.json",
            export_optics_to_figma(palette, "Dark"),
        ),
        "contrast_report": FileExport(
            f"{name}-contrast-report.txt",
            export_optics_contrast_report(palette),
        ),
        "design_tokens": FileExport(
            f"{name}-optics-tokens.json",
            json.dumps(export_optics_to_design_tokens(palette), indent=2),
        ),
        "json": FileExport(f"{name}-optics.json", export_optics_to_json(palette)),
        "css": FileExport(f"{name}-optics.css", export_optics_to_css(palette)),
        "tailwind": FileExport(f"{name}-optics-tailwind.js", export_optics_to_tailwind(palette)),
    }
    paths = export_files(output_dir, files.values())
    return dict(zip(files.keys(), paths))

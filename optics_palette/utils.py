"""
utils.py
────────
Configuration loading, validation, and file-writing helpers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional


Config = Dict[str, Any]

MIN_STOPS = 2
MAX_STOPS = 100
MODES     = ("light", "dark", "both")

DEFAULT_OUTPUT = "./output"


# ── Config I/O ────────────────────────────────────────────────────────────────

def load_config(path: str | Path) -> Config:
    """
    Load a JSON batch configuration file and return the parsed dict.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or fails basic schema checks.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    if p.suffix.lower() != ".json":
        raise ValueError(f"Config file must be a .json file, got: {p.suffix}")

    with p.open("r", encoding="utf-8") as fh:
        try:
            cfg = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in config file: {exc}") from exc

    _validate_config(cfg)
    cfg.setdefault("output", DEFAULT_OUTPUT)
    return cfg


def _validate_config(cfg: Config) -> None:
    if not isinstance(cfg, dict):
        raise ValueError("Config root must be a JSON object.")
    palettes = cfg.get("palettes")
    if not isinstance(palettes, list) or not palettes:
        raise ValueError("Config must contain a non-empty 'palettes' list.")
    for i, entry in enumerate(palettes):
        if not isinstance(entry, dict):
            raise ValueError(f"Palette {i} must be a JSON object.")
        label = entry.get("name", i)
        color = entry.get("color")
        if not isinstance(color, (str, dict)) or not color:
            raise ValueError(
                f"Palette '{label}' must have a 'color' string or {{h, s, l}} object."
            )
        if "stops" in entry:
            validate_stops(entry["stops"], label)
        if "mode" in entry and str(entry["mode"]).lower() not in MODES:
            raise ValueError(
                f"Palette '{label}' has invalid mode '{entry['mode']}'. "
                "Use: light, dark, or both"
            )


def validate_stops(stops: Any, label: Any = "palette") -> int:
    """Return *stops* as an int, or raise ``ValueError`` if outside 2–100."""
    if isinstance(stops, bool) or not isinstance(stops, int):
        raise ValueError(f"Palette '{label}': stops must be an integer.")
    if not MIN_STOPS <= stops <= MAX_STOPS:
        raise ValueError(
            f"Palette '{label}': stops must be a number between {MIN_STOPS} and {MAX_STOPS}."
        )
    return stops


# ── Single-palette config builder ─────────────────────────────────────────────

def build_palette_config(
    color: Any,
    name: Optional[str] = None,
    stops: int = 16,
    optics: bool = False,
    output: str = "",
    mode: str = "both",
    pdf: bool = False,
) -> Config:
    """
    Wrap a single palette request in the batch config shape so one-off and
    batch generation share the same code path.
    """
    return {
        "output": output or DEFAULT_OUTPUT,
        "palettes": [
            {
                "name":   name or ("primary" if optics else "palette"),
                "color":  color,
                "stops":  stops,
                "optics": optics,
                "mode":   mode,
                "pdf":    pdf,
            },
        ],
    }


# ── File output ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FileExport:
    filename: str
    content:  str


def ensure_directory(path: str | Path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def save_to_file(content: str, path: str | Path) -> Path:
    """Write *content* as UTF-8, creating parent directories as needed."""
    p = Path(path)
    ensure_directory(p.parent)
    p.write_text(content, encoding="utf-8")
    return p


def export_files(output_dir: str | Path, files: Iterable[FileExport]) -> List[Path]:
    """Write every ``FileExport`` under *output_dir*; return the written paths."""
    out = ensure_directory(output_dir)
    return [save_to_file(f.content, out / f.filename) for f in files]

"""
api/palette.py
──────────────
Vercel Python serverless function – POST /api/palette

Generates a palette and returns it in the requested export format.

Request body (JSON):
{
  "color":  "#3b82f6",        // hex, rgb(), hsl(), CSS name, or {h, s, l}
  "name":   "primary",        // optional
  "optics": true,             // optional – 19-stop Optics scale
  "stops":  16,               // optional – parametric only, 2–100
  "format": "css",            // json | css | figma | tokens | tailwind | report | pdf
  "mode":   "light"           // optional – Figma mode for figma exports
}

Response: the export content with a matching Content-Type.
"""

from __future__ import annotations

import json
import os
import sys
import tempfile
from http.server import BaseHTTPRequestHandler
from typing import Any, Dict, Tuple

# ── Make project root importable so we can use optics_palette.* ───────────────
_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from optics_palette.color_utils import InvalidColorError
from optics_palette.exporter import (
    export_contrast_report,
    export_to_css,
    export_to_figma,
    export_to_json,
)
from optics_palette.generator import generate_palette
from optics_palette.optics import generate_optics_palette
from optics_palette.optics_exporter import (
    export_optics_contrast_report,
    export_optics_to_css,
    export_optics_to_design_tokens,
    export_optics_to_figma,
    export_optics_to_json,
    export_optics_to_tailwind,
)
from optics_palette.swatch_pdf import SwatchSheetBuilder
from optics_palette.utils import validate_stops

# ── CORS headers sent with every response ─────────────────────────────────────
_CORS = {
    "Access-Control-Allow-Origin":  "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

_CONTENT_TYPES = {
    "json":     "application/json",
    "figma":    "application/json",
    "tokens":   "application/json",
    "css":      "text/css; charset=utf-8",
    "tailwind": "text/javascript; charset=utf-8",
    "report":   "text/plain; charset=utf-8",
    "pdf":      "application/pdf",
}


# ── Vercel handler class ───────────────────────────────────────────────────────

class handler(BaseHTTPRequestHandler):

    def log_message(self, fmt, *args):  # silence default access-log noise
        pass

    # ── CORS preflight ─────────────────────────────────────────────────────────
    def do_OPTIONS(self):
        self.send_response(200)
        for k, v in _CORS.items():
            self.send_header(k, v)
        self.end_headers()

    # ── Main POST ──────────────────────────────────────────────────────────────
    def do_POST(self):
        try:
            length = int(self.headers.get("Content-Length", 0))
            data   = json.loads(self.rfile.read(length))
            if not isinstance(data, dict):
                raise ValueError("body must be a JSON object")
        except (ValueError, TypeError) as exc:
            self._json_error(400, f"Invalid request body: {exc}")
            return

        try:
            body, content_type, filename = render(data)
        except (InvalidColorError, ValueError) as exc:
            self._json_error(422, str(exc))
            return
        except Exception as exc:
            self._json_error(500, str(exc))
            return

        self.send_response(200)
        for k, v in _CORS.items():
            self.send_header(k, v)
        self.send_header("Content-Type",        content_type)
        self.send_header("Content-Disposition", f'attachment; filename="{filename}"')
        self.send_header("Content-Length",      str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    # ── Error helper ───────────────────────────────────────────────────────────
    def _json_error(self, code: int, message: str) -> None:
        body = json.dumps({"error": message}).encode()
        self.send_response(code)
        for k, v in _CORS.items():
            self.send_header(k, v)
        self.send_header("Content-Type",   "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


# ── Core generation logic ─────────────────────────────────────────────────────

def render(data: Dict[str, Any]) -> Tuple[bytes, str, str]:
    """Return (body, content type, download filename) for a request payload."""
    color  = data.get("color")
    if color is None:
        raise ValueError("'color' is required")
    optics = bool(data.get("optics", False))
    name   = data.get("name") or ("primary" if optics else "palette")
    fmt    = str(data.get("format", "json")).lower()
    mode   = str(data.get("mode", "light")).capitalize()

    if fmt not in _CONTENT_TYPES:
        raise ValueError(f"Unknown format '{fmt}'. Use one of: {', '.join(_CONTENT_TYPES)}")
    if fmt == "figma" and mode not in ("Light", "Dark"):
        raise ValueError(f'Invalid mode "{mode}". Use: light or dark')

    if optics:
        palette = generate_optics_palette(color, name)
        renderers = {
            "json":     lambda: export_optics_to_json(palette),
            "css":      lambda: export_optics_to_css(palette),
            "figma":    lambda: export_optics_to_figma(palette, mode),
            "tokens":   lambda: json.dumps(export_optics_to_design_tokens(palette), indent=2),
            "tailwind": lambda: export_optics_to_tailwind(palette),
            "report":   lambda: export_optics_contrast_report(palette),
        }
    else:
        stops = validate_stops(data.get("stops", 16), name)
        palette = generate_palette(color, name, stops)
        renderers = {
            "json":   lambda: export_to_json(palette),
            "css":    lambda: export_to_css(palette),
            "figma":  lambda: json.dumps(export_to_figma(palette, mode), indent=2),
            "report": lambda: export_contrast_report(palette),
        }

    extension = {"css": "css", "tailwind": "js", "report": "txt", "pdf": "pdf"}.get(fmt, "json")
    filename  = f"{name}-{fmt}.{extension}"

    if fmt == "pdf":
        return _render_pdf(palette), _CONTENT_TYPES[fmt], filename
    if fmt not in renderers:
        raise ValueError(f"Format '{fmt}' is only available for Optics palettes")
    return renderers[fmt]().encode("utf-8"), _CONTENT_TYPES[fmt], filename


def _render_pdf(palette) -> bytes:
    with tempfile.TemporaryDirectory() as tmpdir:
        out_path = os.path.join(tmpdir, "swatches.pdf")
        SwatchSheetBuilder(palette).build(out_path)
        with open(out_path, "rb") as fh:
            return fh.read()

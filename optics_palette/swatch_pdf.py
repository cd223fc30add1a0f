"""
swatch_pdf.py
─────────────
Renders a palette as a printable swatch sheet.

Layout model
────────────
  • A "cursor" variable ``_y`` tracks the top of the next row to draw,
    measured in ReportLab points from the bottom of the page.
  • Each row helper subtracts the row height from ``_y``.
  • ``_ensure_space`` starts a new page before a row that would run into
    the footer.

Parametric rows show the background with both foreground samples and their
WCAG ratings; Optics rows show the light-mode and dark-mode swatches side by
side, each with ``on`` and ``on-alt`` samples.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, letter
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas as rl_canvas

from .color_utils import ColorValue
from .contrast import contrast_label
from .palette import ColorStop, OpticsColorStop, OpticsPalette, ParametricPalette

# ── Layout constants ───────────────────────────────────────────────────────────
MARGIN    = 1.60 * cm   # Left / right / bottom margin
HEADER_H  = 2.60 * cm   # Header bar on the first page
CONT_H    = 1.40 * cm   # Compact header on continuation pages
FOOTER_H  = 0.90 * cm   # Footer strip height

ROW_H     = 1.25 * cm   # One swatch row
ROW_GAP   = 0.22 * cm   # Gap between rows
COL_GAP   = 0.40 * cm   # Gap between light / dark columns (Optics)
LABEL_W   = 2.60 * cm   # Stop-name column

FONT      = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
TEXT_DARK = HexColor("#1c1c1e")
MUTED     = HexColor("#6e6e73")

Palette = Union[ParametricPalette, OpticsPalette]


def _rl(value: ColorValue) -> HexColor:
    return HexColor(value.hex)


class SwatchSheetBuilder:
    """
    Render *palette* to a PDF swatch sheet.

    Parameters
    ----------
    palette : ParametricPalette | OpticsPalette
        The generated palette.
    page_size : str
        ``"a4"`` (default) or ``"letter"``.
    """

    def __init__(self, palette: Palette, page_size: str = "a4") -> None:
        self.palette   = palette
        self.page_size = letter if page_size.lower() == "letter" else A4
        self.W, self.H = self.page_size
        self._usable_w = self.W - 2 * MARGIN
        self._c: Optional[rl_canvas.Canvas] = None
        self._y: float = 0.0

    @property
    def is_optics(self) -> bool:
        return isinstance(self.palette, OpticsPalette)

    # ── Public ────────────────────────────────────────────────────────────────

    def build(self, output_path: str | Path) -> Path:
        """Render the swatch sheet to *output_path* and return the path."""
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self._c = rl_canvas.Canvas(str(out), pagesize=self.page_size)
        self._c.setTitle(f"{self.palette.name} palette")
        self._begin_page(first=True)

        for stop in self.palette.stops:
            self._ensure_space(ROW_H + ROW_GAP)
            if self.is_optics:
                self._draw_optics_row(stop)
            else:
                self._draw_parametric_row(stop)
            self._y -= ROW_H + ROW_GAP

        self._draw_footer()
        self._c.save()
        return out

    # ── Page management ───────────────────────────────────────────────────────

    def _begin_page(self, first: bool) -> None:
        self._draw_header(first)
        hh = HEADER_H if first else CONT_H
        self._y = self.H - hh - MARGIN * 0.6

    def _new_page(self) -> None:
        self._draw_footer()
        self._c.showPage()
        self._begin_page(first=False)

    def _ensure_space(self, needed: float) -> None:
        if self._y - needed < FOOTER_H + MARGIN:
            self._new_page()

    # ── Header / footer ───────────────────────────────────────────────────────

    def _header_colors(self) -> Tuple[HexColor, HexColor]:
        """(fill, text) for the header bar, both derived from the palette."""
        if self.is_optics:
            base = self.palette.stop("base")
            return _rl(base.background.light), _rl(base.on.light)
        if not self.palette.stops:
            return _rl(self.palette.base_color), TEXT_DARK
        middle = self.palette.stops[len(self.palette.stops) // 2]
        return _rl(middle.background), _rl(middle.recommended.value)

    def _draw_header(self, first: bool) -> None:
        c = self._c
        hh = HEADER_H if first else CONT_H
        fill, text = self._header_colors()

        c.setFillColor(fill)
        c.rect(0, self.H - hh, self.W, hh, fill=1, stroke=0)
        c.setFillColor(text)

        if first:
            scheme = "Optics scale" if self.is_optics else "Parametric scale"
            c.setFont(FONT_BOLD, 16)
            c.drawString(MARGIN, self.H - hh + 1.45 * cm, self.palette.name)
            c.setFont(FONT, 9.5)
            c.drawString(
                MARGIN, self.H - hh + 0.70 * cm,
                f"{scheme}  –  {len(self.palette.stops)} stops  –  "
                f"base {self.palette.base_color.hex}",
            )
        else:
            c.setFont(FONT_BOLD, 10)
            c.drawString(MARGIN, self.H - hh + CONT_H * 0.35, self.palette.name)

    def _draw_footer(self) -> None:
        c = self._c
        c.setFillColor(MUTED)
        c.setFont(FONT, 7.5)
        c.drawString(MARGIN, FOOTER_H * 0.45,
                     f"Generated {self.palette.metadata.generated_at}")
        c.drawRightString(self.W - MARGIN, FOOTER_H * 0.45,
                          f"Page {c.getPageNumber()}")

    # ── Rows ──────────────────────────────────────────────────────────────────

    def _draw_label(self, text: str) -> None:
        c = self._c
        c.setFillColor(TEXT_DARK)
        c.setFont(FONT_BOLD, 9)
        c.drawString(MARGIN, self._y - ROW_H * 0.58, text)

    def _draw_parametric_row(self, stop: ColorStop) -> None:
        self._draw_label(f"Stop {stop.stop}")
        x = MARGIN + LABEL_W
        w = self._usable_w - LABEL_W
        self._swatch(
            x, w, stop.background,
            samples=[
                (stop.light.value, stop.light.contrast),
                (stop.dark.value, stop.dark.contrast),
            ],
            marker=stop.recommended_foreground,
        )

    def _draw_optics_row(self, stop: OpticsColorStop) -> None:
        self._draw_label(stop.name)
        col_w = (self._usable_w - LABEL_W - COL_GAP) / 2.0
        x = MARGIN + LABEL_W
        for mode in ("light", "dark"):
            contrast = stop.contrast_for_mode(mode)
            self._swatch(
                x, col_w, stop.background.for_mode(mode),
                samples=[
                    (stop.on.for_mode(mode), contrast.on),
                    (stop.on_alt.for_mode(mode), contrast.on_alt),
                ],
                marker=mode,
            )
            x += col_w + COL_GAP

    def _swatch(self, x: float, w: float, background: ColorValue,
                samples: List[Tuple[ColorValue, float]], marker: str) -> None:
        """Filled rectangle with one text sample per (colour, ratio) pair."""
        c = self._c
        y = self._y - ROW_H
        c.setFillColor(_rl(background))
        c.setStrokeColor(MUTED)
        c.setLineWidth(0.3)
        c.roundRect(x, y, w, ROW_H, 3, fill=1, stroke=1)

        slot = w / (len(samples) + 1)
        for i, (fg, ratio) in enumerate(samples):
            tx = x + 0.30 * cm + slot * i
            c.setFillColor(_rl(fg))
            c.setFont(FONT_BOLD, 8.5)
            c.drawString(tx, y + ROW_H * 0.56, f"Aa {fg.hex}")
            c.setFont(FONT, 7.5)
            c.drawString(tx, y + ROW_H * 0.22, f"{ratio:.2f}:1 {contrast_label(ratio)}")

        # Background hex and the column / recommendation marker
        c.setFillColor(_rl(samples[0][0]))
        c.setFont(FONT, 7.5)
        c.drawRightString(x + w - 0.30 * cm, y + ROW_H * 0.56, background.hex)
        c.drawRightString(x + w - 0.30 * cm, y + ROW_H * 0.22, marker)

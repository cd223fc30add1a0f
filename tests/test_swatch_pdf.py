import re

from reportlab.lib.pagesizes import A4, letter

from optics_palette.generator import generate_palette
from optics_palette.swatch_pdf import SwatchSheetBuilder


def test_parametric_sheet(blue_palette, tmp_path):
    out = SwatchSheetBuilder(blue_palette).build(tmp_path / "sheets" / "test.pdf")
    assert out == tmp_path / "sheets" / "test.pdf"
    assert out.read_bytes().startswith(b"%PDF")


def test_optics_sheet(optics_palette, tmp_path):
    builder = SwatchSheetBuilder(optics_palette)
    assert builder.is_optics
    out = builder.build(tmp_path / "optics.pdf")
    assert out.read_bytes().startswith(b"%PDF")


def test_long_palette_spills_onto_more_pages(tmp_path, fixed_clock):
    palette = generate_palette("#10b981", "long", 60, clock=fixed_clock)
    data = SwatchSheetBuilder(palette).build(tmp_path / "long.pdf").read_bytes()
    page_counts = [int(n) for n in re.findall(rb"/Count (\d+)", data)]
    assert max(page_counts) > 1


def test_page_size_selection(blue_palette):
    assert SwatchSheetBuilder(blue_palette).page_size == A4
    assert SwatchSheetBuilder(blue_palette, page_size="Letter").page_size == letter


def test_empty_palette_still_renders(tmp_path, fixed_clock):
    palette = generate_palette("#3b82f6", "empty", 0, clock=fixed_clock)
    out = SwatchSheetBuilder(palette).build(tmp_path / "empty.pdf")
    assert out.read_bytes().startswith(b"%PDF")

import pytest

from optics_palette.color_utils import RGBColor, create_color_value
from optics_palette.contrast import (
    ContrastStats,
    contrast_label,
    contrast_ratio,
    contrast_stats,
    meets_wcag_aa,
    meets_wcag_aaa,
    relative_luminance,
    wcag_level,
)

WHITE = RGBColor(1.0, 1.0, 1.0)
BLACK = RGBColor(0.0, 0.0, 0.0)


def test_relative_luminance_extremes():
    assert relative_luminance(WHITE) == pytest.approx(1.0)
    assert relative_luminance(BLACK) == 0.0


def test_relative_luminance_monotonic():
    grey = RGBColor(0.5, 0.5, 0.5)
    assert relative_luminance(WHITE) > relative_luminance(grey) > relative_luminance(BLACK)


def test_relative_luminance_linear_segment():
    dark = RGBColor(0.03, 0.03, 0.03)
    assert relative_luminance(dark) == pytest.approx(0.03 / 12.92)


def test_white_on_black_is_21():
    assert contrast_ratio(WHITE, BLACK) == pytest.approx(21.0, abs=0.1)


def test_contrast_is_symmetric():
    a = create_color_value(217, 91, 60)
    b = create_color_value(30, 40, 20)
    assert contrast_ratio(a, b) == contrast_ratio(b, a)


def test_contrast_with_itself_is_one():
    value = create_color_value(120, 50, 50)
    assert contrast_ratio(value, value) == pytest.approx(1.0, abs=1e-6)


def test_accepts_color_values_and_rgb():
    value = create_color_value(0, 0, 100)
    assert contrast_ratio(value, BLACK) == pytest.approx(21.0, abs=0.1)


@pytest.mark.parametrize(
    "ratio, large, aa, aaa",
    [
        (7.0, False, True, True),
        (4.5, False, True, False),
        (4.49, False, False, False),
        (3.0, True, True, False),
        (4.5, True, True, True),
        (2.9, True, False, False),
    ],
)
def test_wcag_thresholds(ratio, large, aa, aaa):
    assert meets_wcag_aa(ratio, large) is aa
    assert meets_wcag_aaa(ratio, large) is aaa


@pytest.mark.parametrize(
    "ratio, label, level",
    [
        (21.0, "AAA", "AAA ✓"),
        (5.0, "AA", "AA ✓"),
        (3.2, "AA Large", "AA Large ✓"),
        (1.5, "Fail", "Does not meet WCAG standards"),
    ],
)
def test_labels(ratio, label, level):
    assert contrast_label(ratio) == label
    assert wcag_level(ratio) == level


def test_contrast_stats():
    pairs = [
        (WHITE, BLACK),                                     # 21   → AAA
        (WHITE, create_color_value(0, 0, 30)),              # ~8.5 → AAA
        (WHITE, create_color_value(0, 0, 45)),              # ~4.8 → AA
        (WHITE, create_color_value(0, 0, 80)),              # fail
    ]
    stats = contrast_stats(pairs)
    assert stats == ContrastStats(aaa=2, aa=1, fail=1)
    assert stats.total == 4

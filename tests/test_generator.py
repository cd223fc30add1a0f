from datetime import datetime, timedelta, timezone

import pytest

from optics_palette.color_utils import HSLColor, InvalidColorError, parse_color
from optics_palette.contrast import contrast_ratio
from optics_palette.generator import (
    adjust_saturation,
    ease_in_out_quad,
    generate_foreground_colors,
    generate_lightness_scale,
    generate_palette,
    recommend_foreground,
)


# ── Lightness scale ───────────────────────────────────────────────────────────

def test_lightness_scale_values():
    assert generate_lightness_scale(5) == pytest.approx([0.95, 0.8375, 0.5, 0.1625, 0.05])


def test_lightness_scale_single_stop_is_lightest():
    assert generate_lightness_scale(1) == pytest.approx([0.95])


def test_lightness_scale_empty():
    assert generate_lightness_scale(0) == []


@pytest.mark.parametrize("count", [2, 3, 16, 37, 100])
def test_lightness_scale_is_non_increasing_and_bounded(count):
    scale = generate_lightness_scale(count)
    assert len(scale) == count
    assert all(a >= b for a, b in zip(scale, scale[1:]))
    assert all(0.05 - 1e-9 <= v <= 0.95 + 1e-9 for v in scale)


def test_ease_in_out_quad_is_symmetric():
    assert ease_in_out_quad(0) == 0
    assert ease_in_out_quad(0.5) == pytest.approx(0.5)
    assert ease_in_out_quad(1) == pytest.approx(1)
    assert ease_in_out_quad(0.25) == pytest.approx(1 - ease_in_out_quad(0.75))


# ── Saturation ────────────────────────────────────────────────────────────────

def test_adjust_saturation_light_end():
    assert adjust_saturation(0.8, 0.95) == pytest.approx(0.48)


def test_adjust_saturation_light_end_is_clamped():
    assert adjust_saturation(0.5, 1.05) == 0.0
    assert 0.0 <= adjust_saturation(0.5, 1.0) <= 0.5


def test_adjust_saturation_dark_end():
    assert adjust_saturation(0.8, 0.1) == pytest.approx(0.6)
    assert adjust_saturation(0.8, 0.0) == pytest.approx(0.4)


def test_adjust_saturation_mid_range_boost_is_capped():
    assert adjust_saturation(0.8, 0.5) == pytest.approx(0.88)
    assert adjust_saturation(0.95, 0.5) == 1.0


# ── Foregrounds ───────────────────────────────────────────────────────────────

def test_foreground_candidates():
    background = HSLColor(200, 0.5, 0.5)
    light, dark = generate_foreground_colors(background)
    assert (light.color.h, light.color.l) == (200, 0.98)
    assert light.color.s == pytest.approx(0.05)
    assert (dark.color.h, dark.color.l) == (200, 0.08)
    assert dark.color.s == pytest.approx(0.075)
    assert light.contrast > 1
    assert dark.contrast > 1


def test_recommend_foreground_ties_go_dark():
    assert recommend_foreground(4.0, 4.0) == "dark"
    assert recommend_foreground(4.1, 4.0) == "light"
    assert recommend_foreground(3.9, 4.0) == "dark"


# ── Palette ───────────────────────────────────────────────────────────────────

def test_palette_shape(blue_palette):
    assert blue_palette.name == "test"
    assert len(blue_palette.stops) == 5
    assert [s.stop for s in blue_palette.stops] == [0, 1, 2, 3, 4]
    assert blue_palette.metadata.total_stops == 5
    assert blue_palette.base_color.hex == "#3b82f6"


def test_palette_defaults():
    palette = generate_palette("#3b82f6")
    assert palette.name == "palette"
    assert len(palette.stops) == 16


@pytest.mark.parametrize("color", ["#3b82f6", "hsl(217, 91%, 60%)", "rgb(59, 130, 246)",
                                   {"h": 217, "s": 91, "l": 60}, "rebeccapurple"])
def test_accepts_all_input_forms(color):
    assert len(generate_palette(color, "x", 4).stops) == 4


def test_stops_follow_scale_and_keep_hue(blue_palette):
    base = parse_color("#3b82f6")
    lightness = [s.background.hsl.l for s in blue_palette.stops]
    assert lightness == pytest.approx(generate_lightness_scale(5))
    for stop in blue_palette.stops:
        assert stop.background.hsl.h == pytest.approx(base.h)
        assert 0.01 < stop.background.hsl.l < 0.99


def test_foreground_records_are_consistent(blue_palette):
    for stop in blue_palette.stops:
        for fg in (stop.light, stop.dark):
            assert fg.wcag_aa == (fg.contrast >= 4.5)
            assert fg.wcag_aaa == (fg.contrast >= 7)
            assert fg.contrast == pytest.approx(contrast_ratio(stop.background, fg.value))
        expected = "light" if stop.light.contrast > stop.dark.contrast else "dark"
        assert stop.recommended_foreground == expected


def test_extremes_recommend_opposite_foregrounds(blue_palette):
    assert blue_palette.stops[0].recommended_foreground == "dark"
    assert blue_palette.stops[-1].recommended_foreground == "light"
    assert blue_palette.stops[-1].recommended is blue_palette.stops[-1].light


def test_white_avoids_pure_extremes():
    palette = generate_palette("#ffffff", "white", 5)
    assert len(palette.stops) == 5
    for stop in palette.stops:
        assert stop.background.hsl.l not in (0.0, 1.0)
        assert stop.background.hex not in ("#ffffff", "#000000")


def test_single_stop_palette():
    palette = generate_palette("#3b82f6", "one", 1)
    assert len(palette.stops) == 1
    assert palette.stops[0].background.hsl.l == pytest.approx(0.95)


def test_invalid_color_raises():
    with pytest.raises(InvalidColorError):
        generate_palette("not-a-color")


def test_timestamp_from_clock(blue_palette):
    assert blue_palette.metadata.generated_at == "2024-01-02T03:04:05.678Z"


def test_default_timestamp_is_recent():
    palette = generate_palette("#3b82f6", "now", 2)
    stamp = datetime.fromisoformat(palette.metadata.generated_at.replace("Z", "+00:00"))
    assert abs(datetime.now(timezone.utc) - stamp) < timedelta(minutes=1)


def test_to_dict_layout(blue_palette):
    data = blue_palette.to_dict()
    assert set(data) == {"name", "baseColor", "stops", "metadata"}
    assert data["metadata"] == {"generatedAt": "2024-01-02T03:04:05.678Z", "totalStops": 5}
    first = data["stops"][0]
    assert set(first) == {"stop", "background", "foregrounds", "recommendedForeground"}
    assert set(first["foregrounds"]["light"]) == {"hsl", "rgb", "hex", "contrast", "wcagAA", "wcagAAA"}

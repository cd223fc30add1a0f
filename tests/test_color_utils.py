import pytest

from optics_palette.color_utils import (
    HSLColor,
    InvalidColorError,
    RGBColor,
    color_value_from_hsl,
    create_color_value,
    hex_to_rgb,
    hsl_to_rgb,
    parse_color,
    rgb_to_hex,
    rgb_to_hsl,
)


def test_parse_hex():
    hsl = parse_color("#3b82f6")
    assert hsl.h == pytest.approx(217.2, abs=0.1)
    assert hsl.s == pytest.approx(0.912, abs=0.001)
    assert hsl.l == pytest.approx(0.598, abs=0.001)


def test_parse_short_hex_and_named_colors():
    assert color_value_from_hsl(parse_color("#fff")).hex == "#ffffff"
    assert color_value_from_hsl(parse_color("navy")).hex == "#000080"
    assert color_value_from_hsl(parse_color("White")).hex == "#ffffff"


def test_parse_rgb_string():
    assert color_value_from_hsl(parse_color("rgb(59, 130, 246)")).hex == "#3b82f6"


def test_rgb_string_channels_are_clamped():
    hsl = parse_color("rgb(300, 0, 0)")
    assert hsl == HSLColor(0.0, 1.0, 0.5)
    assert color_value_from_hsl(hsl).hex == "#ff0000"


def test_parse_hsl_string_is_exact():
    hsl = parse_color("hsl(217, 91%, 60%)")
    assert hsl == HSLColor(217.0, 0.91, 0.60)


def test_parse_space_separated_hsl():
    assert parse_color("hsl(120 50% 25%)") == HSLColor(120.0, 0.5, 0.25)


def test_parse_hsl_mapping_with_percentages():
    hsl = parse_color({"h": 217, "s": 91, "l": 60})
    assert hsl.s == pytest.approx(0.91)
    assert hsl.l == pytest.approx(0.60)


def test_parse_hsl_mapping_with_fractions():
    assert parse_color({"h": 400, "s": 0.5, "l": 0.5}) == HSLColor(40.0, 0.5, 0.5)


def test_parse_hsl_instance():
    assert parse_color(HSLColor(10, 0.2, 0.3)) == HSLColor(10.0, 0.2, 0.3)


@pytest.mark.parametrize(
    "bad",
    [
        "not-a-color", "", "#12", "hsl(10, 150%, 50%)", 42, None,
        {"h": 10, "s": 0.5}, {"h": "x", "s": 1, "l": 1},
        {"h": float("inf"), "s": 0.5, "l": 0.5}, {"h": float("nan"), "s": 0.5, "l": 0.5},
    ],
)
def test_invalid_input_raises(bad):
    with pytest.raises(InvalidColorError):
        parse_color(bad)


def test_invalid_color_error_is_value_error():
    assert issubclass(InvalidColorError, ValueError)


def test_greys_have_zero_hue_and_saturation():
    hsl = parse_color("#808080")
    assert hsl.h == 0
    assert hsl.s == 0


def test_hsl_rgb_round_trip():
    for original in (HSLColor(217.0, 0.91, 0.6), HSLColor(0.0, 1.0, 0.5), HSLColor(300.0, 0.25, 0.1)):
        back = rgb_to_hsl(hsl_to_rgb(original))
        assert back.h == pytest.approx(original.h, abs=1e-6)
        assert back.s == pytest.approx(original.s, abs=1e-6)
        assert back.l == pytest.approx(original.l, abs=1e-6)


@pytest.mark.parametrize("hex_color", ["#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#6b7280", "#000000"])
def test_hex_round_trip(hex_color):
    assert color_value_from_hsl(parse_color(hex_color)).hex == hex_color


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(RGBColor(1.2, -0.1, 0.5)) == "#ff0080"


def test_hex_to_rgb():
    rgb = hex_to_rgb("#ff0000")
    assert (rgb.r, rgb.g, rgb.b) == (1.0, 0.0, 0.0)
    with pytest.raises(InvalidColorError):
        hex_to_rgb("nope")


def test_create_color_value_uses_percentages():
    value = create_color_value(0, 100, 50)
    assert value.hex == "#ff0000"
    assert value.hsl == HSLColor(0, 1.0, 0.5)
    assert value.rgb == RGBColor(1.0, 0.0, 0.0)


def test_create_color_value_extremes():
    assert create_color_value(217, 91, 100).hex == "#ffffff"
    assert create_color_value(217, 91, 0).hex == "#000000"


def test_color_value_to_dict():
    data = create_color_value(0, 100, 50).to_dict()
    assert data["hex"] == "#ff0000"
    assert set(data["hsl"]) == {"h", "s", "l"}
    assert set(data["rgb"]) == {"r", "g", "b"}

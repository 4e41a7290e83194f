# tests/test_color.py

import pytest

from palettelab.core.hexcodec import FormatError
from palettelab.models.color import HexColor, HSLColor, RGBColor


@pytest.mark.parametrize(
    "given, expected",
    [
        ((-1, -100, -255), (0, 0, 0)),
        ((256, 300, 511), (0, 44, 255)),
        ((257, -20, 0), (1, 0, 0)),
        ((255, 0, 128), (255, 0, 128)),
    ],
)
def test_rgb_channels_are_normalized(given, expected):
    assert RGBColor(*given).as_tuple() == expected


def test_rgb_channel_setter_normalizes():
    color = RGBColor()
    color.red = 300
    color.green = -5
    assert color.as_tuple() == (44, 0, 0)


def test_rgb_float_channels_truncate():
    assert RGBColor(12.9, 0.4, 254.99).as_tuple() == (12, 0, 254)


@pytest.mark.parametrize(
    "hue, expected",
    [(0, 0), (359, 359), (360, 0), (480, 120), (-20, 340), (400, 40), (-400, 320), (-220, 140), (-360, 0)],
)
def test_hue_wraps_into_full_turn(hue, expected):
    assert HSLColor(hue, 0.5, 0.5).hue == expected


def test_saturation_and_lightness_clamp():
    color = HSLColor(10, 1.5, -0.25)
    assert color.saturation == 1.0
    assert color.lightness == 0.0


def test_increment_hue_both_directions():
    color = HSLColor(350, 0.5, 0.5)
    color.increment_hue(20)
    assert color.hue == 10
    color.increment_hue(-30)
    assert color.hue == 340


def test_set_color_replaces_all_components():
    color = HSLColor(10, 0.1, 0.1)
    color.set_color(200, 0.7, 0.3)
    assert color.as_tuple() == (200, 0.7, 0.3)


def test_copy_is_independent():
    original = RGBColor(1, 2, 3)
    clone = original.copy()
    assert clone == original
    clone.red = 200
    assert original.red == 1


def test_copy_keeps_type():
    assert isinstance(HexColor(1, 2, 3).copy(), HexColor)
    assert isinstance(HSLColor(1, 0.2, 0.3).copy(), HSLColor)


def test_equality_is_by_value_within_a_space():
    assert RGBColor(1, 2, 3) == RGBColor(1, 2, 3)
    assert RGBColor(1, 2, 3) != RGBColor(3, 2, 1)
    assert HSLColor(0, 1.0, 0.5) != RGBColor(255, 0, 0)


def test_colors_are_unhashable():
    with pytest.raises(TypeError):
        hash(RGBColor())
    with pytest.raises(TypeError):
        hash(HSLColor())


def test_conversions_between_spaces():
    assert HSLColor(0, 1.0, 0.5).to_rgb() == RGBColor(255, 0, 0)
    assert RGBColor(255, 0, 0).to_hsl() == HSLColor(0, 1.0, 0.5)
    assert RGBColor(9, 9, 9).to_rgb() == RGBColor(9, 9, 9)


def test_string_forms():
    assert str(RGBColor(120, 160, 200)) == "RGB(120, 160, 200)"
    assert repr(RGBColor(120, 160, 200)) == "RGBColor(120, 160, 200)"
    assert str(HSLColor(210, 0.42, 0.63)) == "HSL (210, 0.42, 0.63)"


def test_hex_color_tracks_channels():
    color = HexColor.from_string("#78A0C8")
    assert color.as_tuple() == (120, 160, 200)
    assert color.hex_code == "78a0c8"
    color.blue = 0
    assert color.hex_code == "78a000"
    assert str(color) == "#78a000"


def test_hex_color_setter_updates_channels():
    color = HexColor()
    color.hex_code = "#fab"
    assert color.as_tuple() == (255, 170, 187)


def test_hex_color_setter_rejects_bad_code_and_keeps_value():
    color = HexColor(1, 2, 3)
    with pytest.raises(FormatError):
        color.hex_code = "#12345"
    assert color.as_tuple() == (1, 2, 3)


def test_hex_color_equals_plain_rgb():
    assert HexColor(10, 20, 30) == RGBColor(10, 20, 30)


@pytest.mark.parametrize("hue", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_hue_becomes_zero(hue):
    assert HSLColor(hue, 0.5, 0.5).hue == 0


def test_non_finite_saturation_and_lightness_are_clamped():
    color = HSLColor(10, float("nan"), float("inf"))
    assert color.saturation == 0.0
    assert color.lightness == 1.0


def test_non_finite_rgb_channel_becomes_zero():
    assert RGBColor(float("nan"), float("inf"), 7).as_tuple() == (0, 0, 7)


def test_float_hue_truncates():
    assert HSLColor(119.9, 1, 0.5).hue == 119

# tests/test_palettes.py

import pytest

from palettelab.models.color import HSLColor, RGBColor
from palettelab.palettes import (
    AnalogousPalette,
    ComplementaryPalette,
    MonochromaticPalette,
    PALETTES,
    SplitComplementaryPalette,
    TriadPalette,
    create_palette,
)


def _close(color, expected, tolerance=2):
    return all(abs(a - b) <= tolerance for a, b in zip(color.to_rgb().as_tuple(), expected))


def test_starting_color_comes_first():
    start = RGBColor(60, 120, 180)
    for cls in PALETTES.values():
        palette = cls(start)
        assert palette[0] == start
        assert palette.starting_color == start


def test_complementary_in_rgb_space():
    palette = ComplementaryPalette(RGBColor(120, 120, 0), space="rgb")
    assert len(palette) == 2
    assert palette[1] == RGBColor(0, 0, 120)


def test_complementary_in_hsl_space_rotates_hue():
    palette = ComplementaryPalette(HSLColor(30, 0.5, 0.4))
    assert palette[1] == HSLColor(210, 0.5, 0.4)


def test_triad_of_red_is_green_then_blue():
    palette = TriadPalette(RGBColor(255, 0, 0), space="rgb")
    assert [color.as_tuple() for color in palette] == [
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
    ]


def test_analogous_default_offset():
    palette = AnalogousPalette(HSLColor(10, 0.5, 0.5))
    assert palette.offset == 30
    assert palette[1] == HSLColor(40, 0.5, 0.5)
    assert palette[2] == HSLColor(340, 0.5, 0.5)


def test_analogous_max_offset_in_rgb_space():
    palette = AnalogousPalette(RGBColor(60, 120, 180), offset=120, space="rgb")
    assert _close(palette[1], (180, 60, 120))
    assert _close(palette[2], (120, 180, 60))


@pytest.mark.parametrize("offset, expected", [(500, 120), (-45, 45), (0, 0), (120, 120)])
def test_analogous_offset_is_absolute_and_capped(offset, expected):
    assert AnalogousPalette(HSLColor(0, 1, 0.5), offset=offset).offset == expected


def test_split_complementary_accents_are_equal():
    palette = SplitComplementaryPalette(HSLColor(100, 0.5, 0.5), offset=30)
    assert len(palette) == 3
    assert palette[1] == HSLColor(130, 0.5, 0.5)
    assert palette[1] == palette[2]


def test_split_complementary_negative_offset_is_zero():
    start = HSLColor(100, 0.5, 0.5)
    palette = SplitComplementaryPalette(start, offset=-30)
    assert palette.offset == 0
    assert palette[1] == start
    assert palette[2] == start


def test_monochromatic_two_shades_of_black():
    palette = MonochromaticPalette(HSLColor(0, 0, 0), amount=2, space="rgb")
    assert palette[1] == RGBColor(128, 128, 128)


@pytest.mark.parametrize("space", ["hsl", "rgb"])
def test_monochromatic_three_shades_of_red(space):
    palette = MonochromaticPalette(RGBColor(255, 0, 0), amount=3, space=space)
    assert len(palette) == 3
    assert _close(palette[1], (255, 170, 170))
    assert _close(palette[2], (87, 0, 0))


@pytest.mark.parametrize("amount, length", [(-3, 1), (0, 1), (1, 1), (2, 2), (5, 5), (12, 12)])
def test_monochromatic_length(amount, length):
    assert len(MonochromaticPalette(HSLColor(200, 0.3, 0.3), amount=amount)) == length


def test_monochromatic_default_amount():
    assert len(MonochromaticPalette(HSLColor(200, 0.3, 0.3))) == 5


def test_default_starting_color_is_black():
    palette = ComplementaryPalette()
    assert palette[0] == HSLColor(0, 0, 0)
    assert palette[1] == HSLColor(180, 0, 0)


def test_invalid_space_rejected():
    with pytest.raises(ValueError):
        ComplementaryPalette(RGBColor(), space="cmyk")


def test_palette_cannot_be_mutated_through_accessors():
    start = RGBColor(10, 20, 30)
    palette = ComplementaryPalette(start, space="rgb")
    start.red = 99
    palette[0].red = 99
    palette.colors[1].blue = 0
    palette.starting_color.green = 0
    assert palette[0] == RGBColor(10, 20, 30)
    assert palette.colors[1] == ComplementaryPalette(RGBColor(10, 20, 30), space="rgb")[1]


def test_palette_equality():
    first = TriadPalette(RGBColor(255, 0, 0))
    second = TriadPalette(RGBColor(255, 0, 0))
    assert first == second
    assert first != TriadPalette(RGBColor(0, 255, 0))
    assert first != ComplementaryPalette(RGBColor(255, 0, 0))


def test_str_lists_colors_and_total():
    palette = TriadPalette(RGBColor(255, 0, 0))
    assert str(palette) == (
        "[RGB(255, 0, 0), HSL (120, 1.00, 0.50), HSL (240, 1.00, 0.50)]\n"
        "Total colors: 3."
    )


def test_write_to_file_one_hsl_line_per_color(tmp_path):
    target = tmp_path / "triad.txt"
    target.write_text("stale content\n" * 10)
    TriadPalette(RGBColor(255, 0, 0)).write_to_file(target)
    assert target.read_text(encoding="utf-8").splitlines() == [
        "HSL (0, 1.00, 0.50)",
        "HSL (120, 1.00, 0.50)",
        "HSL (240, 1.00, 0.50)",
    ]


def test_write_to_directory_raises(tmp_path):
    with pytest.raises(OSError):
        ComplementaryPalette(RGBColor(1, 2, 3)).write_to_file(tmp_path)


def test_create_palette_passes_parameter():
    palette = create_palette("monochromatic", HSLColor(0, 1, 0.5), param=4)
    assert isinstance(palette, MonochromaticPalette)
    assert len(palette) == 4
    assert create_palette("analogous", HSLColor(0, 1, 0.5), param=60).offset == 60


def test_create_palette_ignores_parameter_without_one():
    palette = create_palette("triadic", HSLColor(0, 1, 0.5), param=50)
    assert palette[1] == HSLColor(120, 1, 0.5)


def test_create_palette_space():
    palette = create_palette("complementary", HSLColor(0, 1, 0.5), space="rgb")
    assert palette[1] == RGBColor(0, 255, 255)


def test_create_palette_unknown_name():
    with pytest.raises(KeyError):
        create_palette("tetradic")


@pytest.mark.parametrize("start", [HSLColor(200, 0.8, 0.6), HSLColor(30, 0.5, 0.9), RGBColor(60, 120, 180)])
def test_monochromatic_output_space_only_changes_representation(start):
    # lightness wraps through 0 along the way, where an RGB round trip would lose hue
    hsl_palette = MonochromaticPalette(start, amount=5)
    rgb_palette = MonochromaticPalette(start, amount=5, space="rgb")
    assert [color.to_rgb() for color in hsl_palette.colors[1:]] == list(rgb_palette.colors[1:])


def test_monochromatic_keeps_hue_after_passing_black():
    palette = MonochromaticPalette(HSLColor(200, 0.8, 0.6), amount=5, space="rgb")
    assert palette[2] == RGBColor(0, 0, 0)
    assert _close(palette[3], (10, 65, 92))
    assert _close(palette[4], (20, 129, 184))

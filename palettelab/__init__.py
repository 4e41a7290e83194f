#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/__init__.py

__version__ = "0.1.0"

from palettelab.core.conversions import rgb_to_hsl, hsl_to_rgb
from palettelab.core.hexcodec import FormatError, is_parseable, parse, format_hex
from palettelab.models.color import Color, RGBColor, HSLColor, HexColor
from palettelab.palettes import (
    Palette,
    ComplementaryPalette,
    AnalogousPalette,
    TriadPalette,
    SplitComplementaryPalette,
    MonochromaticPalette,
    PALETTES,
    create_palette,
)

__all__ = [
    "__version__",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "FormatError",
    "is_parseable",
    "parse",
    "format_hex",
    "Color",
    "RGBColor",
    "HSLColor",
    "HexColor",
    "Palette",
    "ComplementaryPalette",
    "AnalogousPalette",
    "TriadPalette",
    "SplitComplementaryPalette",
    "MonochromaticPalette",
    "PALETTES",
    "create_palette",
]

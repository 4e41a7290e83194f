#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/palettes/__init__.py

from .base import Palette
from .strategies import (
    ComplementaryPalette,
    AnalogousPalette,
    TriadPalette,
    SplitComplementaryPalette,
    MonochromaticPalette,
    PALETTES,
    create_palette,
)

__all__ = [
    "Palette",
    "ComplementaryPalette",
    "AnalogousPalette",
    "TriadPalette",
    "SplitComplementaryPalette",
    "MonochromaticPalette",
    "PALETTES",
    "create_palette",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/palette/engine.py

from typing import Dict, List, Optional

from palettelab.core import config as c
from palettelab.models.color import Color
from palettelab.palettes import Palette, create_palette


def build_palettes(
    base: Color,
    types: List[str],
    param: Optional[int] = None,
    space: str = "hsl",
) -> Dict[str, Palette]:
    """Generate one palette per requested type, keyed by type, in PALETTE_KEYS order."""
    palettes = {}
    for key in c.PALETTE_KEYS:
        if key not in types:
            continue
        value = param
        if key == "monochromatic" and value is not None:
            value = max(0, min(c.MAX_MONO_AMOUNT, value))
        palettes[key] = create_palette(key, base, value, space=space)
    return palettes

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/palette/renderer.py

from typing import Dict

from palettelab.core import config as c
from palettelab.palettes import Palette
from palettelab.shared.formatting import format_colorspace
from palettelab.shared.preview import print_color_block


def render_palettes(palettes: Dict[str, Palette], title: str) -> None:
    """Print every palette as a column of swatches under the base color."""
    print()
    print_color_block(next(iter(palettes.values())).starting_color, f"{c.BOLD_WHITE}{title}{c.RESET}")
    for key, palette in palettes.items():
        print()
        name = key.replace("_", " ")
        for i, color in enumerate(palette.colors[1:], start=1):
            label = f"{c.MSG_BOLD_COLORS['info']}{name} {i}{c.RESET}"
            print_color_block(color, label, end="")
            print(f"  {format_colorspace('hsl', color)}")
    print()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/preview.py

import os
import re
import sys

from palettelab.core import config as c
from palettelab.core.hexcodec import format_hex

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def ensure_truecolor() -> None:
    """Advertise 24-bit color support so swatch escapes are not downgraded.

    A COLORTERM the user already set is left alone.
    """
    if sys.platform != "win32":
        os.environ.setdefault("COLORTERM", "truecolor")


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(color, title: str = "color", end: str = "\n") -> None:
    """Print a truecolor swatch of any color model followed by its hex code."""
    rgb = color.to_rgb()
    padding = " " * max(0, c.SWATCH_LABEL_WIDTH - get_visible_len(title))

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{rgb.red};{rgb.green};{rgb.blue}m                {c.RESET}  "
        f"{c.BOLD_WHITE}#{format_hex(rgb)}{c.RESET}",
        end=end,
    )

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/convert/renderer.py

from palettelab.core import config as c
from palettelab.shared.formatting import format_colorspace


def render_convert_info(color, fmt: str, verbose: bool = False) -> str:
    """Composes a color into a formatted output string."""
    def bold(t): return f"{c.BOLD_WHITE}{t}{c.RESET}"

    out = format_colorspace(fmt, color)
    if not verbose:
        return out
    return f"{c.MSG_BOLD_COLORS['info']}{fmt:<4}{c.RESET} {bold(out)}"

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/formatting.py

from palettelab.core.hexcodec import format_hex


def format_colorspace(fmt: str, color) -> str:
    """Render a color in one of the display formats: hex, rgb or hsl."""
    if fmt == 'hex':
        return f"#{format_hex(color)}"
    elif fmt == 'rgb':
        return str(color.to_rgb())
    elif fmt == 'hsl':
        return str(color.to_hsl())

    return ""

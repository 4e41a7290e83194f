#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/hexcodec.py

"""
Hex color codes in the forms #rgb, rgb, #rrggbb and rrggbb.

Parsing is strict: surrounding whitespace and a single leading '#' are
removed, and what is left must be exactly 3 or 6 hex digits. Shorthand
codes expand CSS-style, each digit repeated ('e' -> 'ee').
Formatting always produces 6 lowercase digits without '#'.
"""

from typing import Tuple

from . import config as c


class FormatError(ValueError):
    """Raised when a string is not a parseable hex color code."""


def _strip(value: str) -> str:
    s = str(value).strip()
    if s.startswith("#"):
        s = s[1:]
    return s


def is_parseable(value: str) -> bool:
    """Return True if value is a 3 or 6 digit hex code, '#' optional."""
    if value is None:
        return False
    return c.HEX_PATTERN.fullmatch(_strip(value)) is not None


def normalize_hex(value: str) -> str:
    """Return the canonical 6-digit lowercase form of a parseable hex code."""
    if not is_parseable(value):
        raise FormatError(f"invalid hex value: '{value}'")
    s = _strip(value).lower()
    if len(s) == 3:
        # e.g., 'abc' becomes 'aabbcc'
        s = "".join(ch * 2 for ch in s)
    return s


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Convert a hex string to an RGB tuple."""
    h = normalize_hex(value)
    return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to a 6-digit lowercase hex string."""
    return f"{int(r):02x}{int(g):02x}{int(b):02x}"


def parse(value: str):
    """Parse a hex code into an RGBColor.

    Raises:
        FormatError: if value is not a 3 or 6 digit hex code.
    """
    from palettelab.models.color import RGBColor

    return RGBColor(*hex_to_rgb(value))


def format_hex(color) -> str:
    """Serialize any color as 'rrggbb'."""
    rgb = color.to_rgb()
    return rgb_to_hex(rgb.red, rgb.green, rgb.blue)

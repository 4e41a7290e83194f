#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/config.py

import re

# ==========================================
# Color Model Bounds
# ==========================================

RGB_MAX = 255.0                    # 8-bit color depth limit
CHANNEL_MOD = 256                  # Channel values at or above this wrap around
HUE_MAX = 360                      # Full circle degrees
UNIT = 1.0                         # Upper bound for saturation and lightness
HALF = 0.5                         # Lightness midpoint for the HSL branches

# Chromaticity plane projection (red at 0deg, green at 120deg, blue at 240deg)
CHROMA_X_MULT = 0.5 * 3 ** 0.5     # Weight of (G - B) on the x axis
CHROMA_Y_MULT = 0.5                # Weight of (2R - G - B) on the y axis

# Hue offsets used when deriving the red and blue channels from green
CHANNEL_THIRD = 1.0 / 3.0

# ==========================================
# Palette Rules
# ==========================================

COMPLEMENT_OFFSET = 180            # Complementary hue rotation
TRIAD_OFFSET = 120                 # Triadic hue rotation
ANALOGOUS_MAX_OFFSET = 120         # Analogous offsets are clamped to this
DEFAULT_ANALOGOUS_OFFSET = 30      # Analogous offset when none is given
DEFAULT_SPLIT_OFFSET = 0           # Split-complementary offset when none is given
DEFAULT_MONO_AMOUNT = 5            # Monochromatic palette size when none is given
MAX_MONO_AMOUNT = 256              # CLI upper bound for monochromatic palettes

# Supported palette types, in display order
PALETTE_KEYS = [
    'complementary',
    'analogous',
    'triadic',
    'split_complementary',
    'monochromatic',
]

# Output models a palette can emit
COLOR_SPACES = ['hsl', 'rgb']

# ==========================================
# Hex Codec
# ==========================================

# Compiled once; matched against the string left after stripping
# whitespace and a single leading '#'
HEX_PATTERN = re.compile(r"(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
SWATCH_LABEL_WIDTH = 24            # Labels are padded to this visible width

# Levels printed to stdout; everything else goes to stderr
STDOUT_LEVELS = ("info", "success")

EXIT_USAGE = 2                     # Exit status for bad input or failed export

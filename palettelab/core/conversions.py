#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/conversions.py

import math
from typing import Tuple

from . import config as c


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.UNIT, v))


def _clamp255(v: float) -> int:
    return max(0, min(int(c.RGB_MAX), int(v)))


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, float, float]:
    """Convert RGB (0-255) to HSL with hue in whole degrees.

    Hue is the angle of the color on the chromaticity plane, where the
    three primaries sit 120 degrees apart with red at 0.
    """
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / 2

    if cmax == cmin:
        s = 0.0
    elif L < c.HALF:
        s = (cmax - cmin) / (cmax + cmin)
    else:
        s = (cmax - cmin) / (2 - (cmax + cmin))

    x = c.CHROMA_X_MULT * (g_f - b_f)
    y = c.CHROMA_Y_MULT * (2 * r_f - g_f - b_f)
    h = (math.degrees(math.atan2(x, y)) + c.HUE_MAX) % c.HUE_MAX
    h = int(round(h)) % c.HUE_MAX

    return (h, s, L)


def _wrap_unit(t: float) -> float:
    if t < 0:
        return t + 1
    if t > 1:
        return t - 1
    return t


def _hue_to_channel(t: float, t1: float, t2: float) -> float:
    """Piecewise transform of one hue-shifted fraction into a channel in [0, 1]."""
    if t * 6 < 1:
        return t2 + (t1 - t2) * 6 * t
    if t * 2 < 1:
        return t1
    if t * 3 < 2:
        return t2 + (t1 - t2) * (4 - 6 * t)
    return t2


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[int, int, int]:
    """Convert HSL to RGB (0-255), rounding each channel to the nearest integer."""
    if s == 0:
        v = _clamp255(round(c.RGB_MAX * L))
        return v, v, v

    t1 = L * (1 + s) if L < c.HALF else L + s - L * s
    t2 = 2 * L - t1

    frac = h / c.HUE_MAX
    channels = (
        _wrap_unit(frac + c.CHANNEL_THIRD),
        _wrap_unit(frac),
        _wrap_unit(frac - c.CHANNEL_THIRD),
    )
    r, g, b = (
        _clamp255(round(_clamp01(_hue_to_channel(t, t1, t2)) * c.RGB_MAX))
        for t in channels
    )
    return r, g, b

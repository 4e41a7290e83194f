#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/models/color.py

"""
Color value models.

Both RGB and HSL are three-component spaces, so every model is built
from exactly three values. Out-of-range values are never rejected;
each setter normalizes its input:

- RGB channels: negative values clamp to 0, values >= 256 wrap mod 256.
- Hue: wraps into [0, 360).
- Saturation and lightness: clamp into [0, 1].

Each model converts to the other with to_rgb() / to_hsl(), so callers
never need to check which space a color lives in.
"""

import math
from typing import Tuple

from palettelab.core import config as c
from palettelab.core import conversions as conv
from palettelab.core import hexcodec


class Color:
    """Common base of the RGB and HSL models."""

    def set_color(self, first: float, second: float, third: float) -> None:
        raise NotImplementedError

    def as_tuple(self) -> tuple:
        raise NotImplementedError

    def to_rgb(self) -> "RGBColor":
        raise NotImplementedError

    def to_hsl(self) -> "HSLColor":
        raise NotImplementedError

    def copy(self) -> "Color":
        return type(self)(*self.as_tuple())


def _finite_int(value: float) -> int:
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value)


def _normalize_channel(value: float) -> int:
    value = _finite_int(value)
    return 0 if value < 0 else value % c.CHANNEL_MOD


class RGBColor(Color):
    """A color described by integer red, green and blue in [0, 255]."""

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0):
        self.set_color(red, green, blue)

    @property
    def red(self) -> int:
        return self._red

    @red.setter
    def red(self, value: int) -> None:
        self._red = _normalize_channel(value)

    @property
    def green(self) -> int:
        return self._green

    @green.setter
    def green(self, value: int) -> None:
        self._green = _normalize_channel(value)

    @property
    def blue(self) -> int:
        return self._blue

    @blue.setter
    def blue(self, value: int) -> None:
        self._blue = _normalize_channel(value)

    def set_color(self, red: int, green: int, blue: int) -> None:
        self.red = red
        self.green = green
        self.blue = blue

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self._red, self._green, self._blue)

    def to_rgb(self) -> "RGBColor":
        return RGBColor(*self.as_tuple())

    def to_hsl(self) -> "HSLColor":
        return HSLColor(*conv.rgb_to_hsl(*self.as_tuple()))

    def __eq__(self, other):
        if not isinstance(other, RGBColor):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._red}, {self._green}, {self._blue})"

    def __str__(self) -> str:
        return f"RGB({self._red}, {self._green}, {self._blue})"


class HSLColor(Color):
    """A color described by an integer hue in degrees, saturation and lightness."""

    def __init__(self, hue: int = 0, saturation: float = 0.0, lightness: float = 0.0):
        self.set_color(hue, saturation, lightness)

    @property
    def hue(self) -> int:
        return self._hue

    @hue.setter
    def hue(self, value: int) -> None:
        # floor modulo: -20 -> 340, -400 -> 320, -360 -> 0; nan and inf -> 0
        self._hue = _finite_int(value) % c.HUE_MAX

    @property
    def saturation(self) -> float:
        return self._saturation

    @saturation.setter
    def saturation(self, value: float) -> None:
        self._saturation = conv._clamp01(float(value))

    @property
    def lightness(self) -> float:
        return self._lightness

    @lightness.setter
    def lightness(self, value: float) -> None:
        self._lightness = conv._clamp01(float(value))

    def set_color(self, hue: int, saturation: float, lightness: float) -> None:
        self.hue = hue
        self.saturation = saturation
        self.lightness = lightness

    def increment_hue(self, degrees: int) -> None:
        """Rotate the hue by the given number of degrees, either direction."""
        self.hue = self._hue + int(degrees)

    def as_tuple(self) -> Tuple[int, float, float]:
        return (self._hue, self._saturation, self._lightness)

    def to_rgb(self) -> RGBColor:
        return RGBColor(*conv.hsl_to_rgb(*self.as_tuple()))

    def to_hsl(self) -> "HSLColor":
        return HSLColor(*self.as_tuple())

    def __eq__(self, other):
        if not isinstance(other, HSLColor):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return f"HSLColor({self._hue}, {self._saturation!r}, {self._lightness!r})"

    def __str__(self) -> str:
        return f"HSL ({self._hue}, {self._saturation:.2f}, {self._lightness:.2f})"


class HexColor(RGBColor):
    """An RGB color addressed by its hex code.

    The code is derived from the channels whenever it is read, so it can
    never fall out of sync with them.
    """

    @classmethod
    def from_string(cls, value: str) -> "HexColor":
        """Build a HexColor from '#rgb', 'rgb', '#rrggbb' or 'rrggbb'.

        Raises:
            FormatError: if value is not a 3 or 6 digit hex code.
        """
        return cls(*hexcodec.hex_to_rgb(value))

    @property
    def hex_code(self) -> str:
        return hexcodec.rgb_to_hex(*self.as_tuple())

    @hex_code.setter
    def hex_code(self, value: str) -> None:
        self.set_color(*hexcodec.hex_to_rgb(value))

    def __repr__(self) -> str:
        return f"HexColor.from_string('#{self.hex_code}')"

    def __str__(self) -> str:
        return f"#{self.hex_code}"

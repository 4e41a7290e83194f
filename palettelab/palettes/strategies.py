#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/palettes/strategies.py

from typing import Dict, Optional, Type

from palettelab.core import config as c
from palettelab.models.color import Color, HSLColor
from .base import Palette


class ComplementaryPalette(Palette):
    """Base color plus the color on the opposite side of the wheel (hue + 180)."""

    def _generate(self) -> None:
        complementary = self._starting_hsl()
        complementary.increment_hue(c.COMPLEMENT_OFFSET)
        self._add_color(complementary)


class AnalogousPalette(Palette):
    """Base color plus its two neighbours at hue + offset and hue - offset.

    The offset is taken as an absolute value and capped at 120 degrees.
    """

    PARAMETER = "offset"

    def __init__(
        self,
        color: Optional[Color] = None,
        offset: int = c.DEFAULT_ANALOGOUS_OFFSET,
        space: str = "hsl",
    ):
        self._offset = min(abs(int(offset)), c.ANALOGOUS_MAX_OFFSET)
        super().__init__(color, space=space)

    @property
    def offset(self) -> int:
        return self._offset

    def _generate(self) -> None:
        analogous_one = self._starting_hsl()
        analogous_two = self._starting_hsl()
        analogous_one.increment_hue(self._offset)
        analogous_two.increment_hue(-self._offset)
        self._add_color(analogous_one)
        self._add_color(analogous_two)


class TriadPalette(AnalogousPalette):
    """Base color plus the two colors 120 degrees away on either side."""

    PARAMETER = None

    def __init__(self, color: Optional[Color] = None, space: str = "hsl"):
        super().__init__(color, c.TRIAD_OFFSET, space=space)


class SplitComplementaryPalette(Palette):
    """Base color plus two accent colors rotated by offset.

    Both accents use the same +offset rotation, so they are identical.
    """

    PARAMETER = "offset"

    def __init__(
        self,
        color: Optional[Color] = None,
        offset: int = c.DEFAULT_SPLIT_OFFSET,
        space: str = "hsl",
    ):
        self._offset = max(0, int(offset))
        super().__init__(color, space=space)

    @property
    def offset(self) -> int:
        return self._offset

    def _generate(self) -> None:
        accent_one = self._starting_hsl()
        accent_two = self._starting_hsl()
        accent_one.increment_hue(self._offset)
        accent_two.increment_hue(self._offset)
        self._add_color(accent_one)
        self._add_color(accent_two)


class MonochromaticPalette(Palette):
    """Lighter and darker shades of the base color.

    Each of the amount - 1 extra colors advances lightness by 1 / amount,
    wrapping past 1, and takes hue and saturation from the color generated
    just before it.
    """

    PARAMETER = "amount"

    def __init__(
        self,
        color: Optional[Color] = None,
        amount: int = c.DEFAULT_MONO_AMOUNT,
        space: str = "hsl",
    ):
        self._amount = max(0, int(amount))
        super().__init__(color, space=space)

    @property
    def amount(self) -> int:
        return self._amount

    def _generate(self) -> None:
        # chain stays in HSL whatever the output space
        previous = self._starting_hsl()
        for _ in range(self._amount - 1):
            lightness = (previous.lightness + 1.0 / self._amount) % 1
            previous = HSLColor(previous.hue, previous.saturation, lightness)
            self._add_color(previous.copy())


PALETTES: Dict[str, Type[Palette]] = {
    'complementary': ComplementaryPalette,
    'analogous': AnalogousPalette,
    'triadic': TriadPalette,
    'split_complementary': SplitComplementaryPalette,
    'monochromatic': MonochromaticPalette,
}


def create_palette(
    name: str,
    color: Optional[Color] = None,
    param: Optional[int] = None,
    space: str = "hsl",
) -> Palette:
    """Build a palette by its registry name.

    param is passed as the strategy's offset or amount and ignored by
    strategies without one. Unknown names raise KeyError.
    """
    cls = PALETTES[name]
    kwargs = {"space": space}
    if param is not None and cls.PARAMETER:
        kwargs[cls.PARAMETER] = param
    return cls(color, **kwargs)

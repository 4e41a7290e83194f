#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/palettes/base.py

import os
from typing import Iterator, List, Optional, Tuple, Union

from palettelab.core import config as c
from palettelab.models.color import Color, HSLColor


class Palette:
    """Ordered colors derived from one starting color.

    The starting color is always the first entry. Subclasses set their
    parameters before calling Palette.__init__, which runs _generate()
    exactly once; the palette does not change afterwards.
    """

    PARAMETER: Optional[str] = None

    def __init__(self, color: Optional[Color] = None, space: str = "hsl"):
        if space not in c.COLOR_SPACES:
            raise ValueError(f"unknown color space '{space}', expected one of {c.COLOR_SPACES}")
        if color is None:
            color = HSLColor(0, 0, 0)
        self._space = space
        self._starting_color = color.copy()
        self._colors: List[Color] = [self._starting_color]
        self._generate()

    def _generate(self) -> None:
        raise NotImplementedError

    def _starting_hsl(self) -> HSLColor:
        return self._starting_color.to_hsl()

    def _add_color(self, color: HSLColor) -> None:
        self._colors.append(color.to_rgb() if self._space == "rgb" else color)

    @property
    def space(self) -> str:
        return self._space

    @property
    def starting_color(self) -> Color:
        return self._starting_color.copy()

    @property
    def colors(self) -> Tuple[Color, ...]:
        return tuple(color.copy() for color in self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index].copy()

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __eq__(self, other):
        if not isinstance(other, Palette):
            return NotImplemented
        if len(self._colors) != len(other._colors):
            return False
        return all(a == b for a, b in zip(self._colors, other._colors))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._starting_color!r}, space={self._space!r})"

    def __str__(self) -> str:
        listing = ", ".join(str(color) for color in self._colors)
        return f"[{listing}]\nTotal colors: {len(self._colors)}."

    def write_to_file(self, path: Union[str, os.PathLike]) -> None:
        """Write every color as an HSL string, one per line.

        An existing file is overwritten. A directory path raises
        IsADirectoryError.
        """
        with open(path, "w", encoding="utf-8") as fh:
            for color in self._colors:
                fh.write(f"{color.to_hsl()}\n")

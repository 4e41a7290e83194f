#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/color_input.py

import argparse
from typing import Tuple

from palettelab.core.hexcodec import parse
from palettelab.models.color import Color, HSLColor, RGBColor
from .logger import exit_on_error, fail


def add_color_input_arguments(parser: argparse.ArgumentParser, input_handlers: dict) -> None:
    """Attach the mutually exclusive -H / --rgb / --hsl base color options."""
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-H",
        "--hex",
        type=input_handlers["hex"],
        help="base hex code (#rgb, rgb, #rrggbb or rrggbb)",
    )
    color_input_group.add_argument(
        "--rgb",
        nargs=3,
        type=input_handlers["int"],
        metavar=("R", "G", "B"),
        help="base color as red green blue (0-255)",
    )
    color_input_group.add_argument(
        "--hsl",
        nargs=3,
        type=input_handlers["float"],
        metavar=("H", "S", "L"),
        help="base color as hue (deg) saturation lightness (0-1)",
    )


def resolve_color_input(args: argparse.Namespace) -> Tuple[Color, str]:
    """Resolve raw CLI input into a base color and a display title."""
    if getattr(args, "hex", None):
        with exit_on_error(f"read hex value '{args.hex}'"):
            color = parse(args.hex)
        return color, f"#{args.hex}"

    if getattr(args, "rgb", None):
        color = RGBColor(*args.rgb)
        return color, str(color)

    if getattr(args, "hsl", None):
        h, s, l_hsl = args.hsl
        color = HSLColor(h, s, l_hsl)
        return color, str(color)

    fail(
        "one of the arguments -H/--hex --rgb --hsl is required",
        hint="use 'palettelab --help' for more information",
    )

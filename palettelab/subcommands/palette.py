#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/palette.py

import argparse
import sys

from palettelab.shared.color_input import add_color_input_arguments
from palettelab.shared.logger import PaletteArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.preview import ensure_truecolor
from palettelab.logic.palette.resolver import resolve_palette_input


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = PaletteArgumentParser(
        prog="palettelab palette",
        description="palettelab palette: derive color palettes from a base color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_color_input_arguments(parser, INPUT_HANDLERS)
    parser.add_argument(
        "-t",
        "--type",
        action="append",
        type=INPUT_HANDLERS["palette_type"],
        help=(
            "palette type, repeatable (default: complementary)\n"
            "complementary analogous triadic split_complementary monochromatic"
        ),
    )
    parser.add_argument(
        "-all",
        "--all-palettes",
        action="store_true",
        help="show every palette type",
    )
    parser.add_argument(
        "-p",
        "--param",
        type=INPUT_HANDLERS["param"],
        default=None,
        help=(
            "offset in degrees for analogous (default: 30, max: 120) and\n"
            "split_complementary (default: 0), color count for monochromatic (default: 5)"
        ),
    )
    parser.add_argument(
        "-sp",
        "--space",
        type=INPUT_HANDLERS["color_space"],
        default="hsl",
        help="model of the generated colors: hsl rgb (default: hsl)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="write the palette to FILE, one HSL color per line",
    )
    return parser


def main() -> None:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_palette_input(args)


if __name__ == "__main__":
    main()

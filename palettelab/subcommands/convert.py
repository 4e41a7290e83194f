#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/convert.py

import argparse
import sys

from palettelab.shared.color_input import add_color_input_arguments
from palettelab.shared.logger import PaletteArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.logic.convert.engine import run


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = PaletteArgumentParser(
        prog="palettelab convert",
        description="palettelab convert: show a color as hex, rgb and hsl",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    add_color_input_arguments(parser, INPUT_HANDLERS)
    parser.add_argument(
        "-t",
        "--to-format",
        choices=["hex", "rgb", "hsl"],
        default=None,
        help="print only this format (default: all three)",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="label each output line",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    run(args)


if __name__ == "__main__":
    main()

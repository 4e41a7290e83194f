#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/main.py

import argparse
import sys

from palettelab import __version__
from palettelab.subcommands.command_registry import SUBCOMMANDS
from palettelab.shared.logger import fail, PaletteArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level command."""
    parser = PaletteArgumentParser(
        prog="palettelab",
        description=(
            "palettelab: RGB/HSL conversion and color palettes\n\n"
            "commands:\n"
            "  palette    derive palettes from a base color\n"
            "  convert    show a color as hex, rgb and hsl"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"palettelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def main() -> None:
    """Main entry point for palettelab CLI"""
    # Subcommand Routing
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getattr(module, f"get_{name}_parser")().print_help()
        sys.exit(0)

    hint = "use 'palettelab --help' for more information"
    if args.command:
        fail(f"unrecognized command or argument: '{args.command}'", hint=hint)
    fail("a command is required: " + " ".join(SUBCOMMANDS), hint=hint)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/convert/engine.py

import argparse

from palettelab.shared.color_input import resolve_color_input
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    color, _ = resolve_color_input(args)
    formats = [args.to_format] if args.to_format else ["hex", "rgb", "hsl"]
    for fmt in formats:
        print(render_convert_info(color, fmt, verbose=args.verbose))

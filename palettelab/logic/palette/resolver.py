#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/palette/resolver.py

import argparse

from palettelab.core import config as c
from palettelab.shared.color_input import resolve_color_input
from palettelab.shared.logger import exit_on_error, fail, log
from .engine import build_palettes
from .renderer import render_palettes


def resolve_palette_input(args: argparse.Namespace) -> None:
    """Orchestrate input resolution, palette generation, rendering and export."""
    base, title = resolve_color_input(args)

    if getattr(args, "all_palettes", False):
        types = list(c.PALETTE_KEYS)
    else:
        types = args.type or ["complementary"]

    if args.output and len(set(types)) > 1:
        fail("--output writes a single palette; pick one -t/--type")

    palettes = build_palettes(base, types, args.param, args.space)
    render_palettes(palettes, title)

    if args.output:
        palette = next(iter(palettes.values()))
        with exit_on_error(f"write '{args.output}'"):
            palette.write_to_file(args.output)
        log("success", f"wrote {len(palette)} colors to '{args.output}'")

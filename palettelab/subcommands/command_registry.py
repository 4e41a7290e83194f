#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/command_registry.py

from . import (
    convert,
    palette,
)

SUBCOMMANDS = {
    'convert': convert,
    'palette': palette,
}

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/models/__init__.py

from .color import Color, RGBColor, HSLColor, HexColor

__all__ = ["Color", "RGBColor", "HSLColor", "HexColor"]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/sanitizer.py

import argparse
import re

from palettelab.core import config as c
from palettelab.core.hexcodec import FormatError, normalize_hex


# Short names accepted on the command line for each palette type
PALETTE_ALIASES = {
    "comp": "complementary",
    "complement": "complementary",
    "analog": "analogous",
    "triad": "triadic",
    "split": "split_complementary",
    "splitcomp": "split_complementary",
    "mono": "monochromatic",
}


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its sign.
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    # Regex [0-9] extracts only the numeric digits
    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    keeping only the first decimal point encountered.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    clean_str = ""
    dot_seen = False
    for char in raw_chars:
        if char == '.':
            if dot_seen:
                continue
            dot_seen = True
        clean_str += char

    # Return None if string is empty or just a lonely dot
    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments; returns the 6-digit form."""
    try:
        return normalize_hex(v)
    except FormatError:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")


def handle_palette_type(v: str) -> str:
    """Validator for palette names; accepts dashes, spaces and short aliases."""
    cleaned = re.sub(r"[\s\-]+", "_", str(v).strip().lower())
    cleaned = PALETTE_ALIASES.get(cleaned.replace("_", ""), cleaned)
    if cleaned not in c.PALETTE_KEYS:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid palette type: '{raw}' (choose from {', '.join(c.PALETTE_KEYS)})"
        )
    return cleaned


def handle_color_space(v: str) -> str:
    """Validator for the output color model."""
    cleaned = "".join(re.findall(r"[a-z]", str(v).lower()))
    if cleaned not in c.COLOR_SPACES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color space: '{raw}'")
    return cleaned


def handle_int_any(v: str) -> int:
    """Validator for unbounded integer CLI arguments."""
    val = _extract_signed_int(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")
    return val


def handle_param(v: str) -> int:
    """Validator for -p/--param: a whole number of degrees or colors.

    Decimal input is rejected rather than having its digits joined
    ('3.7' would otherwise read as 37).
    """
    if "." in str(v):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid whole number: '{raw}'")
    return handle_int_any(v)


def handle_float_any(v: str) -> float:
    """Validator for unbounded floating-point CLI arguments."""
    val = _extract_signed_float(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")
    return val


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "palette_type": handle_palette_type,
    "color_space": handle_color_space,
    "param": handle_param,
    "int": handle_int_any,
    "float": handle_float_any,
}

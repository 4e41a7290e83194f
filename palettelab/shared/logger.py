#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/logger.py

"""
Terminal logging for the palettelab CLI.

The library never logs or exits; everything here belongs to the command
line layer. Every user-facing failure ends in fail(), which prints an
[error] line (plus an optional [info] hint) and exits with status 2.
"""

import argparse
import sys
from contextlib import contextmanager
from typing import Iterator, NoReturn, Optional

from palettelab.core import config as c
from palettelab.core.hexcodec import FormatError


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in c.STDOUT_LEVELS else sys.stderr
    tag = f"{c.MSG_BOLD_COLORS.get(level, c.RESET)}[{level}]{c.RESET}"
    print(f"{tag} {c.MSG_COLORS.get(level, c.RESET)}{message}{c.RESET}", file=stream)


def fail(message: str, hint: Optional[str] = None) -> NoReturn:
    log("error", message)
    if hint:
        log("info", hint)
    sys.exit(c.EXIT_USAGE)


@contextmanager
def exit_on_error(action: str) -> Iterator[None]:
    """Turn hex parse and file errors raised inside the block into fail().

    action completes the message "could not <action>: <reason>".
    """
    try:
        yield
    except FormatError as exc:
        fail(f"could not {action}: {exc}")
    except OSError as exc:
        fail(f"could not {action}: {exc.strerror or exc}")


class PaletteArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors go through fail() with a --help hint."""

    def error(self, message):
        fail(message, hint=f"use '{self.prog} --help' for more information")

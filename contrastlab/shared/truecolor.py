#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/truecolor.py

import os
import sys


def color_enabled(stream=None) -> bool:
    """Whether ANSI styling should be written to ``stream``.

    Honors NO_COLOR (https://no-color.org) and disables styling when the
    stream is not a terminal.
    """
    if os.environ.get("NO_COLOR"):
        return False
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def truecolor_supported() -> bool:
    """True when the terminal advertises 24-bit color."""
    return os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit")

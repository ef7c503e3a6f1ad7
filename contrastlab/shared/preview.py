#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/preview.py

from contrastlab.core import config as c
from contrastlab.core.color import Color
from contrastlab.core.gamut import fit_to_gamut
from contrastlab.core.conversions import to_srgb
from .formatting import format_color
from .truecolor import color_enabled, truecolor_supported


def swatch(color: Color, width: int = 6) -> str:
    """A block of terminal background color, or nothing when styling is off."""
    if not (color_enabled() and truecolor_supported()):
        return ""
    rgb = to_srgb(fit_to_gamut(color)) if color.is_oklch else to_srgb(color)
    r, g, b = (max(0, min(255, int(round(v * c.RGB_MAX)))) for v in rgb.coords)
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{c.RESET} "


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    padding = " " * max(0, 12 - len(title))
    print(f"{title}{padding}:   {swatch(color)}{format_color(color)}", end=end)

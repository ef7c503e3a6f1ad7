#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/gamut.py

from . import config as c
from .color import Color, OKLCH
from .conversions import in_gamut, linear_to_srgb, oklab_to_linear_srgb, oklch_to_oklab, to_oklch


def _srgb_at(L: float, C: float, h: float):
    return tuple(linear_to_srgb(v) for v in oklab_to_linear_srgb(*oklch_to_oklab(L, C, h)))


def is_displayable(color: Color) -> bool:
    """True when the color lies inside the sRGB cube."""
    if color.space == OKLCH:
        return in_gamut(_srgb_at(*color.coords))
    return color.gamut and in_gamut(color.coords)


def fit_to_gamut(color: Color) -> Color:
    """Map an OKLCH color into sRGB by reducing chroma at constant lightness and hue.

    Colors already inside the gamut come back unchanged. sRGB input must be
    in gamut (an out-of-gamut sRGB result should be fitted from its OKLCH
    source instead).
    """
    color = to_oklch(color)
    L, C, h = color.coords
    if in_gamut(_srgb_at(L, C, h)):
        return color

    low, high = 0.0, C
    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        mid = (low + high) / c.DIV_2
        if in_gamut(_srgb_at(L, mid, h)):
            low = mid
        else:
            high = mid
    return Color(OKLCH, (L, low, h), color.alpha)

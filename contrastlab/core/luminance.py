#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/luminance.py

from . import config as c
from .color import Color
from .conversions import to_linear_srgb


def get_luminance(r: float, g: float, b: float) -> float:
    """Relative luminance from linear-light sRGB channels."""
    return c.LUMA_R * r + c.LUMA_G * g + c.LUMA_B * b


def relative_luminance(color: Color) -> float:
    return get_luminance(*to_linear_srgb(color))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/formatting.py

from contrastlab.core import config as c
from contrastlab.core.color import Color, SRGB
from contrastlab.core.conversions import to_oklch, to_srgb
from contrastlab.core.errors import DomainError


def _to_byte(v: float) -> int:
    return max(0, min(int(c.RGB_MAX), int(round(v * c.RGB_MAX))))


def _num(v: float) -> str:
    """Fixed-point number without trailing zeros."""
    s = f"{v:.{c.COORD_DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def rgb_to_hex(color: Color) -> str:
    """Convert an in-gamut color to #rrggbb (or #rrggbbaa when translucent)."""
    color = to_srgb(color)
    if not color.gamut:
        raise DomainError("color is outside the sRGB gamut and has no hex form")
    out = "#" + "".join(f"{_to_byte(v):02x}" for v in color.coords)
    if color.alpha < c.UNIT:
        out += f"{_to_byte(color.alpha):02x}"
    return out


def format_colorspace(fmt: str, color: Color) -> str:
    if fmt == 'hex':
        return rgb_to_hex(color)
    elif fmt == 'rgb':
        rgb = to_srgb(color)
        if not rgb.gamut:
            return f"color(srgb {' '.join(_num(v) for v in rgb.coords)})"
        r, g, b = (_to_byte(v) for v in rgb.coords)
        if rgb.alpha < c.UNIT:
            return f"rgb({r} {g} {b} / {_num(rgb.alpha)})"
        return f"rgb({r} {g} {b})"
    elif fmt == 'oklch':
        L, C, h = to_oklch(color).coords
        if color.alpha < c.UNIT:
            return f"oklch({_num(L)} {_num(C)} {_num(h)} / {_num(color.alpha)})"
        return f"oklch({_num(L)} {_num(C)} {_num(h)})"

    return ""


def format_color(color: Color) -> str:
    """Render a color in its own space: hex for sRGB, oklch() for OKLCH."""
    if color.space == SRGB:
        return format_colorspace('hex' if color.gamut else 'rgb', color)
    return format_colorspace('oklch', color)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/conversions.py

import functools
import math
from typing import Sequence, Tuple

from . import config as c
from .color import Color, SRGB, OKLCH
from .errors import DomainError

Triple = Tuple[float, float, float]


def _mat3(m: Sequence[Sequence[float]], v: Sequence[float]) -> Triple:
    """Multiply a 3x3 matrix by a column vector."""
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def _cbrt(x: float) -> float:
    return x ** c.OKLAB_CUBE_ROOT_EXP if x >= 0 else -((-x) ** c.OKLAB_CUBE_ROOT_EXP)


def srgb_to_linear(v: float) -> float:
    """Decode one gamma-encoded sRGB component. Extended symmetrically below zero."""
    sign = -1.0 if v < 0 else 1.0
    a = abs(v)
    if a <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return sign * ((a + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(v: float) -> float:
    """Encode one linear-light component. Values outside [0, 1] are not clipped."""
    sign = -1.0 if v < 0 else 1.0
    a = abs(v)
    if a <= c.LINEAR_TO_SRGB_TH:
        return v * c.SRGB_SLOPE
    return sign * (c.SRGB_DIVISOR * (a ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET)


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def linear_srgb_to_oklab(r: float, g: float, b: float) -> Triple:
    """Convert linear sRGB to OKLab."""
    lms = _mat3(c.M_LINEAR_TO_LMS, (r, g, b))
    lms_ = tuple(_cbrt(x) for x in lms)
    return _mat3(c.M_LMS_TO_OKLAB, lms_)


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def oklab_to_linear_srgb(L: float, a: float, b: float) -> Triple:
    """Convert OKLab to linear sRGB."""
    lms_ = _mat3(c.M_OKLAB_TO_LMS, (L, a, b))
    lms = tuple(x ** 3 for x in lms_)
    return _mat3(c.M_LMS_TO_LINEAR, lms)


def normalize_hue(hue: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    hue %= c.HUE_MAX
    # a tiny negative angle wraps to exactly 360.0 in floating point
    return 0.0 if hue >= c.HUE_MAX else hue


def oklab_to_oklch(L: float, a: float, b: float) -> Triple:
    """Convert OKLab to OKLCH. Hue is 0 for achromatic colors."""
    chroma = math.hypot(a, b)
    if chroma < c.ACHROMATIC_EPS:
        return L, chroma, 0.0
    return L, chroma, normalize_hue(math.degrees(math.atan2(b, a)))


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Triple:
    """Convert OKLCH to OKLab."""
    h = math.radians(hue)
    return L, chroma * math.cos(h), chroma * math.sin(h)


def in_gamut(rgb: Sequence[float]) -> bool:
    """True when every channel lies in [0, 1] up to GAMUT_TOLERANCE."""
    lo = -c.GAMUT_TOLERANCE
    hi = c.UNIT + c.GAMUT_TOLERANCE
    return all(lo <= v <= hi for v in rgb)


def _require_in_gamut(color: Color) -> None:
    if not color.gamut or not in_gamut(color.coords):
        names = ("r", "g", "b")
        bad = [f"{n}={v:.6g}" for n, v in zip(names, color.coords) if not 0.0 <= v <= c.UNIT]
        raise DomainError(f"sRGB channels outside [0, 1]: {', '.join(bad) or 'out of gamut'}")


def to_linear_srgb(color: Color) -> Triple:
    """Linear-light sRGB channels of any color, without gamma encoding or clipping."""
    if color.space == SRGB:
        return tuple(srgb_to_linear(v) for v in color.coords)
    return oklab_to_linear_srgb(*oklch_to_oklab(*color.coords))


def to_oklch(color: Color) -> Color:
    """sRGB -> linear sRGB -> LMS -> OKLab -> OKLCH."""
    if color.space == OKLCH:
        return color
    _require_in_gamut(color)
    linear = tuple(srgb_to_linear(v) for v in color.coords)
    L, C, h = oklab_to_oklch(*linear_srgb_to_oklab(*linear))
    return Color(OKLCH, (L, C, h), color.alpha)


def to_srgb(color: Color) -> Color:
    """OKLCH -> OKLab -> LMS -> linear sRGB -> sRGB.

    Channels within GAMUT_TOLERANCE of the cube are snapped onto it. Anything
    further out is kept as computed and the result carries ``gamut=False``.
    """
    if color.space == SRGB:
        return color
    rgb = tuple(linear_to_srgb(v) for v in to_linear_srgb(color))
    if not in_gamut(rgb):
        return Color(SRGB, rgb, color.alpha, gamut=False)
    return Color(SRGB, tuple(min(max(v, 0.0), c.UNIT) for v in rgb), color.alpha)

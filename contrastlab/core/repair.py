#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/repair.py

from typing import List, Optional, Tuple

from . import config as c
from .color import Color, OKLCH
from .contrast import contrast_ratio
from .conversions import to_oklch
from .gamut import fit_to_gamut
from .luminance import relative_luminance


def _at_lightness(L: float, base: Color) -> Color:
    _, C, h = base.coords
    return fit_to_gamut(Color(OKLCH, (L, C, h), base.alpha))


def _search(base: Color, lo: float, hi: float, target_Y: float, rising: bool) -> float:
    """Binary search the lightness whose luminance meets target_Y.

    With ``rising`` the result is the lowest L in [lo, hi] reaching at least
    target_Y, otherwise the highest L staying at or below it.
    """
    for _ in range(c.CONTRAST_BINARY_SEARCH_ITERATIONS):
        mid = (lo + hi) / c.DIV_2
        Y = relative_luminance(_at_lightness(mid, base))
        if rising:
            if Y >= target_Y:
                hi = mid
            else:
                lo = mid
        else:
            if Y <= target_Y:
                lo = mid
            else:
                hi = mid
    return hi if rising else lo


def suggest_foreground(fg: Color, bg: Color, threshold: float) -> Optional[Color]:
    """Find the foreground closest in OKLCH lightness that meets ``threshold`` against ``bg``.

    Chroma and hue of the original foreground are kept (chroma is reduced
    only as far as needed to stay displayable). Returns the foreground itself
    when it already passes, and None when neither a lighter nor a darker
    variant can reach the threshold.
    """
    base = to_oklch(fg)
    bg = fit_to_gamut(bg)
    if contrast_ratio(fit_to_gamut(base), bg) >= threshold:
        return base

    L0 = base.coords[0]
    target = threshold + c.REPAIR_MARGIN
    bg_Y = relative_luminance(bg)
    Y_light = target * (bg_Y + c.WCAG_LUMINANCE_OFFSET) - c.WCAG_LUMINANCE_OFFSET
    Y_dark = (bg_Y + c.WCAG_LUMINANCE_OFFSET) / target - c.WCAG_LUMINANCE_OFFSET

    candidates: List[Tuple[float, Color]] = []

    if Y_light <= c.UNIT and relative_luminance(_at_lightness(c.OKLCH_L_MAX, base)) >= Y_light:
        L = _search(base, L0, c.OKLCH_L_MAX, Y_light, rising=True)
        candidates.append((abs(L - L0), _at_lightness(L, base)))

    if Y_dark >= 0.0 and relative_luminance(_at_lightness(0.0, base)) <= Y_dark:
        L = _search(base, 0.0, L0, Y_dark, rising=False)
        candidates.append((abs(L - L0), _at_lightness(L, base)))

    passing = [(d, col) for d, col in candidates if contrast_ratio(col, bg) >= threshold]
    if not passing:
        return None
    passing.sort(key=lambda x: x[0])
    return passing[0][1]

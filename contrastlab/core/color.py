#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/color.py

"""Immutable color values in the two representations the engine understands.

A Color is either ``srgb`` (gamma-encoded R, G, B in [0, 1]) or ``oklch``
(L in [0, 1], C in [0, 0.4], h in [0, 360)). Ranges are checked when the
value is built and violations raise DomainError instead of being clamped.

The one sanctioned exception is an sRGB result of ``to_srgb`` flagged with
``gamut=False``: its channels are kept exactly as computed so callers can
see how far outside the cube the color landed.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from . import config as c
from .errors import DomainError

SRGB = "srgb"
OKLCH = "oklch"
SPACES = (SRGB, OKLCH)

_CHANNEL_NAMES = {
    SRGB: ("r", "g", "b"),
    OKLCH: ("l", "c", "h"),
}


def _check_range(name: str, value: float, lo: float, hi: float, hi_inclusive: bool = True) -> None:
    tol = c.RANGE_TOLERANCE
    upper_ok = value <= hi + tol if hi_inclusive else value < hi
    if not (lo - tol <= value and upper_ok):
        bracket = "]" if hi_inclusive else ")"
        raise DomainError(f"channel '{name}' = {value!r} is outside [{lo:g}, {hi:g}{bracket}")


@dataclass(frozen=True)
class Color:
    space: str
    coords: Tuple[float, float, float]
    alpha: float = c.UNIT
    gamut: bool = True

    def __post_init__(self):
        if self.space not in SPACES:
            raise DomainError(f"unknown color space '{self.space}'")
        coords = tuple(float(v) for v in self.coords)
        if len(coords) != 3:
            raise DomainError(f"{self.space} color needs 3 channels, got {len(coords)}")
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "alpha", float(self.alpha))

        names = _CHANNEL_NAMES[self.space]
        for name, value in zip(names, coords):
            if not math.isfinite(value):
                raise DomainError(f"channel '{name}' = {value!r} is not a finite number")
        if not math.isfinite(self.alpha):
            raise DomainError(f"alpha = {self.alpha!r} is not a finite number")
        _check_range("alpha", self.alpha, 0.0, c.UNIT)

        if self.space == SRGB:
            if self.gamut:
                for name, value in zip(names, coords):
                    _check_range(name, value, 0.0, c.UNIT)
        else:
            L, C, h = coords
            _check_range("l", L, 0.0, c.OKLCH_L_MAX)
            _check_range("c", C, 0.0, c.OKLCH_C_MAX)
            _check_range("h", h, 0.0, c.HUE_MAX, hi_inclusive=False)

    @property
    def is_oklch(self) -> bool:
        return self.space == OKLCH

    @property
    def transparent(self) -> bool:
        return self.alpha <= 0.0


def srgb(r: float, g: float, b: float, alpha: float = c.UNIT) -> Color:
    """Build an sRGB color from normalized [0, 1] channels."""
    return Color(SRGB, (r, g, b), alpha)


def oklch(L: float, C: float, h: float, alpha: float = c.UNIT) -> Color:
    """Build an OKLCH color."""
    return Color(OKLCH, (L, C, h), alpha)

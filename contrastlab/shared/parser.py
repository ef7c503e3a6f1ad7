#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/parser.py

import math
import re

from contrastlab.core import config as c
from contrastlab.core.color import Color, oklch, srgb
from contrastlab.core.conversions import normalize_hue
from contrastlab.core.errors import InvalidInputError

# Regex breakdown:
# #?                         -> Optional hash sign
# ([0-9a-f]{3,4}|...)        -> Shorthand (#rgb, #rgba) or full (#rrggbb, #rrggbbaa) digits
HEX_REGEX = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"

# oklch(L C h [/ alpha]); L and alpha may be percentages, hue may carry 'deg'
OKLCH_REGEX = re.compile(
    r"^oklch\(\s*"
    rf"(?P<l>{_NUMBER})(?P<l_pct>%)?\s+"
    rf"(?P<c>{_NUMBER})\s+"
    rf"(?P<h>{_NUMBER})(?:deg)?"
    rf"(?:\s*/\s*(?P<a>{_NUMBER})(?P<a_pct>%)?)?"
    r"\s*\)$",
    re.IGNORECASE,
)


def _strip_and_unquote(s: str) -> str:
    s = str(s).strip()
    # Remove matching surrounding quotes or backticks
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


def _to_float(token: str, text: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise InvalidInputError(f"non-finite number in color '{text}'")
    return value


def parse_hex(text: str) -> Color:
    """Parse #rgb, #rgba, #rrggbb or #rrggbbaa into an sRGB color."""
    s = _strip_and_unquote(text)
    m = HEX_REGEX.match(s)
    if not m:
        raise InvalidInputError(f"invalid hex color '{text}'")
    digits = m.group(1)
    if len(digits) in (3, 4):
        # e.g., 'ABC' becomes 'AABBCC'
        digits = "".join(ch * 2 for ch in digits)
    channels = [int(digits[i : i + 2], 16) / c.RGB_MAX for i in range(0, len(digits), 2)]
    alpha = channels[3] if len(channels) == 4 else c.UNIT
    return srgb(channels[0], channels[1], channels[2], alpha)


def parse_oklch(text: str) -> Color:
    """Parse functional ``oklch(L C h [/ alpha])`` notation.

    L is a number in [0, 1] or a percentage; C is a bare number; the hue is
    an angle in degrees and wraps around the circle like a CSS angle.
    """
    s = _strip_and_unquote(text)
    m = OKLCH_REGEX.match(s)
    if not m:
        raise InvalidInputError(f"invalid oklch color '{text}'")

    L = _to_float(m.group("l"), text)
    if m.group("l_pct"):
        L /= c.PERCENT
    C = _to_float(m.group("c"), text)
    h = normalize_hue(_to_float(m.group("h"), text))

    alpha = c.UNIT
    if m.group("a") is not None:
        alpha = _to_float(m.group("a"), text)
        if m.group("a_pct"):
            alpha /= c.PERCENT

    return oklch(L, C, h, alpha)


def parse_color(text: str) -> Color:
    """Parse a color token: hex or functional oklch() notation."""
    if not isinstance(text, str):
        raise InvalidInputError(f"color must be a string, got {type(text).__name__}")
    s = _strip_and_unquote(text)
    if not s:
        raise InvalidInputError("empty color value")
    fmt = "oklch" if s.lower().startswith("oklch") else "hex"
    return STRING_PARSERS[fmt](s)


# Central dictionary to map format strings to their respective parsing functions
STRING_PARSERS = {
    'hex': parse_hex,
    'oklch': parse_oklch,
}

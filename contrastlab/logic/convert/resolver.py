#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/resolver.py

from typing import Optional

from contrastlab.core.color import Color, SRGB
from contrastlab.shared.parser import parse_color


def resolve_convert_input(value: str) -> Color:
    return parse_color(value)


def resolve_target_format(color: Color, to_format: Optional[str]) -> str:
    """Default target is the other space: hex input goes to oklch and vice versa."""
    if to_format:
        return to_format
    return "oklch" if color.space == SRGB else "hex"

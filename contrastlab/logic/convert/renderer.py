#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/renderer.py

from contrastlab.core import config as c
from contrastlab.core.color import Color
from contrastlab.shared.formatting import format_colorspace
from contrastlab.shared.logger import style


def render_convert_info(color: Color, fmt: str) -> str:
    """Composes a color into a formatted output string."""
    return style(format_colorspace(fmt, color), c.BOLD_WHITE)


def render_conversion(src: Color, out: Color, src_fmt: str, fmt: str, verbose: bool) -> None:
    text = render_convert_info(out, fmt)
    if verbose:
        arrow = style("->", c.MSG_BOLD_COLORS["info"])
        print(f"{render_convert_info(src, src_fmt)} {arrow} {text}")
    else:
        print(text)

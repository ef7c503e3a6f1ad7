#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/convert/engine.py

import argparse

from contrastlab.core import config as c
from contrastlab.core.color import SRGB
from contrastlab.core.conversions import to_oklch, to_srgb
from contrastlab.core.errors import ContrastlabError
from contrastlab.core.gamut import fit_to_gamut, is_displayable
from contrastlab.shared.logger import log
from .resolver import resolve_convert_input, resolve_target_format
from .renderer import render_conversion


def run(args: argparse.Namespace) -> int:
    """Main execution engine for color conversion"""
    try:
        src = resolve_convert_input(args.value)
        fmt = resolve_target_format(src, args.to_format)
        src_fmt = "hex" if src.space == SRGB else "oklch"

        color = src
        if not is_displayable(color):
            if args.fit:
                color = fit_to_gamut(color)
                log("info", "chroma reduced to fit the sRGB gamut")
            elif fmt == "hex":
                log("error", "color is outside the sRGB gamut and has no hex form (use --fit)")
                return c.EXIT_CONFIG
            else:
                log("warning", "color is outside the sRGB gamut; channels are not clipped")

        out = to_oklch(color) if fmt == "oklch" else to_srgb(color)
        render_conversion(src, out, src_fmt, fmt, args.verbose)
    except ContrastlabError as exc:
        log("error", str(exc))
        return c.EXIT_CONFIG
    return c.EXIT_OK

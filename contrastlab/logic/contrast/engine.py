#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/engine.py

import argparse

from contrastlab.core import config as c
from contrastlab.core.contrast import ContrastPair, ContrastPolicy, evaluate, wcag_levels
from contrastlab.core.errors import ContrastlabError
from contrastlab.shared.logger import log
from contrastlab.shared.parser import parse_color
from .renderer import render_contrast_info, render_contrast_json


def run(args: argparse.Namespace) -> int:
    """Main execution engine for ad-hoc pair checks"""
    try:
        fg = parse_color(args.foreground)
        bg = parse_color(args.background)
        thresholds = {args.context: args.threshold} if args.threshold is not None else {}
        gamut = c.GAMUT_FIT if args.fit else c.GAMUT_STRICT
        policy = ContrastPolicy(thresholds=thresholds, gamut=gamut)
        result = evaluate(ContrastPair(fg, bg, args.context), policy)
    except ContrastlabError as exc:
        log("error", str(exc))
        return c.EXIT_CONFIG

    levels = wcag_levels(result.ratio)
    if args.json:
        render_contrast_json(result, levels)
    else:
        render_contrast_info(fg, bg, result, levels)
    return c.EXIT_OK if result.passed else c.EXIT_FAIL

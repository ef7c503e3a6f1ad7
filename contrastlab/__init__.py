#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/__init__.py

__version__ = "0.1.0"

from contrastlab.core.color import Color, oklch, srgb
from contrastlab.core.contrast import (
    DEFAULT_POLICY,
    ContrastPair,
    ContrastPolicy,
    ValidationResult,
    contrast_ratio,
    evaluate,
    wcag_levels,
)
from contrastlab.core.conversions import to_oklch, to_srgb
from contrastlab.core.errors import ConfigError, ContrastlabError, DomainError, InvalidInputError
from contrastlab.core.gamut import fit_to_gamut
from contrastlab.core.luminance import relative_luminance
from contrastlab.core.palette import Palette, Rule, validate
from contrastlab.core.repair import suggest_foreground
from contrastlab.core.tokens import TokenFile, load_token_file
from contrastlab.shared.parser import parse_color

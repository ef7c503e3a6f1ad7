#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/check/resolver.py

from typing import Dict, List, Optional

from contrastlab.core.contrast import ValidationResult
from contrastlab.core.palette import validate
from contrastlab.core.repair import suggest_foreground
from contrastlab.core.tokens import TokenFile, load_token_file
from contrastlab.shared.formatting import format_colorspace


def resolve_check_input(path: str) -> TokenFile:
    """Load one token file; configuration errors propagate to the engine."""
    return load_token_file(path)


def run_rules(tokens: TokenFile) -> List[ValidationResult]:
    return validate(tokens.palette, tokens.rules, tokens.policy)


def resolve_suggestions(tokens: TokenFile, results: List[ValidationResult]) -> Dict[int, Optional[str]]:
    """Suggested foreground per failing result index (None when no lightness works)."""
    suggestions: Dict[int, Optional[str]] = {}
    for index, result in enumerate(results):
        if result.passed:
            continue
        fixed = suggest_foreground(
            tokens.palette[result.fg], tokens.palette[result.bg], result.threshold
        )
        suggestions[index] = format_colorspace("oklch", fixed) if fixed is not None else None
    return suggestions

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/contrast.py

import math
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from . import config as c
from .color import Color
from .errors import ConfigError, DomainError, InvalidInputError
from .gamut import fit_to_gamut, is_displayable
from .luminance import relative_luminance
from contrastlab.shared.formatting import format_color


def _check_threshold(context: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"threshold for '{context}' must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ConfigError(f"threshold for '{context}' must be finite, got {value!r}")
    if value <= 0:
        raise ConfigError(f"threshold for '{context}' must be positive, got {value:g}")
    if value <= c.WCAG_MIN_RATIO:
        raise ConfigError(
            f"threshold for '{context}' must be greater than {c.WCAG_MIN_RATIO:g}, got {value:g}"
        )
    return value


@dataclass(frozen=True)
class ContrastPolicy:
    """Thresholds per usage context, plus how out-of-gamut colors are treated."""

    thresholds: Mapping[str, float] = field(default_factory=lambda: dict(c.DEFAULT_THRESHOLDS))
    gamut: str = c.GAMUT_STRICT

    def __post_init__(self):
        merged: Dict[str, float] = dict(c.DEFAULT_THRESHOLDS)
        for context, value in dict(self.thresholds).items():
            if context not in c.CONTEXTS:
                raise ConfigError(
                    f"unknown context '{context}' (expected one of: {', '.join(c.CONTEXTS)})"
                )
            merged[context] = _check_threshold(context, value)
        object.__setattr__(self, "thresholds", merged)
        if self.gamut not in c.GAMUT_MODES:
            raise ConfigError(
                f"unknown gamut mode '{self.gamut}' (expected one of: {', '.join(c.GAMUT_MODES)})"
            )

    def threshold_for(self, context: str) -> float:
        try:
            return self.thresholds[context]
        except KeyError:
            raise ConfigError(
                f"unknown context '{context}' (expected one of: {', '.join(c.CONTEXTS)})"
            ) from None


DEFAULT_POLICY = ContrastPolicy()


@dataclass(frozen=True)
class ContrastPair:
    fg: Color
    bg: Color
    context: str = c.CONTEXT_BODY


@dataclass(frozen=True)
class ValidationResult:
    fg: str
    bg: str
    context: str
    ratio: float
    threshold: float
    passed: bool

    def as_record(self) -> dict:
        return {
            "fg": self.fg,
            "bg": self.bg,
            "context": self.context,
            "ratio": round(self.ratio, c.RATIO_DECIMALS),
            "threshold": self.threshold,
            "pass": self.passed,
        }


def _displayable(color: Color, side: str, fit: bool) -> Color:
    if is_displayable(color):
        return color
    if fit:
        return fit_to_gamut(color)
    raise DomainError(f"{side} color is outside the sRGB gamut")


def contrast_ratio(a: Color, b: Color, fit: bool = False) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    Formula: (L1 + 0.05) / (L2 + 0.05), where L1 is the lighter luminance.
    The result is symmetric in its arguments and never below 1.0.
    """
    y1 = relative_luminance(_displayable(a, "first", fit))
    y2 = relative_luminance(_displayable(b, "second", fit))

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    ratio = (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)
    return max(c.WCAG_MIN_RATIO, min(c.WCAG_MAX_RATIO, ratio))


def classify(ratio: float, context: str, policy: ContrastPolicy = DEFAULT_POLICY) -> Tuple[float, bool]:
    """Return (threshold, passed) for a ratio in a usage context."""
    threshold = policy.threshold_for(context)
    return threshold, ratio >= threshold


def evaluate(
    pair: ContrastPair,
    policy: ContrastPolicy = DEFAULT_POLICY,
    fg_label: Optional[str] = None,
    bg_label: Optional[str] = None,
) -> ValidationResult:
    """Evaluate one foreground/background pair against the policy."""
    if pair.fg.transparent:
        raise InvalidInputError("foreground is fully transparent; contrast is undefined without a backdrop")
    if pair.bg.transparent:
        raise InvalidInputError("background is fully transparent; contrast is undefined without a backdrop")

    fit = policy.gamut == c.GAMUT_FIT
    fg = _displayable(pair.fg, "foreground", fit)
    bg = _displayable(pair.bg, "background", fit)
    ratio = contrast_ratio(fg, bg)
    threshold, passed = classify(ratio, pair.context, policy)

    return ValidationResult(
        fg=fg_label if fg_label is not None else format_color(pair.fg),
        bg=bg_label if bg_label is not None else format_color(pair.bg),
        context=pair.context,
        ratio=ratio,
        threshold=threshold,
        passed=passed,
    )


def wcag_levels(ratio: float) -> Dict[str, str]:
    """Pass/fail for every WCAG 2.1 level at a given ratio."""
    return {
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
    }

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/palette.py

"""Palette validation: run the contrast evaluator over an ordered rule set.

A Palette maps unique role names (``fg``, ``bg``, ``accent``...) to colors
and cannot change once built. ``validate`` checks every referenced role and
context up front, so a malformed rule set fails as a whole instead of
producing a partial report.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

from . import config as c
from .color import Color
from .contrast import DEFAULT_POLICY, ContrastPair, ContrastPolicy, ValidationResult, evaluate
from .errors import ConfigError, ContrastlabError


class Palette(Mapping[str, Color]):
    """Read-only mapping of role name to Color."""

    def __init__(self, entries: Union[Mapping[str, Color], Iterable[Tuple[str, Color]]] = ()):
        if isinstance(entries, Mapping):
            entries = entries.items()
        roles: Dict[str, Color] = {}
        for name, color in entries:
            if not isinstance(name, str) or not name:
                raise ConfigError(f"role name must be a non-empty string, got {name!r}")
            if not isinstance(color, Color):
                raise ConfigError(f"role '{name}' must map to a Color, got {type(color).__name__}")
            if name in roles:
                raise ConfigError(f"duplicate role '{name}'")
            roles[name] = color
        self._roles = roles

    def __getitem__(self, name: str) -> Color:
        return self._roles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    def __repr__(self) -> str:
        return f"Palette({list(self._roles)})"


@dataclass(frozen=True)
class Rule:
    fg: str
    bg: str
    context: str = c.CONTEXT_BODY


def _check_rules(palette: Palette, rules: Sequence[Rule], policy: ContrastPolicy) -> None:
    for rule in rules:
        for role in (rule.fg, rule.bg):
            if role not in palette:
                raise ConfigError(f"rule '{rule.fg}' on '{rule.bg}' references missing role '{role}'")
        policy.threshold_for(rule.context)


def validate(
    palette: Palette,
    rules: Iterable[Rule],
    policy: ContrastPolicy = DEFAULT_POLICY,
) -> List[ValidationResult]:
    """Evaluate every rule in order. Raises before evaluating anything if a rule is malformed."""
    rules = list(rules)
    _check_rules(palette, rules, policy)

    results: List[ValidationResult] = []
    for rule in rules:
        pair = ContrastPair(palette[rule.fg], palette[rule.bg], rule.context)
        try:
            results.append(evaluate(pair, policy, fg_label=rule.fg, bg_label=rule.bg))
        except ContrastlabError as exc:
            raise type(exc)(f"rule '{rule.fg}' on '{rule.bg}': {exc}") from exc
    return results


def all_passed(results: Iterable[ValidationResult]) -> bool:
    return all(r.passed for r in results)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/tokens.py

"""Token file loading.

A token file is a JSON document::

    {
      "palette": {"fg": "oklch(0.30 0.03 260)", "bg": "oklch(0.97 0 0)"},
      "rules": [{"fg": "fg", "bg": "bg", "context": "body"}],
      "thresholds": {"body": 4.5, "large": 3.0},
      "gamut": "strict"
    }

Only ``palette`` is required. Duplicate keys anywhere in the document are
rejected while parsing, so a role can never silently shadow another.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Tuple, Union

from . import config as c
from .contrast import ContrastPolicy
from .errors import ConfigError, ContrastlabError
from .palette import Palette, Rule
from contrastlab.shared.parser import parse_color

_TOP_LEVEL_KEYS = ("palette", "rules", "thresholds", "gamut")


@dataclass(frozen=True)
class TokenFile:
    palette: Palette
    rules: Tuple[Rule, ...] = ()
    policy: ContrastPolicy = field(default_factory=ContrastPolicy)
    source: str = "<tokens>"


def _reject_duplicates(pairs: List[Tuple[str, Any]]) -> dict:
    seen = {}
    for key, value in pairs:
        if key in seen:
            raise ConfigError(f"duplicate key '{key}'")
        seen[key] = value
    return seen


def _parse_palette(raw: Any) -> Palette:
    if not isinstance(raw, Mapping):
        raise ConfigError("'palette' must be an object mapping role names to colors")
    entries = []
    for role, value in raw.items():
        try:
            color = parse_color(value)
        except ContrastlabError as exc:
            raise type(exc)(f"role '{role}': {exc}") from exc
        entries.append((role, color))
    return Palette(entries)


def _parse_rules(raw: Any) -> Tuple[Rule, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError("'rules' must be a list of {fg, bg, context} objects")
    rules = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise ConfigError(f"rule #{index} must be an object, got {type(entry).__name__}")
        unknown = set(entry) - {"fg", "bg", "context"}
        if unknown:
            raise ConfigError(f"rule #{index} has unknown keys: {', '.join(sorted(unknown))}")
        try:
            fg, bg = entry["fg"], entry["bg"]
        except KeyError as exc:
            raise ConfigError(f"rule #{index} is missing '{exc.args[0]}'") from None
        context = entry.get("context", c.CONTEXT_BODY)
        for name, value in (("fg", fg), ("bg", bg), ("context", context)):
            if not isinstance(value, str) or not value:
                raise ConfigError(f"rule #{index}: '{name}' must be a non-empty string")
        if context not in c.CONTEXTS:
            raise ConfigError(
                f"rule #{index}: unknown context '{context}' (expected one of: {', '.join(c.CONTEXTS)})"
            )
        rules.append(Rule(fg, bg, context))
    return tuple(rules)


def _parse_policy(thresholds: Any, gamut: Any) -> ContrastPolicy:
    if thresholds is None:
        thresholds = {}
    if not isinstance(thresholds, Mapping):
        raise ConfigError("'thresholds' must be an object mapping contexts to ratios")
    if gamut is None:
        gamut = c.GAMUT_STRICT
    return ContrastPolicy(thresholds=dict(thresholds), gamut=gamut)


def parse_tokens(data: Mapping[str, Any], source: str = "<tokens>") -> TokenFile:
    """Build a TokenFile from an already-decoded document."""
    if not isinstance(data, Mapping):
        raise ConfigError(f"{source}: top level must be an object")
    unknown = set(data) - set(_TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigError(f"{source}: unknown keys: {', '.join(sorted(unknown))}")
    if "palette" not in data:
        raise ConfigError(f"{source}: missing 'palette'")
    try:
        return TokenFile(
            palette=_parse_palette(data["palette"]),
            rules=_parse_rules(data.get("rules")),
            policy=_parse_policy(data.get("thresholds"), data.get("gamut")),
            source=source,
        )
    except ContrastlabError as exc:
        raise type(exc)(f"{source}: {exc}") from exc


def loads(text: str, source: str = "<tokens>") -> TokenFile:
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicates)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{source}: invalid JSON: {exc}") from exc
    except ConfigError as exc:
        raise ConfigError(f"{source}: {exc}") from exc
    return parse_tokens(data, source)


def load_token_file(path: Union[str, Path]) -> TokenFile:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read token file '{path}': {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"cannot read token file '{path}': not valid UTF-8 ({exc.reason})") from exc
    return loads(text, source=str(path))

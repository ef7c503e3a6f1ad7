#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/check/renderer.py

import json
from typing import Dict, List, Optional

from contrastlab.core import config as c
from contrastlab.core.contrast import ValidationResult
from contrastlab.shared.logger import style


def _status(passed: bool) -> str:
    if passed:
        return style("[PASS]", c.MSG_BOLD_COLORS["success"])
    return style("[FAIL]", c.MSG_BOLD_COLORS["error"])


def render_check_text(
    source: str,
    results: List[ValidationResult],
    suggestions: Optional[Dict[int, Optional[str]]] = None,
) -> None:
    suggestions = suggestions or {}
    print(style(source, c.BOLD_WHITE))
    if not results:
        print("  no rules")
        return

    width = max(len(f"{r.fg} on {r.bg}") for r in results)
    for index, r in enumerate(results):
        label = f"{r.fg} on {r.bg}".ljust(width)
        op = ">=" if r.passed else "<"
        print(
            f"  {_status(r.passed)} {label}  {r.ratio:6.2f}:1 {op} {r.threshold:g} ({r.context})"
        )
        if index in suggestions:
            fix = suggestions[index]
            hint = f"try {r.fg}: {fix}" if fix else "no lightness of this hue reaches the threshold"
            print(f"         {style(hint, c.MSG_COLORS['info'])}")

    failed = sum(1 for r in results if not r.passed)
    summary = f"{len(results) - failed} passed, {failed} failed"
    print(f"  {style(summary, c.MSG_BOLD_COLORS['error' if failed else 'success'])}")


def build_records(
    source: str,
    results: List[ValidationResult],
    suggestions: Optional[Dict[int, Optional[str]]] = None,
    with_source: bool = False,
) -> List[dict]:
    records = []
    for index, r in enumerate(results):
        record = r.as_record()
        if with_source:
            record = {"file": source, **record}
        if suggestions is not None and index in suggestions:
            record["suggest"] = suggestions[index]
        records.append(record)
    return records


def render_check_json(records: List[dict]) -> None:
    print(json.dumps(records, indent=2))

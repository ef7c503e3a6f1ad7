#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/check/engine.py

import argparse

from contrastlab.core import config as c
from contrastlab.core.palette import all_passed
from contrastlab.core.errors import ContrastlabError
from contrastlab.shared.logger import log
from .resolver import resolve_check_input, resolve_suggestions, run_rules
from .renderer import build_records, render_check_json, render_check_text


def run(args: argparse.Namespace) -> int:
    """Validate every token file independently and return the process exit code."""
    records = []
    any_failed = False
    any_error = False
    batch = len(args.files) > 1

    for path in args.files:
        try:
            tokens = resolve_check_input(path)
            results = run_rules(tokens)
            suggestions = resolve_suggestions(tokens, results) if args.suggest else None
        except ContrastlabError as exc:
            log("error", str(exc))
            any_error = True
            continue

        if not all_passed(results):
            any_failed = True

        if args.json:
            records.extend(build_records(tokens.source, results, suggestions, with_source=batch))
        else:
            render_check_text(tokens.source, results, suggestions)

    if args.json and not any_error:
        render_check_json(records)

    if any_error:
        return c.EXIT_CONFIG
    return c.EXIT_FAIL if any_failed else c.EXIT_OK

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/logic/contrast/renderer.py

import json
from typing import Dict

from contrastlab.core import config as c
from contrastlab.core.color import Color
from contrastlab.core.contrast import ValidationResult
from contrastlab.shared.logger import style
from contrastlab.shared.preview import print_color_block


def _level(value: str) -> str:
    color = c.MSG_COLORS["success"] if value == "Pass" else c.MSG_COLORS["error"]
    return style(value, color)


def render_contrast_info(fg: Color, bg: Color, result: ValidationResult, levels: Dict[str, str]) -> None:
    print_color_block(fg, "foreground")
    print_color_block(bg, "background")
    print()
    verdict = "pass" if result.passed else "fail"
    verdict = style(verdict, c.MSG_BOLD_COLORS["success" if result.passed else "error"])
    print(f"ratio       :   {style(f'{result.ratio:.2f}:1', c.BOLD_WHITE)}")
    print(f"threshold   :   {result.threshold:g} ({result.context}) {verdict}")
    print(
        f"wcag        :   AA {_level(levels['AA'])}  AA-Large {_level(levels['AA-Large'])}  "
        f"AAA {_level(levels['AAA'])}  AAA-Large {_level(levels['AAA-Large'])}"
    )


def render_contrast_json(result: ValidationResult, levels: Dict[str, str]) -> None:
    record = result.as_record()
    record["levels"] = levels
    print(json.dumps(record, indent=2))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/logger.py

import sys
import argparse

from contrastlab.core import config as c
from .truecolor import color_enabled


def style(text, color_code: str, stream=None) -> str:
    """Wrap text in an ANSI code when the stream accepts styling."""
    if not color_enabled(stream):
        return str(text)
    return f"{color_code}{text}{c.RESET}"


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{style(f'[{level}]', tag_color, stream)} {style(message, msg_color, stream)}", file=stream)


class ContrastlabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits the program with the standard CLI error code 2.
        """
        log('error', message)
        sys.exit(c.EXIT_CONFIG)

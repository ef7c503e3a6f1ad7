#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/contrast.py

import argparse
import sys
from typing import List, Optional

from contrastlab.core import config as c
from contrastlab.logic.contrast import engine
from contrastlab.shared.logger import ContrastlabArgumentParser


def _threshold(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold '{value}'")


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab contrast",
        description="contrastlab contrast: WCAG contrast ratio between two colors",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "foreground",
        help="foreground color, must be in quotes\n"
        "examples:\n"
        '  "#1f2937"\n'
        '  "oklch(0.30 0.03 260)"\n'
        '  "oklch(30%% 0.03 260deg / 0.9)"',
    )
    parser.add_argument("background", help="background color, same notations as the foreground")
    parser.add_argument(
        "-c",
        "--context",
        choices=list(c.CONTEXTS),
        default=c.CONTEXT_BODY,
        help=f"usage context (default: {c.CONTEXT_BODY})\n"
        f"  {c.CONTEXT_BODY}: body text, {c.WCAG_AA_NORMAL:g}:1\n"
        f"  {c.CONTEXT_LARGE}: large text and UI, {c.WCAG_AA_LARGE:g}:1",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=_threshold,
        default=None,
        help="custom minimum ratio for the chosen context (must be greater than 1)",
    )
    parser.add_argument(
        "--fit",
        action="store_true",
        help="reduce chroma of out-of-gamut colors instead of failing",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    return parser


def handle_contrast_command(args: argparse.Namespace) -> int:
    return engine.run(args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return handle_contrast_command(args)


if __name__ == "__main__":
    sys.exit(main())
